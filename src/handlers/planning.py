"""
Lambda handler for the strategic planning hub summary.
"""
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.handlers.api import handle_request
from src.models.planning import PlanningSummary
from src.services.planning import get_planning_summary
from src.utils.logging import logger

tracer = Tracer()


def planning_summary(user_id: str, event: Dict[str, Any]) -> PlanningSummary:
    return get_planning_summary(user_id)


ACTIONS = {
    ("GET", "/planning/summary"): planning_summary,
}


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """Handle planning hub requests."""
    return handle_request(event, [], ACTIONS)
