"""
Lambda handler for breeding events and the breeding dashboard.
"""
from datetime import date
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.handlers.api import CrudResource, handle_request
from src.handlers.exceptions import BadRequestError
from src.models.breeding import BreedingDashboardData, BreedingEventInsert, BreedingEventUpdate
from src.services.breeding import (
    create_breeding_event,
    delete_breeding_event,
    get_breeding_dashboard_data,
    get_breeding_event,
    get_breeding_events,
    update_breeding_event,
)
from src.utils.http import get_query_params
from src.utils.logging import logger

tracer = Tracer()

RESOURCES = [
    CrudResource(
        path="/breeding-events",
        list_records=get_breeding_events,
        get_record=get_breeding_event,
        create_record=create_breeding_event,
        update_record=update_breeding_event,
        delete_record=delete_breeding_event,
        insert_model=BreedingEventInsert,
        update_model=BreedingEventUpdate,
    )
]


def breeding_dashboard(user_id: str, event: Dict[str, Any]) -> BreedingDashboardData:
    """
    Breeding dashboard counters for the user.

    Accepts an optional ``as_of`` query parameter (YYYY-MM-DD) to evaluate
    the lactation window against a date other than today.
    """
    as_of = get_query_params(event).get("as_of")
    try:
        today = date.fromisoformat(as_of) if as_of else None
    except ValueError:
        raise BadRequestError(f"as_of must be a date in YYYY-MM-DD format, got {as_of!r}")
    return get_breeding_dashboard_data(user_id, today)


ACTIONS = {
    ("GET", "/breeding-events/dashboard"): breeding_dashboard,
}


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle breeding event requests.

    Args:
        event: API Gateway event
        context: Lambda context

    Returns:
        API Gateway response
    """
    return handle_request(event, RESOURCES, ACTIONS)
