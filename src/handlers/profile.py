"""
Lambda handler for the authenticated user's profile.
"""
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.handlers.api import handle_request
from src.models.profile import ProfileUpdate
from src.services.profiles import get_initials, get_profile, save_profile
from src.utils.http import get_user_email, parse_body
from src.utils.logging import logger

tracer = Tracer()


def read_profile(user_id: str, event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Profile with display initials; ``profile`` is null until one is saved.

    Initials fall back to the signed-in email when no name is stored.
    """
    profile = get_profile(user_id)
    return {
        "profile": profile.model_dump(mode="json") if profile else None,
        "initials": get_initials(profile, get_user_email(event))
    }


def write_profile(user_id: str, event: Dict[str, Any]) -> Dict[str, Any]:
    profile = save_profile(user_id, ProfileUpdate(**parse_body(event)))
    return {
        "profile": profile.model_dump(mode="json"),
        "initials": get_initials(profile, get_user_email(event))
    }


ACTIONS = {
    ("GET", "/profile"): read_profile,
    ("PUT", "/profile"): write_profile,
}


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """Handle profile requests."""
    return handle_request(event, [], ACTIONS)
