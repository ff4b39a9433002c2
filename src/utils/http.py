"""
Helpers for API Gateway proxy events and responses.
"""
import json
from typing import Any, Dict, Optional

from pydantic import BaseModel

from src.handlers.exceptions import BadRequestError, UnauthorizedError
from src.utils.logging import logger


def to_jsonable(value: Any) -> Any:
    """Convert models (or lists of models) into JSON-compatible data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [to_jsonable(v) for v in value]
    return value


def json_response(status_code: int, body: Any = None) -> Dict[str, Any]:
    """
    Build an API Gateway proxy response.

    Args:
        status_code: HTTP status code
        body: Response payload; omitted for 204 responses

    Returns:
        API Gateway Lambda proxy response
    """
    response = {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"}
    }
    if status_code != 204:
        response["body"] = json.dumps(to_jsonable(body))
    return response


def error_response(status_code: int, message: str, details: Optional[Any] = None) -> Dict[str, Any]:
    body = {"error": message}
    if details is not None:
        body["details"] = details
    return json_response(status_code, body)


def get_user_id(event: Dict[str, Any]) -> str:
    """
    Extract the authenticated user's ID from the request context.

    Authentication happens before the Lambda is invoked; the authorizer
    places the user ID in the Cognito ``sub`` claim or, for custom
    authorizers, in ``principalId``.

    Raises:
        UnauthorizedError: If no user ID is present
    """
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}
    claims = authorizer.get("claims") or {}
    user_id = claims.get("sub") or authorizer.get("principalId")

    if not user_id:
        logger.warning("Request without authenticated user", extra={
            "path": event.get("path"),
            "has_authorizer": bool(authorizer)
        })
        raise UnauthorizedError("Authentication required")
    return str(user_id)


def get_user_email(event: Dict[str, Any]) -> Optional[str]:
    """Email of the authenticated user from the authorizer claims, if present."""
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}
    return (authorizer.get("claims") or {}).get("email") or None


def parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parse the JSON request body.

    Raises:
        BadRequestError: If the body is missing, not JSON, or not an object
    """
    body = event.get("body")
    if isinstance(body, dict):
        return body
    if not body:
        raise BadRequestError("Request body is required")
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError as e:
        raise BadRequestError(f"Invalid JSON body: {e.msg}")
    if not isinstance(parsed, dict):
        raise BadRequestError("Request body must be a JSON object")
    return parsed


def get_query_params(event: Dict[str, Any]) -> Dict[str, str]:
    return event.get("queryStringParameters") or {}
