"""
Request routing shared by the resource Lambda handlers.

Each handler describes its CRUD collections as ``CrudResource`` entries and
any extra read-only endpoints as ``actions``. ``handle_request`` resolves the
authenticated user once, routes the request, and maps service exceptions to
HTTP status codes.
"""
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from src.handlers.exceptions import HandlerError, MethodNotAllowedError, RouteNotFoundError
from src.services.exceptions import RecordNotFoundError, RecordStoreError
from src.utils.http import error_response, get_query_params, get_user_id, json_response, parse_body
from src.utils.logging import logger

# (user_id, event) -> response payload
Action = Callable[[str, Dict[str, Any]], Any]


@dataclass
class CrudResource:
    """
    A collection of user-owned records exposed at ``path`` and ``path/{id}``.

    ``list_filters`` is an optional model built from the query string and
    passed as the second argument of ``list_records``.
    """
    path: str
    list_records: Callable[..., List[BaseModel]]
    get_record: Callable[[str, str], BaseModel]
    create_record: Callable[[str, BaseModel], BaseModel]
    update_record: Callable[[str, str, BaseModel], BaseModel]
    delete_record: Callable[[str, str], None]
    insert_model: Type[BaseModel]
    update_model: Type[BaseModel]
    list_filters: Optional[Type[BaseModel]] = None

    def handle(self, method: str, record_id: Optional[str], user_id: str, event: Dict[str, Any]) -> Dict[str, Any]:
        if record_id is None:
            if method == "GET":
                if self.list_filters:
                    filters = self.list_filters(**get_query_params(event))
                    return json_response(200, self.list_records(user_id, filters))
                return json_response(200, self.list_records(user_id))
            if method == "POST":
                data = self.insert_model(**parse_body(event))
                return json_response(201, self.create_record(user_id, data))
        else:
            if method == "GET":
                return json_response(200, self.get_record(record_id, user_id))
            if method in ("PUT", "PATCH"):
                data = self.update_model(**parse_body(event))
                return json_response(200, self.update_record(record_id, user_id, data))
            if method == "DELETE":
                self.delete_record(record_id, user_id)
                return json_response(204)
        raise MethodNotAllowedError(f"{method} not allowed on {self.path}")


def normalize_path(path: Optional[str]) -> str:
    return "/" + (path or "").strip("/")


def match_resource(path: str, resources: List[CrudResource]) -> Tuple[Optional[CrudResource], Optional[str]]:
    """
    Find the resource a path belongs to.

    Returns:
        Tuple of (resource, record_id); record_id is None for the collection path
    """
    for resource in resources:
        if path == resource.path:
            return resource, None
        prefix = resource.path + "/"
        if path.startswith(prefix):
            remainder = path[len(prefix):]
            if remainder and "/" not in remainder:
                return resource, remainder
    return None, None


def handle_request(
    event: Dict[str, Any],
    resources: List[CrudResource],
    actions: Optional[Dict[Tuple[str, str], Action]] = None
) -> Dict[str, Any]:
    """
    Route an API Gateway proxy event.

    Args:
        event: API Gateway proxy event
        resources: CRUD collections served by this handler
        actions: Extra endpoints keyed by (method, path); checked before resources

    Returns:
        API Gateway Lambda proxy response
    """
    method = (event.get("httpMethod") or "GET").upper()
    path = normalize_path(event.get("path"))

    logger.bind_user(None)
    try:
        user_id = get_user_id(event)
        logger.bind_user(user_id)

        action = (actions or {}).get((method, path))
        if action:
            return json_response(200, action(user_id, event))

        resource, record_id = match_resource(path, resources)
        if resource is None:
            raise RouteNotFoundError(f"No route for {method} {path}")
        path_id = (event.get("pathParameters") or {}).get("id")
        return resource.handle(method, path_id or record_id, user_id, event)

    except HandlerError as e:
        return error_response(e.status_code, e.message)
    except ValidationError as e:
        logger.info("Request validation failed", extra={
            "path": path,
            "method": method,
            "error_count": e.error_count()
        })
        return error_response(422, "Validation failed", json.loads(e.json(include_url=False)))
    except RecordNotFoundError as e:
        return error_response(404, str(e))
    except RecordStoreError:
        logger.exception("Record store error", extra={"path": path, "method": method})
        return error_response(500, "Record store unavailable")
    except Exception:
        logger.exception("Unhandled error processing request", extra={"path": path, "method": method})
        return error_response(500, "Internal server error")
