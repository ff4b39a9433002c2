"""
Lambda handler for infrastructure projects and the planning overview.
"""
from typing import Any, Dict, List

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.handlers.api import CrudResource, handle_request
from src.models.infrastructure import (
    InfrastructureOverview,
    InfrastructureProject,
    InfrastructureProjectInsert,
    InfrastructureProjectUpdate,
)
from src.services.infrastructure import (
    ALL,
    create_infrastructure_project,
    delete_infrastructure_project,
    filter_projects,
    get_infrastructure_project,
    get_infrastructure_projects,
    summarize_projects,
    update_infrastructure_project,
)
from src.utils.http import get_query_params
from src.utils.logging import logger

tracer = Tracer()


def list_projects(user_id: str, event: Dict[str, Any]) -> List[InfrastructureProject]:
    """Projects filtered by the ``search``, ``status`` and ``type`` query parameters."""
    params = get_query_params(event)
    return filter_projects(
        get_infrastructure_projects(user_id),
        search=params.get("search"),
        status=params.get("status", ALL),
        project_type=params.get("type", ALL)
    )


def overview(user_id: str, event: Dict[str, Any]) -> InfrastructureOverview:
    return summarize_projects(get_infrastructure_projects(user_id))


RESOURCES = [
    CrudResource(
        path="/infrastructure",
        list_records=get_infrastructure_projects,
        get_record=get_infrastructure_project,
        create_record=create_infrastructure_project,
        update_record=update_infrastructure_project,
        delete_record=delete_infrastructure_project,
        insert_model=InfrastructureProjectInsert,
        update_model=InfrastructureProjectUpdate,
    )
]

ACTIONS = {
    ("GET", "/infrastructure"): list_projects,
    ("GET", "/infrastructure/overview"): overview,
}


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """Handle infrastructure requests."""
    return handle_request(event, RESOURCES, ACTIONS)
