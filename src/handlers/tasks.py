"""
Lambda handler for homestead tasks.
"""
from typing import Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.handlers.api import CrudResource, handle_request
from src.models.task import TaskInsert, TaskUpdate
from src.services.tasks import create_task, delete_task, get_task, get_tasks, update_task
from src.utils.logging import logger

tracer = Tracer()

RESOURCES = [
    CrudResource(
        path="/tasks",
        list_records=get_tasks,
        get_record=get_task,
        create_record=create_task,
        update_record=update_task,
        delete_record=delete_task,
        insert_model=TaskInsert,
        update_model=TaskUpdate,
    )
]


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """Handle task requests."""
    return handle_request(event, RESOURCES)
