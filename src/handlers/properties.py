"""
Lambda handler for property management.
"""
from typing import Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.handlers.api import CrudResource, handle_request
from src.models.property import PropertyInsert, PropertyUpdate
from src.services.properties import (
    create_property,
    delete_property,
    get_properties,
    get_property,
    update_property,
)
from src.utils.logging import logger

tracer = Tracer()

RESOURCES = [
    CrudResource(
        path="/properties",
        list_records=get_properties,
        get_record=get_property,
        create_record=create_property,
        update_record=update_property,
        delete_record=delete_property,
        insert_model=PropertyInsert,
        update_model=PropertyUpdate,
    )
]


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """Handle property requests."""
    return handle_request(event, RESOURCES)
