"""
Lambda handler for animal records.
"""
from typing import Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.handlers.api import CrudResource, handle_request
from src.models.animal import AnimalInsert, AnimalUpdate
from src.services.animals import create_animal, delete_animal, get_animal, get_animals, update_animal
from src.utils.logging import logger

tracer = Tracer()

RESOURCES = [
    CrudResource(
        path="/animals",
        list_records=get_animals,
        get_record=get_animal,
        create_record=create_animal,
        update_record=update_animal,
        delete_record=delete_animal,
        insert_model=AnimalInsert,
        update_model=AnimalUpdate,
    )
]


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """Handle animal requests."""
    return handle_request(event, RESOURCES)
