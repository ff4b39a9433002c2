"""
Lambda handler for inventory management and low stock alerts.
"""
from typing import Any, Dict, List

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.handlers.api import CrudResource, handle_request
from src.models.inventory import InventoryItem, InventoryItemInsert, InventoryItemUpdate
from src.services.inventory import (
    create_inventory_item,
    delete_inventory_item,
    get_inventory,
    get_inventory_item,
    get_low_stock_items,
    update_inventory_item,
)
from src.utils.logging import logger

tracer = Tracer()

RESOURCES = [
    CrudResource(
        path="/inventory",
        list_records=get_inventory,
        get_record=get_inventory_item,
        create_record=create_inventory_item,
        update_record=update_inventory_item,
        delete_record=delete_inventory_item,
        insert_model=InventoryItemInsert,
        update_model=InventoryItemUpdate,
    )
]


def low_stock(user_id: str, event: Dict[str, Any]) -> List[InventoryItem]:
    """Items at or below their reorder point."""
    return get_low_stock_items(get_inventory(user_id))


ACTIONS = {
    ("GET", "/inventory/low-stock"): low_stock,
}


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: Dict, context: LambdaContext) -> Dict:
    """Handle inventory requests."""
    return handle_request(event, RESOURCES, ACTIONS)
