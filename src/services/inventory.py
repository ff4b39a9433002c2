"""
Inventory service for supplies and stock levels.

Typical usage:
    items = get_inventory(user_id)
    for item in get_low_stock_items(items):
        print(f"Reorder {item.name}: {item.current_stock} {item.unit} left")
"""
from typing import List

from src.models.inventory import InventoryItem, InventoryItemInsert, InventoryItemUpdate
from src.services.records import UserRecordRepository
from src.utils.logging import logger

inventory_items = UserRecordRepository("inventory_item", InventoryItem)


def get_inventory(user_id: str) -> List[InventoryItem]:
    """Get all inventory items for a user, sorted by name."""
    return sorted(inventory_items.list(user_id), key=lambda i: i.name.lower())


def get_inventory_item(item_id: str, user_id: str) -> InventoryItem:
    return inventory_items.get(item_id, user_id)


def create_inventory_item(user_id: str, data: InventoryItemInsert) -> InventoryItem:
    return inventory_items.create(user_id, data)


def update_inventory_item(item_id: str, user_id: str, data: InventoryItemUpdate) -> InventoryItem:
    return inventory_items.update(item_id, user_id, data)


def delete_inventory_item(item_id: str, user_id: str) -> None:
    inventory_items.delete(item_id, user_id)


def _stock_ratio(item: InventoryItem) -> float:
    if item.reorder_point == 0:
        return 0.0 if item.current_stock == 0 else 1.0
    return item.current_stock / item.reorder_point


def get_low_stock_items(items: List[InventoryItem]) -> List[InventoryItem]:
    """
    Get items whose stock has fallen to or below their reorder point.

    Args:
        items: Inventory items to check

    Returns:
        Low stock items, the most depleted (lowest stock to reorder point ratio) first
    """
    low_stock = [item for item in items if item.is_low_stock]
    if low_stock:
        logger.info("Low stock items found", extra={
            "count": len(low_stock),
            "items": [item.name for item in low_stock]
        })
    return sorted(low_stock, key=lambda i: (_stock_ratio(i), i.name.lower()))
