"""
Inventory model definitions for supplies and stock levels.
"""
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from src.models.record import OwnedRecord
from src.services.constants import INVENTORY_CATEGORIES, INVENTORY_UNITS


def _check_category(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in INVENTORY_CATEGORIES:
        raise ValueError(f"Category must be one of: {', '.join(INVENTORY_CATEGORIES)}")
    return value


def _check_unit(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in INVENTORY_UNITS:
        raise ValueError(f"Unit must be one of: {', '.join(INVENTORY_UNITS)}")
    return value


class InventoryItemInsert(BaseModel):
    """Fields accepted when adding an inventory item."""
    name: str = Field(..., min_length=1, max_length=200)
    category: str
    current_stock: float = Field(..., ge=0)
    unit: str
    reorder_point: float = Field(0, ge=0)
    supplier: Optional[str] = Field(None, max_length=200)

    @field_validator("category")
    @classmethod
    def validate_category(cls, value):
        return _check_category(value)

    @field_validator("unit")
    @classmethod
    def validate_unit(cls, value):
        return _check_unit(value)


class InventoryItemUpdate(BaseModel):
    """Fields that may change on an existing inventory item."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[str] = None
    current_stock: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None
    reorder_point: Optional[float] = Field(None, ge=0)
    supplier: Optional[str] = Field(None, max_length=200)

    @field_validator("category")
    @classmethod
    def validate_category(cls, value):
        return _check_category(value)

    @field_validator("unit")
    @classmethod
    def validate_unit(cls, value):
        return _check_unit(value)


class InventoryItem(OwnedRecord, InventoryItemInsert):
    """A stocked supply such as feed, seed, or tools."""

    @property
    def is_low_stock(self) -> bool:
        """Check if stock has fallen to the reorder point."""
        return self.current_stock <= self.reorder_point
