"""
Property model definitions for homestead land parcels.
"""
from typing import Optional
from pydantic import BaseModel, Field

from src.models.record import OwnedRecord


class PropertyInsert(BaseModel):
    """Fields accepted when adding a property."""
    name: str = Field(..., min_length=1, max_length=200)
    size_acres: float = Field(..., ge=0)
    location: str = Field("", max_length=300)
    climate_zone: Optional[str] = Field(None, max_length=50)


class PropertyUpdate(BaseModel):
    """Fields that may change on an existing property."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    size_acres: Optional[float] = Field(None, ge=0)
    location: Optional[str] = Field(None, max_length=300)
    climate_zone: Optional[str] = Field(None, max_length=50)


class Property(OwnedRecord, PropertyInsert):
    """A parcel of land managed by the user."""
