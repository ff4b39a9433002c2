"""
Breeding event model definitions for tracking reproductive milestones.
"""
from enum import Enum
import datetime
from typing import Optional
from pydantic import BaseModel, Field

from src.models.record import OwnedRecord


class BreedingEventType(str, Enum):
    """
    Reproductive lifecycle milestones that can be recorded for an animal.
    """
    HEAT_CYCLE = "heat_cycle"
    BREEDING = "breeding"
    PREGNANCY_CONFIRMATION = "pregnancy_confirmation"
    BIRTH = "birth"


class BreedingEventInsert(BaseModel):
    """Fields accepted when recording a breeding event."""
    animal_id: str = Field(..., min_length=1)
    event_type: BreedingEventType
    date: datetime.date
    partner_animal_id: Optional[str] = None
    partner_name: Optional[str] = Field(None, max_length=200)
    expected_due_date: Optional[datetime.date] = None
    actual_birth_date: Optional[datetime.date] = None
    offspring_count: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None
    property_id: Optional[str] = None


class BreedingEventUpdate(BaseModel):
    """Fields that may change on an existing breeding event."""
    animal_id: Optional[str] = Field(None, min_length=1)
    event_type: Optional[BreedingEventType] = None
    date: Optional[datetime.date] = None
    partner_animal_id: Optional[str] = None
    partner_name: Optional[str] = Field(None, max_length=200)
    expected_due_date: Optional[datetime.date] = None
    actual_birth_date: Optional[datetime.date] = None
    offspring_count: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None
    property_id: Optional[str] = None


class BreedingEvent(OwnedRecord, BreedingEventInsert):
    """
    One dated lifecycle event for one animal.
    """


class BreedingDashboardData(BaseModel):
    """
    Herd-level breeding counters shown on the dashboard.

    ``breeding_females`` counts every animal with at least one breeding
    event; it is a proxy, not a count of female animals.
    """
    breeding_females: int = Field(0, ge=0)
    pregnant: int = Field(0, ge=0)
    lactating: int = Field(0, ge=0)
    open: int = Field(0, ge=0)
