"""
Animal model definitions for livestock records.
"""
from enum import Enum
import datetime
from typing import Optional
from pydantic import BaseModel, Field

from src.models.record import OwnedRecord


class AnimalSex(str, Enum):
    FEMALE = "female"
    MALE = "male"
    UNKNOWN = "unknown"


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    SICK = "sick"
    INJURED = "injured"
    RECOVERING = "recovering"
    DECEASED = "deceased"


class AnimalInsert(BaseModel):
    """Fields accepted when adding an animal."""
    name: str = Field(..., min_length=1, max_length=200)
    species: str = Field(..., min_length=1, max_length=100)
    breed: Optional[str] = Field(None, max_length=100)
    sex: AnimalSex = AnimalSex.UNKNOWN
    date_of_birth: Optional[datetime.date] = None
    health_status: HealthStatus = HealthStatus.HEALTHY
    property_id: Optional[str] = None
    notes: Optional[str] = None


class AnimalUpdate(BaseModel):
    """Fields that may change on an existing animal."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    species: Optional[str] = Field(None, min_length=1, max_length=100)
    breed: Optional[str] = Field(None, max_length=100)
    sex: Optional[AnimalSex] = None
    date_of_birth: Optional[datetime.date] = None
    health_status: Optional[HealthStatus] = None
    property_id: Optional[str] = None
    notes: Optional[str] = None


class Animal(OwnedRecord, AnimalInsert):
    """An individual animal kept on the homestead."""
