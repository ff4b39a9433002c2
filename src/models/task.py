"""
Task model definitions for homestead to-dos.
"""
from enum import Enum
import datetime
from typing import Optional
from pydantic import BaseModel, Field

from src.models.record import OwnedRecord


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TaskInsert(BaseModel):
    """Fields accepted when adding a task."""
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING
    due_date: Optional[datetime.date] = None
    property_id: Optional[str] = None


class TaskUpdate(BaseModel):
    """Fields that may change on an existing task."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime.date] = None
    property_id: Optional[str] = None


class Task(OwnedRecord, TaskInsert):
    """A piece of work to be done on the homestead."""

