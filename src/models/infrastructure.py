"""
Infrastructure project model definitions.
"""
from enum import Enum
import datetime
from typing import Optional
from pydantic import BaseModel, Field

from src.models.record import OwnedRecord


class ProjectType(str, Enum):
    GREENHOUSE = "greenhouse"
    BARN = "barn"
    FENCE = "fence"
    WATER_SYSTEM = "water_system"
    OTHER = "other"


class ProjectStatus(str, Enum):
    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ProjectPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class InfrastructureProjectInsert(BaseModel):
    """Fields accepted when planning a project."""
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    project_type: ProjectType = ProjectType.OTHER
    status: ProjectStatus = ProjectStatus.PLANNED
    priority: ProjectPriority = ProjectPriority.MEDIUM
    budget: float = Field(0, ge=0)
    actual_cost: Optional[float] = Field(None, ge=0)
    start_date: Optional[datetime.date] = None
    target_date: Optional[datetime.date] = None
    property_id: Optional[str] = None


class InfrastructureProjectUpdate(BaseModel):
    """Fields that may change on an existing project."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    project_type: Optional[ProjectType] = None
    status: Optional[ProjectStatus] = None
    priority: Optional[ProjectPriority] = None
    budget: Optional[float] = Field(None, ge=0)
    actual_cost: Optional[float] = Field(None, ge=0)
    start_date: Optional[datetime.date] = None
    target_date: Optional[datetime.date] = None
    property_id: Optional[str] = None


class InfrastructureProject(OwnedRecord, InfrastructureProjectInsert):
    """A building or improvement project such as a barn or fence line."""

    @property
    def cost(self) -> float:
        """Final cost for completed projects, estimated budget otherwise."""
        if self.status == ProjectStatus.COMPLETED and self.actual_cost is not None:
            return self.actual_cost
        return self.budget


class InfrastructureOverview(BaseModel):
    """Project counts and budget totals per status."""
    planned_count: int = 0
    in_progress_count: int = 0
    completed_count: int = 0
    planned_budget: float = 0
    in_progress_budget: float = 0
    completed_budget: float = 0
    total_budget: float = 0
    budget_progress: float = 0
    cost_by_type: dict[str, float] = Field(default_factory=dict)
