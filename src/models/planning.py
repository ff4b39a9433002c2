"""
Planning hub summary model.
"""
from pydantic import BaseModel


class PlanningSummary(BaseModel):
    """Headline numbers for the strategic planning hub."""
    property_count: int = 0
    incomplete_tasks: int = 0
    infrastructure_projects: int = 0
    current_season: str
