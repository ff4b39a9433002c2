"""
Strategic planning service.

Combines properties, tasks and infrastructure projects into the headline
numbers shown on the planning hub.
"""
from datetime import date
from typing import Optional

from src.models.planning import PlanningSummary
from src.services.constants import SEASONS_BY_MONTH
from src.services.infrastructure import get_infrastructure_projects
from src.services.properties import get_properties
from src.services.tasks import count_incomplete_tasks, get_tasks
from src.utils.logging import logger


def get_current_season(today: Optional[date] = None) -> str:
    """
    Get the season for a date.

    Args:
        today: Date to evaluate, defaults to today

    Returns:
        One of "Spring", "Summer", "Fall" or "Winter"
    """
    today = today or date.today()
    return SEASONS_BY_MONTH[today.month]


def get_planning_summary(user_id: str, today: Optional[date] = None) -> PlanningSummary:
    """
    Build the planning hub summary for a user.

    Raises:
        RecordStoreError: If any of the underlying records cannot be read
    """
    summary = PlanningSummary(
        property_count=len(get_properties(user_id)),
        incomplete_tasks=count_incomplete_tasks(get_tasks(user_id)),
        infrastructure_projects=len(get_infrastructure_projects(user_id)),
        current_season=get_current_season(today)
    )
    logger.info("Planning summary calculated", extra={
        "user_id": user_id,
        **summary.model_dump()
    })
    return summary
