"""
Infrastructure planning service.

This module stores infrastructure projects and provides the overview used by
the planning screens: counts and budgets per status, budget progress and the
cost breakdown by project type.
"""
from collections import defaultdict
from typing import List, Optional

from src.models.infrastructure import (
    InfrastructureOverview,
    InfrastructureProject,
    InfrastructureProjectInsert,
    InfrastructureProjectUpdate,
    ProjectStatus,
)
from src.services.records import UserRecordRepository

ALL = "all"

projects = UserRecordRepository("infrastructure_project", InfrastructureProject)


def get_infrastructure_projects(user_id: str) -> List[InfrastructureProject]:
    """Get all infrastructure projects for a user, newest first."""
    return sorted(projects.list(user_id), key=lambda p: p.created_at, reverse=True)


def get_infrastructure_project(project_id: str, user_id: str) -> InfrastructureProject:
    return projects.get(project_id, user_id)


def create_infrastructure_project(user_id: str, data: InfrastructureProjectInsert) -> InfrastructureProject:
    return projects.create(user_id, data)


def update_infrastructure_project(
    project_id: str,
    user_id: str,
    data: InfrastructureProjectUpdate
) -> InfrastructureProject:
    return projects.update(project_id, user_id, data)


def delete_infrastructure_project(project_id: str, user_id: str) -> None:
    projects.delete(project_id, user_id)


def filter_projects(
    items: List[InfrastructureProject],
    search: Optional[str] = None,
    status: str = ALL,
    project_type: str = ALL
) -> List[InfrastructureProject]:
    """
    Filter projects by free-text search, status and type.

    Args:
        items: Projects to filter
        search: Case-insensitive text matched against name and description
        status: Status value, or "all" to disable the filter
        project_type: Project type value, or "all" to disable the filter

    Returns:
        Matching projects in their original order
    """
    needle = (search or "").strip().lower()
    result = []
    for project in items:
        if needle and needle not in project.name.lower() \
                and needle not in (project.description or "").lower():
            continue
        if status != ALL and project.status.value != status:
            continue
        if project_type != ALL and project.project_type.value != project_type:
            continue
        result.append(project)
    return result


def summarize_projects(items: List[InfrastructureProject]) -> InfrastructureOverview:
    """
    Calculate counts and budget totals per project status.

    Completed projects contribute their actual cost when recorded. Budget
    progress is the percentage of the total budget belonging to projects that
    are in progress or completed, and is 0 when there is no budget at all.
    Planned budgets never count as progress, so the value stays below 100
    while any budgeted project is still planned.
    """
    counts = defaultdict(int)
    budgets = defaultdict(float)
    cost_by_type = defaultdict(float)

    for project in items:
        counts[project.status] += 1
        budgets[project.status] += project.cost
        cost_by_type[project.project_type.value] += project.cost

    total_budget = sum(budgets.values())
    started = budgets[ProjectStatus.IN_PROGRESS] + budgets[ProjectStatus.COMPLETED]
    budget_progress = (started / total_budget) * 100 if total_budget > 0 else 0

    return InfrastructureOverview(
        planned_count=counts[ProjectStatus.PLANNED],
        in_progress_count=counts[ProjectStatus.IN_PROGRESS],
        completed_count=counts[ProjectStatus.COMPLETED],
        planned_budget=round(budgets[ProjectStatus.PLANNED], 2),
        in_progress_budget=round(budgets[ProjectStatus.IN_PROGRESS], 2),
        completed_budget=round(budgets[ProjectStatus.COMPLETED], 2),
        total_budget=round(total_budget, 2),
        budget_progress=round(budget_progress, 1),
        cost_by_type={k: round(v, 2) for k, v in cost_by_type.items()}
    )
