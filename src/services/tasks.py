"""
Task service for homestead to-dos.
"""
from typing import List

from src.models.task import Task, TaskInsert, TaskStatus, TaskUpdate
from src.services.records import UserRecordRepository

tasks = UserRecordRepository("task", Task)


def get_tasks(user_id: str) -> List[Task]:
    """
    Get all tasks for a user.

    Tasks with a due date come first, soonest first; undated tasks follow.
    """
    return sorted(
        tasks.list(user_id),
        key=lambda t: (t.due_date is None, t.due_date or t.created_at.date())
    )


def get_task(task_id: str, user_id: str) -> Task:
    return tasks.get(task_id, user_id)


def create_task(user_id: str, data: TaskInsert) -> Task:
    return tasks.create(user_id, data)


def update_task(task_id: str, user_id: str, data: TaskUpdate) -> Task:
    return tasks.update(task_id, user_id, data)


def delete_task(task_id: str, user_id: str) -> None:
    tasks.delete(task_id, user_id)


def count_incomplete_tasks(items: List[Task]) -> int:
    """Count tasks that are not completed."""
    return sum(1 for t in items if t.status != TaskStatus.COMPLETED)
