"""Service layer for the task manager API.

This package contains the persistence operations used by the task routes.
"""

from .task_service import (
    list_tasks,
    create_task,
    get_task,
    update_task,
    delete_task,
)

__all__ = [
    "list_tasks",
    "create_task",
    "get_task",
    "update_task",
    "delete_task",
]
