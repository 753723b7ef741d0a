"""Task service layer for data persistence.

This module implements the store operations behind the task routes. Input
is expected to be validated already; every function logs and re-raises
database errors after rolling back the session so that a failed write leaves
no partial effects.
"""

import logging
from typing import Dict, Any, Optional, List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models.task import Task

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "completed")


def list_tasks(db: Session, completed: Optional[bool] = None) -> List[Dict[str, Any]]:
    """List tasks in creation order, optionally narrowed by completion state.

    Args:
        db: SQLAlchemy database session
        completed: When not None, only tasks with this completion state are returned

    Returns:
        List of task dictionaries, empty when nothing matches

    Raises:
        Exception: Re-raises any database errors after logging
    """
    logger.info(f"Listing tasks with filter: completed={completed}")

    try:
        stmt = select(Task)
        if completed is not None:
            stmt = stmt.where(Task.completed == completed)
        stmt = stmt.order_by(Task.created_at.asc())

        tasks = db.execute(stmt).scalars().all()
        task_dicts = [task.to_dict() for task in tasks]

        logger.info(f"Successfully retrieved {len(task_dicts)} tasks")
        return task_dicts

    except Exception as e:
        logger.error(e, exc_info=True)
        raise


def create_task(db: Session, title: str, description: Optional[str] = None) -> Dict[str, Any]:
    """Create a new task and persist it.

    Args:
        db: SQLAlchemy database session
        title: Task title
        description: Optional task description

    Returns:
        Dictionary representation of the created task

    Raises:
        Exception: Re-raises any database errors after logging and rollback
    """
    logger.info(f"Creating task with title: {title}")

    task = Task(title=title, description=description)

    try:
        db.add(task)
        db.commit()
        db.refresh(task)
        logger.info(f"Successfully created task with ID: {task.id}")

        return task.to_dict()

    except Exception as e:
        logger.error(e, exc_info=True)
        db.rollback()
        raise


def get_task(db: Session, task_id: UUID) -> Optional[Task]:
    """Retrieve a task by its UUID.

    Args:
        db: SQLAlchemy database session
        task_id: UUID of the task to retrieve

    Returns:
        The Task instance if found, None otherwise

    Raises:
        Exception: Re-raises any database errors after logging
    """
    logger.info(f"Retrieving task with ID: {task_id}")

    try:
        task = db.get(Task, task_id)

        if task is None:
            logger.info(f"Task with ID {task_id} not found")

        return task

    except Exception as e:
        logger.error(e, exc_info=True)
        raise


def update_task(db: Session, task: Task, changes: Dict[str, Any]) -> Dict[str, Any]:
    """Apply a partial update to an existing task.

    Only title, description and completed can change, and only when the
    field is present in ``changes`` with a non-null value. Anything else in
    ``changes`` (including id and createdAt) is ignored.

    Args:
        db: SQLAlchemy database session the task was loaded with
        task: Task instance to update
        changes: Validated request body

    Returns:
        Dictionary representation of the updated task

    Raises:
        Exception: Re-raises any database errors after logging and rollback,
            which restores the task's previous state
    """
    logger.info(f"Updating task with ID: {task.id}")

    try:
        for field_name in UPDATABLE_FIELDS:
            value = changes.get(field_name)
            if value is not None:
                setattr(task, field_name, value)

        db.add(task)
        db.commit()
        db.refresh(task)

        logger.info(f"Successfully updated task with ID: {task.id}")
        return task.to_dict()

    except Exception as e:
        db.rollback()
        logger.error(e, exc_info=True)
        raise


def delete_task(db: Session, task: Task) -> None:
    """Permanently remove a task from the database.

    Args:
        db: SQLAlchemy database session the task was loaded with
        task: Task instance to delete

    Raises:
        Exception: Re-raises any database errors after logging and rollback
    """
    task_id = task.id
    logger.info(f"Deleting task with ID: {task_id}")

    try:
        db.delete(task)
        db.commit()

        logger.info(f"Successfully deleted task with ID: {task_id}")

    except Exception as e:
        logger.error(e, exc_info=True)
        db.rollback()
        raise
