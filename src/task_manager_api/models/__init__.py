"""SQLAlchemy ORM models for the task manager API.

This package contains all database models and the base declarative class.
"""

from .base import Base
from .task import Task, TITLE_MAX_LENGTH, DESCRIPTION_MAX_LENGTH

__all__ = ["Base", "Task", "TITLE_MAX_LENGTH", "DESCRIPTION_MAX_LENGTH"]
