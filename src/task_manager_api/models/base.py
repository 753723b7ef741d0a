"""Base SQLAlchemy model for the task manager API.

This module defines the DeclarativeBase that all ORM models should inherit from.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass
