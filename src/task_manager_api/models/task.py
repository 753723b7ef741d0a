"""Task SQLAlchemy ORM model for the task manager API.

This module defines the Task model, the single resource persisted by the
service, together with its serialization to the JSON shape returned by the API.
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, Any

from sqlalchemy import Boolean, Column, DateTime, Index, String, Text
from sqlalchemy.dialects.postgresql import UUID

from .base import Base

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000


class Task(Base):
    """Task ORM model.

    ``id`` and ``created_at`` are assigned once when the task is built and
    never change afterwards; ``completed`` starts out as False.
    """
    __tablename__ = 'tasks'

    __table_args__ = (
        Index('idx_task_completed', 'completed'),
        Index('idx_task_created_at', 'created_at'),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, unique=True, nullable=False)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    description = Column(Text, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __init__(self, **kwargs):
        """Initialize Task with its identifier, creation timestamp and defaults."""
        kwargs.setdefault('id', uuid.uuid4())
        kwargs.setdefault('created_at', datetime.now(timezone.utc))
        if kwargs.get('completed') is None:
            kwargs['completed'] = False

        super().__init__(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Task model instance to a dictionary for serialization.

        Returns:
            Dict with the API field names: UUID converted to string and the
            creation timestamp as an ISO 8601 string in UTC.
        """
        created_at = self.created_at
        if created_at.tzinfo is None:
            # SQLite returns naive datetimes - they were stored as UTC
            created_at = created_at.replace(tzinfo=timezone.utc)

        return {
            'id': str(self.id),
            'title': self.title,
            'description': self.description,
            'completed': bool(self.completed),
            'createdAt': created_at.isoformat(),
        }

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}', completed={self.completed})>"
