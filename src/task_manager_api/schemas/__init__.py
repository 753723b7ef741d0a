"""Pydantic schemas for the task manager API.

This package contains the Pydantic models used for response serialization
and OpenAPI documentation.
"""

from .task import (
    TaskResponse,
    TaskCreateRequest,
    TaskUpdateRequest,
    MessageResponse,
    ValidationErrorResponse,
)

__all__ = [
    "TaskResponse",
    "TaskCreateRequest",
    "TaskUpdateRequest",
    "MessageResponse",
    "ValidationErrorResponse",
]
