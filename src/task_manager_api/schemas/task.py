"""Pydantic schemas for task-related responses.

Request bodies are checked by ``task_manager_api.validation`` so the service
can report violations in its own shape; these models describe what the API
returns and feed the OpenAPI document.
"""

from typing import Optional, List, Dict, Any

from pydantic import BaseModel, ConfigDict, Field

from ..models.task import TITLE_MAX_LENGTH, DESCRIPTION_MAX_LENGTH


class TaskResponse(BaseModel):
    """Output schema for a single task."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Comprar leche",
                "description": "Dos litros, desnatada",
                "completed": False,
                "createdAt": "2024-01-15T10:30:00+00:00"
            }
        }
    )

    id: str = Field(..., description="Unique task identifier (UUID as string)")
    title: str = Field(..., description="Task title")
    description: Optional[str] = Field(None, description="Detailed task description")
    completed: bool = Field(False, description="Whether the task is done")
    created_at: str = Field(..., alias="createdAt", description="Creation timestamp (ISO format string)")


class TaskCreateRequest(BaseModel):
    """Documented request body for task creation."""
    title: str = Field(..., max_length=TITLE_MAX_LENGTH, description="Task title (required)")
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH, description="Detailed task description")


class TaskUpdateRequest(BaseModel):
    """Documented request body for partial task updates."""
    title: Optional[str] = Field(None, max_length=TITLE_MAX_LENGTH, description="New task title")
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH, description="New task description")
    completed: Optional[bool] = Field(None, description="New completion state")


class MessageResponse(BaseModel):
    """Response carrying a single fixed message."""
    message: str


class ValidationErrorResponse(BaseModel):
    """Response listing every field that failed validation."""
    errors: List[Dict[str, Any]]
