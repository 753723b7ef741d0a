"""FastAPI routes for task-related operations.

This module implements the REST endpoints for task management: listing
with an optional completion filter, creation, retrieval, partial update and
deletion. Path routes check the identifier and load the task before any body
is looked at, so a malformed id wins over a missing task, which wins over an
invalid body.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, Request
from starlette.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from ..api.errors import (
    TaskApiError,
    TaskValidationError,
    INVALID_TASK_ID,
    TASK_NOT_FOUND,
    TASK_DELETED,
    LIST_FAILED,
    CREATE_FAILED,
    LOOKUP_FAILED,
    UPDATE_FAILED,
    DELETE_FAILED,
)
from ..database import get_db
from ..models.task import Task
from ..schemas.task import (
    TaskResponse,
    TaskCreateRequest,
    TaskUpdateRequest,
    MessageResponse,
    ValidationErrorResponse,
)
from ..services.task_service import list_tasks, create_task, get_task, update_task, delete_task
from ..validation import (
    BODY_NOT_OBJECT,
    CREATE_TASK_RULES,
    UPDATE_TASK_RULES,
    Violation,
    as_boolean,
    parse_task_id,
    validate,
)

logger = logging.getLogger(__name__)

task_router = APIRouter(prefix="/tasks", tags=["Tasks"])

PATH_ERROR_RESPONSES = {
    400: {"model": MessageResponse, "description": "Invalid task ID"},
    404: {"model": MessageResponse, "description": "Task not found"},
    500: {"model": MessageResponse, "description": "Internal server error"},
}


def _request_body_doc(model) -> Dict[str, Any]:
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


def parse_completed_filter(value: Optional[str]) -> Optional[bool]:
    """Translate the ``completed`` query flag into a filter value.

    Absent means no filter; the literal "true" selects completed tasks and
    any other value selects pending ones.
    """
    if value is None:
        return None
    return value == "true"


async def read_json_body(request: Request) -> Dict[str, Any]:
    """Decode the request body as a JSON object; an empty body counts as {}."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        raise TaskValidationError([Violation(field="body", msg=BODY_NOT_OBJECT)])
    if not isinstance(body, dict):
        raise TaskValidationError([Violation(field="body", msg=BODY_NOT_OBJECT, value=body)])
    return body


def load_task(task_id: str, db: Session = Depends(get_db)) -> Task:
    """Resolve the ``task_id`` path parameter to a stored task.

    Raises:
        TaskApiError: 400 if the id is malformed (the store is not queried),
            500 if the lookup fails, 404 if no task has this id
    """
    parsed_id = parse_task_id(task_id)
    if parsed_id is None:
        logger.warning(f"Rejected malformed task ID: {task_id}")
        raise TaskApiError(400, INVALID_TASK_ID)

    try:
        task = get_task(db, parsed_id)
    except Exception as e:
        logger.error(e, exc_info=True)
        raise TaskApiError(500, LOOKUP_FAILED)

    if task is None:
        raise TaskApiError(404, TASK_NOT_FOUND)

    return task


@task_router.get(
    "",
    response_model=List[TaskResponse],
    responses={500: {"model": MessageResponse, "description": "Internal server error"}},
)
def list_tasks_endpoint(
    completed: Optional[str] = Query(None, description="Filter by completion state (true or false)"),
    db: Session = Depends(get_db)
) -> List[Dict[str, Any]]:
    """List all tasks, optionally only completed or pending ones."""
    logger.info(f"GET /tasks request - completed: {completed}")

    try:
        return list_tasks(db, completed=parse_completed_filter(completed))
    except Exception as e:
        logger.error(e, exc_info=True)
        raise TaskApiError(500, LIST_FAILED)


@task_router.post(
    "",
    status_code=201,
    response_model=TaskResponse,
    responses={
        400: {"model": ValidationErrorResponse, "description": "Invalid request body"},
        500: {"model": MessageResponse, "description": "Internal server error"},
    },
    openapi_extra=_request_body_doc(TaskCreateRequest),
)
async def create_task_endpoint(request: Request, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Create a new task.

    Returns:
        The created task, including its generated id and creation timestamp

    Raises:
        TaskValidationError: 400 when the body fails validation
        TaskApiError: 500 when the task could not be stored
    """
    body = await read_json_body(request)
    violations = validate(body, CREATE_TASK_RULES)
    if violations:
        raise TaskValidationError(violations)

    description = body.get("description")
    if not isinstance(description, str):
        description = None

    try:
        return await run_in_threadpool(create_task, db, title=body["title"], description=description)
    except Exception as e:
        logger.error(e, exc_info=True)
        raise TaskApiError(500, CREATE_FAILED)


@task_router.get("/{task_id}", response_model=TaskResponse, responses=PATH_ERROR_RESPONSES)
def get_task_endpoint(task: Task = Depends(load_task)) -> Dict[str, Any]:
    """Get a single task by ID."""
    return task.to_dict()


@task_router.patch(
    "/{task_id}",
    response_model=TaskResponse,
    responses={
        **PATH_ERROR_RESPONSES,
        400: {"description": "Invalid task ID or request body"},
    },
    openapi_extra=_request_body_doc(TaskUpdateRequest),
)
async def update_task_endpoint(
    request: Request,
    task: Task = Depends(load_task),
    db: Session = Depends(get_db)
) -> Dict[str, Any]:
    """Update the fields present in the body, leaving the others untouched."""
    body = await read_json_body(request)
    violations = validate(body, UPDATE_TASK_RULES)
    if violations:
        raise TaskValidationError(violations)

    if "completed" in body:
        body["completed"] = as_boolean(body["completed"])

    try:
        return await run_in_threadpool(update_task, db, task, body)
    except Exception as e:
        logger.error(e, exc_info=True)
        raise TaskApiError(500, UPDATE_FAILED)


@task_router.delete("/{task_id}", response_model=MessageResponse, responses=PATH_ERROR_RESPONSES)
def delete_task_endpoint(
    task: Task = Depends(load_task),
    db: Session = Depends(get_db)
) -> Dict[str, Any]:
    """Delete a task by ID. The deleted task is not returned."""
    try:
        delete_task(db, task)
    except Exception as e:
        logger.error(e, exc_info=True)
        raise TaskApiError(500, DELETE_FAILED)

    return {"message": TASK_DELETED}
