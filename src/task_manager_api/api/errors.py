"""Error types raised by task routes and their HTTP rendering.

Routes and dependencies raise these exceptions; the handlers registered by
``register_exception_handlers`` turn them into the JSON bodies clients see.
"""

import logging
from typing import List

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..validation import Violation

logger = logging.getLogger(__name__)

INVALID_TASK_ID = "ID de tarea no válido"
TASK_NOT_FOUND = "Tarea no encontrada"
TASK_DELETED = "Tarea eliminada"

LIST_FAILED = "Error al obtener las tareas"
CREATE_FAILED = "Error al crear la tarea"
LOOKUP_FAILED = "Error al buscar la tarea"
UPDATE_FAILED = "Error al actualizar la tarea"
DELETE_FAILED = "Error al eliminar la tarea"


class TaskApiError(Exception):
    """Exception carrying a status code and a fixed client-facing message."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class TaskValidationError(Exception):
    """Exception raised when a request body fails validation."""

    def __init__(self, violations: List[Violation]):
        super().__init__(", ".join(v.msg for v in violations))
        self.violations = violations


async def task_api_error_handler(request: Request, exc: TaskApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def task_validation_error_handler(request: Request, exc: TaskValidationError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(
        status_code=400,
        content={"errors": [violation.to_dict() for violation in exc.violations]}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the task error handlers to an application."""
    app.add_exception_handler(TaskApiError, task_api_error_handler)
    app.add_exception_handler(TaskValidationError, task_validation_error_handler)
