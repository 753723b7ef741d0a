"""FastAPI application factory for the task manager API.

``create_app`` builds a fully wired application from an explicit
``AppConfig``: database engine and session factory on ``app.state``, CORS,
task routes, error handlers and the Swagger UI.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import AppConfig, load_config
from ..database import check_db_connection, create_engine_and_session_factory, init_db
from ..routes.task_routes import task_router
from .errors import register_exception_handlers

logger = logging.getLogger(__name__)

DOCS_PATH = "/api-docs"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create tables on startup when configured; dispose the engine on shutdown."""
    config: AppConfig = app.state.config
    if config.create_tables:
        init_db(app.state.engine)

    logger.info(f"Task Manager API ready, documentation at {DOCS_PATH}")

    yield

    app.state.engine.dispose()
    logger.info("Database engine disposed")


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Create a FastAPI application instance.

    Args:
        config: Application settings. If None, settings are loaded from the
            environment with load_config().

    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = load_config()

    app = FastAPI(
        title="Task Manager API",
        description="API para gestionar tareas",
        version="1.0.0",
        docs_url=DOCS_PATH,
        lifespan=lifespan,
    )

    engine, session_factory = create_engine_and_session_factory(config.database_url)
    app.state.config = config
    app.state.engine = engine
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(task_router, prefix="/api")

    @app.get("/health")
    def health_check():
        """Health check endpoint; reports 503 when the database is unreachable."""
        if not check_db_connection(app.state.session_factory):
            return JSONResponse(status_code=503, content={"status": "unhealthy"})
        return {"status": "healthy"}

    return app
