"""Core database connection and session management using SQLAlchemy.

This module provides database connectivity for both PostgreSQL and SQLite,
with connection pooling and per-request session management. The engine and
session factory are owned by the FastAPI application (``app.state``) rather
than by this module.
"""

import logging
from typing import Any, Dict, Generator, Tuple

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base

logger = logging.getLogger(__name__)


POSTGRES_POOL_OPTIONS = {
    "pool_size": 10,
    "max_overflow": 20,
    "pool_timeout": 30,
    "pool_pre_ping": True,
}

IN_MEMORY_SQLITE_URL = "sqlite:///:memory:"


def _engine_options(db_url: str) -> Dict[str, Any]:
    """Keyword arguments for ``create_engine`` based on the URL's dialect."""
    if db_url.startswith("postgresql"):
        return dict(POSTGRES_POOL_OPTIONS)

    options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if db_url == IN_MEMORY_SQLITE_URL:
        # one connection, or each session gets its own empty database
        options["poolclass"] = StaticPool
    return options


def create_engine_and_session_factory(db_url: str) -> Tuple[Engine, sessionmaker]:
    """Build the engine for ``db_url`` and a session factory bound to it.

    PostgreSQL URLs get a pre-pinged connection pool. SQLite URLs may be used
    from request threads; the in-memory database is kept on a single
    connection.

    Raises:
        Exception: If the engine cannot be created for this URL.
    """
    try:
        engine = create_engine(db_url, **_engine_options(db_url))
    except Exception as e:
        logger.error(f"Failed to create database engine: {e}", exc_info=True)
        raise

    return engine, sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create all tables known to the ORM metadata if they do not exist."""
    logger.info("Creating database tables")
    Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a session from the application's session factory.

    Used as a FastAPI dependency; the session is closed once the request
    has been handled, even if errors occur.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def check_db_connection(session_factory: sessionmaker) -> bool:
    """Check database connectivity.

    Returns:
        True if connection successful, False otherwise.
    """
    try:
        with session_factory() as db:
            db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}", exc_info=True)
        return False
