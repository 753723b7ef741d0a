"""Pytest configuration and fixtures for testing.

This module provides shared fixtures for database testing using in-memory SQLite
for fast and isolated test execution.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from task_manager_api.api.app import create_app
from task_manager_api.config import AppConfig
from task_manager_api.database import get_db
from task_manager_api.models import Base


@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite engine for testing.

    Yields:
        SQLAlchemy Engine instance configured for in-memory SQLite.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Create a database session for testing.

    Args:
        db_engine: SQLAlchemy engine fixture.

    Yields:
        SQLAlchemy Session instance for database operations.
    """
    SessionLocal = sessionmaker(
        bind=db_engine,
        autoflush=False,
        expire_on_commit=False
    )

    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def app_config():
    """Configuration for an isolated in-memory application."""
    return AppConfig(database_url="sqlite:///:memory:", create_tables=False)


@pytest.fixture(scope="function")
def app(app_config):
    """Create a fresh FastAPI application for each test."""
    return create_app(app_config)


@pytest.fixture(scope="function")
def client(app, db_session):
    """Create a FastAPI test client with database dependency override.

    Args:
        app: Application fixture.
        db_session: Database session fixture for dependency injection.

    Yields:
        TestClient instance configured with test database session.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
