"""Application configuration loaded from the environment.

Values come from environment variables, optionally seeded from a ``.env``
file through python-dotenv. The resulting ``AppConfig`` is passed explicitly
to ``create_app`` instead of being read from module globals.
"""

import logging
import os
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_DATABASE_URL = "sqlite:///:memory:"


class AppConfig(BaseModel):
    """Process-wide settings for the task manager service."""
    database_url: str = Field(DEFAULT_DATABASE_URL, description="SQLAlchemy database URL")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")
    service_host: str = Field("0.0.0.0", description="Interface the HTTP server binds to")
    service_port: int = Field(8000, ge=1, le=65535, description="Port the HTTP server listens on")
    log_level: str = Field("INFO", description="Root logging level")
    create_tables: bool = Field(True, description="Create missing tables at startup")

    @field_validator('cors_origins', mode='before')
    @classmethod
    def split_origins(cls, v):
        """Accept a comma separated string as well as a list."""
        if isinstance(v, str):
            origins = [origin.strip() for origin in v.split(",") if origin.strip()]
            return origins or ["*"]
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config(env_file: Optional[str] = None) -> AppConfig:
    """Build an AppConfig from environment variables.

    Args:
        env_file: Optional path to a dotenv file. When None, python-dotenv
            searches for a ``.env`` file from the current directory upwards.

    Returns:
        AppConfig populated from the environment, falling back to defaults.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    return AppConfig(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        cors_origins=os.getenv("CORS_ORIGINS", "*"),
        service_host=os.getenv("SERVICE_HOST", "0.0.0.0"),
        service_port=int(os.getenv("SERVICE_PORT", 8000)),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        create_tables=_env_flag("CREATE_TABLES", True),
    )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
