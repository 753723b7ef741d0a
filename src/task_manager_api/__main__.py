"""Run the task manager API with uvicorn.

Usage:
    python -m task_manager_api
"""

import logging

import uvicorn

from .api.app import create_app
from .config import configure_logging, load_config

logger = logging.getLogger(__name__)


def main() -> None:
    config = load_config()
    configure_logging(config.log_level)

    logger.info(f"Starting Task Manager API on {config.service_host}:{config.service_port}")
    uvicorn.run(
        create_app(config),
        host=config.service_host,
        port=config.service_port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
