import logging

from fastapi import FastAPI

from shared.logging_config import LoggingMiddleware, install_middleware
from shared.logging_config import setup_logging as configure_root_logging

from .config import settings

logger = logging.getLogger("auth_service")

__all__ = ["LoggingMiddleware", "logger", "setup_logging", "setup_middleware"]


def setup_logging() -> None:
    configure_root_logging(settings.LOGGING_LEVEL)
    logger.info(f"Logging configured at level {settings.LOGGING_LEVEL}")


def setup_middleware(app: FastAPI) -> None:
    install_middleware(app, settings.CORS_ALLOW_ORIGINS, logger)
