"""
Logging helpers shared by all services.

Each service wraps these in its own logging_config module so that the
service logger name and settings stay local to the service.
"""

import logging
import sys
import time
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Loggers that are too chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine")


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single stream handler."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every request."""

    def __init__(self, app, logger: Optional[logging.Logger] = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger(__name__)

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        self.logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({duration_ms:.1f} ms)"
        )
        return response


def install_middleware(
    app: FastAPI, cors_origins: List[str], logger: logging.Logger
) -> None:
    app.add_middleware(LoggingMiddleware, logger=logger)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
