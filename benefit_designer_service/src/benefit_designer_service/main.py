"""
Benefit Designer Service main application entry point.

Manages benefit categories and the versioned templates that quotes are
configured from.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from shared.errors import register_exception_handlers

from .config import settings
from .db import close_engine
from .logging_config import logger, setup_logging, setup_middleware
from .routers import category_router, health_router, template_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.logger.info(f"'{settings.PROJECT_NAME}' startup sequence initiated.")
    app.startup_time = time.time()

    yield

    # --- Application Shutdown ---
    app.logger.info(f"'{settings.PROJECT_NAME}' shutdown sequence initiated.")
    await close_engine()


# Configure logging before app initialization
setup_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Benefit categories and versioned benefit templates",
    version="1.0.0",
    root_path=settings.ROOT_PATH,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Initialize application logger
app.logger = logging.getLogger(settings.PROJECT_NAME)

register_exception_handlers(app, expose_error_details=settings.expose_error_details())

# Setup middleware - MUST be done before application starts
setup_middleware(app)

app.include_router(health_router)
app.include_router(category_router)
app.include_router(template_router)

logger.info(f"{settings.PROJECT_NAME} routes registered")
