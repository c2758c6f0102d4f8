"""
Quoting Service main application entry point.

Serves quotes, applicants, groups, employee classes, coverages and
configured quote benefits, and proxies benefit templates from the
benefit designer.
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from shared.errors import register_exception_handlers

from .config import settings
from .db import close_engine
from .logging_config import logger, setup_logging, setup_middleware
from .routers import (
    applicant_router,
    coverage_router,
    employee_class_router,
    group_router,
    health_router,
    quote_benefit_router,
    quote_router,
    templates_proxy_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.logger.info(f"'{settings.PROJECT_NAME}' startup sequence initiated.")
    app.startup_time = time.time()

    if not settings.INTERNAL_SERVICE_KEY:
        app.logger.warning("INTERNAL_SERVICE_KEY is not set; service-key callers will be rejected")

    yield

    # --- Application Shutdown ---
    app.logger.info(f"'{settings.PROJECT_NAME}' shutdown sequence initiated.")
    await close_engine()


# Configure logging before app initialization
setup_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Quotes, applicants and groups for Apogee insurance products",
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

# --- Service-Specific Routers ---
app.include_router(health_router)
app.include_router(quote_router)
app.include_router(applicant_router)
app.include_router(group_router)
app.include_router(employee_class_router)
app.include_router(coverage_router)
app.include_router(quote_benefit_router)
app.include_router(templates_proxy_router)

logger.info(f"{settings.PROJECT_NAME} routes registered")
