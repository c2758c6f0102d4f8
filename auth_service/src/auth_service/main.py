import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from shared.errors import register_exception_handlers

from .config import settings
from .db import close_engine
from .logging_config import logger, setup_logging, setup_middleware
from .rate_limiting import setup_rate_limiting
from .routers import auth_router, health_router, user_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle manager.

    Refuses to start without a service-token signing secret, and disposes
    of the database engine on shutdown.
    """
    app.logger.info(f"'{settings.PROJECT_NAME}' startup sequence initiated.")
    app.startup_time = time.time()

    # Raises ConfigurationError and aborts startup when JWT_SECRET is missing
    settings.service_token_config().require_secret()
    settings.session_secret()

    app.logger.info("Application startup complete.")
    yield

    # --- Application Shutdown ---
    app.logger.info(f"{settings.PROJECT_NAME} shutdown sequence initiated.")
    await close_engine()
    app.logger.info(f"{settings.PROJECT_NAME} shutdown sequence complete.")


# Configure logging before app initialization
setup_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Users, roles, login sessions and service-token issuance for the Apogee services.",
    version="1.0.0",
    root_path=settings.ROOT_PATH,
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Authentication",
            "description": "Login, current session and service-token issuance.",
        },
        {
            "name": "Users",
            "description": "User registration and listing.",
        },
    ],
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    swagger_ui_parameters={"persistAuthorization": True},
)

# Initialize application logger
app.logger = logging.getLogger(settings.PROJECT_NAME)

register_exception_handlers(app, expose_error_details=settings.expose_error_details())

# Setup middleware - MUST be done before application starts
setup_middleware(app)

# Setup rate limiting
setup_rate_limiting(app)

# --- Include Service-Specific Routers ---
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(user_router)

logger.info(f"{settings.PROJECT_NAME} routes registered")
