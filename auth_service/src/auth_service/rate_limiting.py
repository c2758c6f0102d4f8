import sys

from fastapi import FastAPI, Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from .config import settings
from .logging_config import logger

# Determine if we're in test mode by checking if pytest is running
IS_TEST_MODE = "pytest" in sys.modules

LOGIN_LIMIT = settings.RATE_LIMIT_LOGIN
SERVICE_TOKEN_LIMIT = settings.RATE_LIMIT_SERVICE_TOKEN

limiter = Limiter(
    key_func=get_remote_address,
    strategy="fixed-window",
    enabled=not IS_TEST_MODE,
)


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Custom handler for rate limit exceeded exceptions"""
    logger.warning(f"Rate limit exceeded on {request.url.path}")
    return JSONResponse(
        status_code=429,
        content={"message": "Too many requests", "detail": str(exc.detail)},
    )


def setup_rate_limiting(app: FastAPI) -> None:
    """Configure rate limiting for the FastAPI application"""
    app.state.limiter = limiter

    if IS_TEST_MODE:
        logger.info("Rate limiting is disabled in test mode")
    else:
        logger.info(
            f"Rate limiting enabled: Login={LOGIN_LIMIT}, ServiceToken={SERVICE_TOKEN_LIMIT}"
        )

    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
