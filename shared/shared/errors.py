"""
Error taxonomy shared by every service, and the FastAPI handlers that
render it as JSON.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, **extra: Any):
        self.message = message or self.default_message
        self.extra: Dict[str, Any] = extra
        super().__init__(self.message)

    def to_content(self) -> Dict[str, Any]:
        return {"message": self.message, **self.extra}


class Unauthenticated(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class Unauthorized(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class TokenExpired(Unauthorized):
    default_message = "Token expired"


class Forbidden(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class InvalidRequest(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad Request"


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class ConfigurationError(ServiceError):
    """Raised when a required secret or setting is missing."""

    default_message = "Server misconfiguration"


class InternalError(ServiceError):
    pass


class UpstreamError(ServiceError):
    """A downstream service answered with a non-2xx status."""

    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, upstream_status: int, status_text: str = "", body: str = ""):
        self.upstream_status = upstream_status
        self.status_text = status_text
        self.body = body
        super().__init__(f"Upstream returned {upstream_status} {status_text}".strip())


class UpstreamTimeout(ServiceError):
    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    default_message = "Upstream request timed out"


def register_exception_handlers(app: FastAPI, expose_error_details: bool = False) -> None:
    """
    Install JSON error rendering on an application.

    Args:
        app: The FastAPI application
        expose_error_details: Include the exception text in 500 bodies
    """

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "Invalid request body",
                "errors": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.middleware("http")
    async def unhandled_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}")
            content: Dict[str, Any] = {"message": "Internal Server Error"}
            if expose_error_details:
                content["error"] = str(exc)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content
            )
