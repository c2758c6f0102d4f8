"""
Session and token-issuer dependencies for the Auth Service routes.
"""

from typing import Optional

from fastapi import Depends, Request

from shared.errors import Forbidden
from shared.schemas import Role, SessionPrincipal
from shared.security import ServiceTokenIssuer, parse_bearer

from ..config import settings
from ..security import decode_session_token

SESSION_COOKIE = "session"


def read_session_token(request: Request) -> Optional[str]:
    return parse_bearer(request.headers, None, request.cookies, cookie_name=SESSION_COOKIE)


async def get_optional_session(request: Request) -> Optional[SessionPrincipal]:
    """The current session, or None when the request carries no session token."""
    token = read_session_token(request)
    if not token:
        return None
    return decode_session_token(token, secret=settings.session_secret())


async def get_current_session(request: Request) -> SessionPrincipal:
    """
    A dependency that requires a valid session.

    Raises:
        Unauthenticated: No session token, or an invalid one
    """
    return decode_session_token(
        read_session_token(request), secret=settings.session_secret()
    )


async def require_admin_session(
    session: SessionPrincipal = Depends(get_current_session),
) -> SessionPrincipal:
    if Role.ADMIN not in session.roles:
        raise Forbidden("Admin role required")
    return session


def get_token_issuer() -> ServiceTokenIssuer:
    """Raises ConfigurationError when JWT_SECRET is missing."""
    return ServiceTokenIssuer(settings.service_token_config())
