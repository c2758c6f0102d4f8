"""
Login, session and service-token endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import Unauthenticated
from shared.schemas import SessionPrincipal
from shared.security import ServiceTokenIssuer

from ..config import settings
from ..crud import users as user_crud
from ..db import get_db
from ..dependencies import (
    SESSION_COOKIE,
    get_current_session,
    get_optional_session,
    get_token_issuer,
)
from ..logging_config import logger
from ..rate_limiting import LOGIN_LIMIT, SERVICE_TOKEN_LIMIT, limiter
from ..schemas import (
    LoginRequest,
    LoginResponse,
    ServiceTokenRequest,
    ServiceTokenResponse,
    SessionResponse,
    UserResponse,
)
from ..security import create_session_token

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in with email and password",
    description="Checks the credentials and returns a signed session token.",
)
@limiter.limit(LOGIN_LIMIT)
async def login(
    request: Request,
    response: Response,
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    user = await user_crud.authenticate_user(db, credentials.email, credentials.password)
    if user is None:
        logger.info("Login rejected for invalid credentials")
        raise Unauthenticated("Invalid email or password")

    session_token = create_session_token(
        user,
        secret=settings.session_secret(),
        expire_minutes=settings.SESSION_TOKEN_EXPIRE_MINUTES,
    )
    response.set_cookie(
        SESSION_COOKIE,
        session_token,
        httponly=True,
        samesite="lax",
        secure=settings.is_production(),
        max_age=settings.SESSION_TOKEN_EXPIRE_MINUTES * 60,
    )
    logger.info(f"User {user.id} logged in")
    return LoginResponse(session_token=session_token, user=UserResponse.model_validate(user))


@router.get(
    "/session",
    response_model=SessionResponse,
    summary="Current session",
)
async def read_session(session: SessionPrincipal = Depends(get_current_session)):
    return SessionResponse(
        user_id=session.user_id,
        email=session.email,
        first_name=session.first_name,
        last_name=session.last_name,
        roles=session.roles,
    )


@router.post(
    "/service-token",
    response_model=ServiceTokenResponse,
    summary="Mint a service token",
    description=(
        "Issues a 15 minute token carrying the session's identity and roles "
        "for calling the named service."
    ),
)
@limiter.limit(SERVICE_TOKEN_LIMIT)
async def issue_service_token(
    request: Request,
    body: Optional[ServiceTokenRequest] = None,
    session: Optional[SessionPrincipal] = Depends(get_optional_session),
    issuer: ServiceTokenIssuer = Depends(get_token_issuer),
):
    service = body.service if body else None
    token = issuer.issue(session, service)
    return ServiceTokenResponse(token=token)
