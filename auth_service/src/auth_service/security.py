"""
Password hashing and session tokens for the Auth Service.

Session tokens identify a logged-in user to this service only; other services
accept the short-lived service tokens minted from a session instead.
"""

import time
from typing import Callable, Optional

from passlib.context import CryptContext
from pydantic import ValidationError

from shared.errors import Unauthenticated
from shared.schemas import SessionPrincipal, parse_roles
from shared.security import AuthError, decode_jwt, encode_jwt

from .logging_config import logger
from .models.user import User

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

SESSION_ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    """
    Hash a password for storing.
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed one.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a recognised hash
        return False


def create_session_token(
    user: User,
    *,
    secret: str,
    expire_minutes: int,
    clock: Callable[[], float] = time.time,
) -> str:
    issued_at = int(clock())
    claims = {
        "sub": str(user.id),
        "email": user.email,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "roles": [role.value for role in user.role_names],
        "iat": issued_at,
        "exp": issued_at + expire_minutes * 60,
    }
    return encode_jwt(claims, secret=secret, algorithm=SESSION_ALGORITHM)


def decode_session_token(token: Optional[str], *, secret: str) -> SessionPrincipal:
    """
    Validate a session token and return the principal it names.

    Raises:
        Unauthenticated: Missing, expired, tampered or malformed token
    """
    if not token:
        raise Unauthenticated()
    try:
        payload = decode_jwt(token, secret=secret, algorithm=SESSION_ALGORITHM)
    except AuthError as e:
        logger.info(f"Rejected session token: {e}")
        raise Unauthenticated()

    payload["roles"] = parse_roles(payload.get("roles") or [])
    try:
        return SessionPrincipal.model_validate(payload)
    except ValidationError:
        raise Unauthenticated()
