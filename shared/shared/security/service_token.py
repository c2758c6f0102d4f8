"""
Service token issuance and verification.

A service token is a short-lived HS256 JWT carrying the caller's identity and
roles, minted by the auth service for one target service and checked by that
service before it trusts a browser-originated request.
"""

import logging
import time
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import (
    ConfigurationError,
    InvalidRequest,
    TokenExpired,
    Unauthenticated,
    Unauthorized,
)
from ..schemas.user_schemas import ServiceTokenClaims, SessionPrincipal
from .jwt import AuthError, ExpiredTokenError, decode_jwt, encode_jwt

logger = logging.getLogger(__name__)

SERVICE_TOKEN_LIFETIME_MINUTES = 15


class ServiceTokenConfig(BaseModel):
    """Immutable signing configuration handed to the issuer and verifier."""

    model_config = ConfigDict(frozen=True)

    secret: Optional[str] = None
    algorithm: str = "HS256"
    lifetime_minutes: int = SERVICE_TOKEN_LIFETIME_MINUTES
    leeway_seconds: int = 0

    def require_secret(self) -> str:
        if not self.secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        return self.secret


class ServiceTokenIssuer:
    def __init__(self, config: ServiceTokenConfig, clock: Callable[[], float] = time.time):
        self._secret = config.require_secret()
        self._config = config
        self._clock = clock

    def issue(self, session: Optional[SessionPrincipal], service: Optional[str]) -> str:
        """
        Mint a token for the given session and target service.

        Args:
            session: The authenticated principal, or None when there is none
            service: Name of the service the token is meant for

        Returns:
            str: Compact JWT

        Raises:
            Unauthenticated: No session
            InvalidRequest: Missing or empty service name
        """
        if session is None:
            raise Unauthenticated()
        if not service or not service.strip():
            raise InvalidRequest("Service name is required")

        issued_at = int(self._clock())
        claims = {
            "userId": session.user_id,
            "email": session.email,
            "roles": [role.value for role in session.roles],
            "service": service,
            "iat": issued_at,
            "exp": issued_at + self._config.lifetime_minutes * 60,
        }
        logger.info(f"Issued service token for user {session.user_id} targeting '{service}'")
        return encode_jwt(claims, secret=self._secret, algorithm=self._config.algorithm)


class ServiceTokenVerifier:
    def __init__(self, config: ServiceTokenConfig):
        self._secret = config.require_secret()
        self._config = config

    def verify(self, token: str) -> ServiceTokenClaims:
        try:
            payload = decode_jwt(
                token,
                secret=self._secret,
                algorithm=self._config.algorithm,
                leeway=self._config.leeway_seconds,
            )
        except ExpiredTokenError:
            raise TokenExpired()
        except AuthError as e:
            logger.warning(f"Rejected service token: {e}")
            raise Unauthorized("Invalid token")

        try:
            return ServiceTokenClaims.model_validate(payload)
        except ValidationError:
            logger.warning("Rejected service token with malformed claims")
            raise Unauthorized("Invalid token")
