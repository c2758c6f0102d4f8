from .guards import CallerIdentity, ServiceGuard
from .jwt import AuthError, ExpiredTokenError, decode_jwt, encode_jwt, parse_bearer
from .service_key import SERVICE_KEY_HEADER, service_key_matches
from .service_token import (
    SERVICE_TOKEN_LIFETIME_MINUTES,
    ServiceTokenConfig,
    ServiceTokenIssuer,
    ServiceTokenVerifier,
)

__all__ = [
    "AuthError",
    "ExpiredTokenError",
    "decode_jwt",
    "encode_jwt",
    "parse_bearer",
    "SERVICE_KEY_HEADER",
    "service_key_matches",
    "SERVICE_TOKEN_LIFETIME_MINUTES",
    "ServiceTokenConfig",
    "ServiceTokenIssuer",
    "ServiceTokenVerifier",
    "CallerIdentity",
    "ServiceGuard",
]
