from .auth import (
    SESSION_COOKIE,
    get_current_session,
    get_optional_session,
    get_token_issuer,
    require_admin_session,
)

__all__ = [
    "SESSION_COOKIE",
    "get_current_session",
    "get_optional_session",
    "get_token_issuer",
    "require_admin_session",
]
