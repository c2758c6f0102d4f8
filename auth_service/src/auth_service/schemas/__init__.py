from .auth_schemas import (
    LoginRequest,
    LoginResponse,
    ServiceTokenRequest,
    ServiceTokenResponse,
    SessionResponse,
)
from .user_schemas import UserCreate, UserResponse

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "ServiceTokenRequest",
    "ServiceTokenResponse",
    "SessionResponse",
    "UserCreate",
    "UserResponse",
]
