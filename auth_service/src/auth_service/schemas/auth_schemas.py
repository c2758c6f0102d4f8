from typing import List, Optional

from shared.schemas import CamelModel, Role

from .user_schemas import UserResponse


class LoginRequest(CamelModel):
    email: str
    password: str


class LoginResponse(CamelModel):
    session_token: str
    user: UserResponse


class SessionResponse(CamelModel):
    user_id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    roles: List[Role]


class ServiceTokenRequest(CamelModel):
    service: Optional[str] = None


class ServiceTokenResponse(CamelModel):
    token: str
