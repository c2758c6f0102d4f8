"""
Shared schemas package.
Contains Pydantic models and validation schemas used across the services.
"""

from .base import CamelModel
from .roles import (
    SERVICE_ROLE_MAP,
    Role,
    has_required_role,
    parse_roles,
)
from .user_schemas import ServiceTokenClaims, SessionPrincipal

__all__ = [
    "CamelModel",
    "Role",
    "SERVICE_ROLE_MAP",
    "has_required_role",
    "parse_roles",
    "ServiceTokenClaims",
    "SessionPrincipal",
]
