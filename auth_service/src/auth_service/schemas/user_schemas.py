from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field, field_validator

from shared.schemas import CamelModel, Role


class UserCreate(CamelModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    # Unknown role names are dropped rather than rejected
    roles: List[str] = Field(default_factory=list)


class UserResponse(CamelModel):
    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_active: bool = True
    roles: List[Role] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    @field_validator("roles", mode="before")
    @classmethod
    def flatten_role_assignments(cls, value: Any) -> Any:
        # ORM rows carry UserRole objects; pull the role off each one
        if isinstance(value, list):
            return [getattr(item, "role", item) for item in value]
        return value
