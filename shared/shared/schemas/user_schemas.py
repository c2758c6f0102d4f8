from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .roles import Role


class SessionPrincipal(BaseModel):
    """
    Defines the structure of a user session after validation.
    This is what the portal's login issues and what the service-token
    issuer consumes.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(..., alias="sub")
    email: str
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    roles: List[Role] = Field(default_factory=list)


class ServiceTokenClaims(BaseModel):
    """
    Defines the structure of a service token payload after validation.
    This schema is the shared contract between the portal that mints the
    token and every service that accepts it.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(..., alias="userId")
    email: str
    roles: List[Role] = Field(default_factory=list)
    service: str
    iat: int
    exp: int
