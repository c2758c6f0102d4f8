"""
FastAPI dependencies that guard service routes.

Each service builds one ServiceGuard from its configured internal key and a
ServiceTokenVerifier, then attaches the dependencies it returns to its routers.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from fastapi import Request

from ..errors import Forbidden, Unauthorized
from ..schemas.roles import Role, has_required_role
from ..schemas.user_schemas import ServiceTokenClaims
from .jwt import parse_bearer
from .service_key import SERVICE_KEY_HEADER, service_key_matches
from .service_token import ServiceTokenVerifier

logger = logging.getLogger(__name__)

SERVICE_TOKEN_COOKIE = "service_token"


@dataclass
class CallerIdentity:
    """Who is calling: a trusted sibling (service key), a user (token), or both."""

    trusted_service: bool
    claims: Optional[ServiceTokenClaims] = None

    @property
    def user_id(self) -> Optional[int]:
        return self.claims.user_id if self.claims else None

    @property
    def roles(self) -> List[Role]:
        return list(self.claims.roles) if self.claims else []


class ServiceGuard:
    def __init__(self, service_key: Optional[str], verifier: ServiceTokenVerifier):
        self._service_key = service_key
        self._verifier = verifier

    def _authenticate(self, request: Request, *, key_required: bool) -> CallerIdentity:
        presented_key = request.headers.get(SERVICE_KEY_HEADER)
        key_ok = False
        if presented_key is not None:
            if not service_key_matches(presented_key, self._service_key):
                logger.warning(f"Invalid service key on {request.method} {request.url.path}")
                raise Unauthorized("Invalid service key")
            key_ok = True
        elif key_required:
            raise Unauthorized("Missing service key")

        token = parse_bearer(
            request.headers,
            request.query_params,
            request.cookies,
            cookie_name=SERVICE_TOKEN_COOKIE,
        )
        claims = self._verifier.verify(token) if token else None

        if not key_ok and claims is None:
            raise Unauthorized("Missing service token")

        request.state.service_claims = claims
        return CallerIdentity(trusted_service=key_ok, claims=claims)

    @staticmethod
    def _authorize(identity: CallerIdentity, roles: Iterable[Role]) -> None:
        required = list(roles)
        if not required or identity.claims is None:
            return
        if not has_required_role(identity.claims.roles, required):
            raise Forbidden("Insufficient role for this resource")

    def require_caller(self, *roles: Role):
        """
        Accept a matching service key, a valid service token, or both.

        When a token is presented and roles are given, the token's roles must
        intersect them.
        """

        async def dependency(request: Request) -> CallerIdentity:
            identity = self._authenticate(request, key_required=False)
            self._authorize(identity, roles)
            return identity

        return dependency

    def require_service_key(self, *roles: Role):
        """Internal-only routes: the service key is mandatory, a token is optional."""

        async def dependency(request: Request) -> CallerIdentity:
            identity = self._authenticate(request, key_required=True)
            self._authorize(identity, roles)
            return identity

        return dependency
