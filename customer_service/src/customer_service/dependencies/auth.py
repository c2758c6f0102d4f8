"""
Route guards for the Customer Service.

Every API route accepts the internal service key or a service token whose
roles include CustomerService or Admin.
"""

from shared.schemas import SERVICE_ROLE_MAP
from shared.security import ServiceGuard, ServiceTokenVerifier

from ..config import settings

guard = ServiceGuard(
    settings.INTERNAL_SERVICE_KEY,
    ServiceTokenVerifier(settings.service_token_config()),
)

require_customer_service_access = guard.require_caller(*SERVICE_ROLE_MAP[settings.SERVICE_NAME])
