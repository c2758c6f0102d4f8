"""
Route guards for the Quoting Service.

Browser routes accept the internal service key or a service token whose
roles include Quoting or Admin; internal routes demand the service key.
"""

from shared.schemas import SERVICE_ROLE_MAP
from shared.security import ServiceGuard, ServiceTokenVerifier

from ..config import settings

guard = ServiceGuard(
    settings.INTERNAL_SERVICE_KEY,
    ServiceTokenVerifier(settings.service_token_config()),
)

require_quoting_access = guard.require_caller(*SERVICE_ROLE_MAP[settings.SERVICE_NAME])
require_internal_caller = guard.require_service_key()
