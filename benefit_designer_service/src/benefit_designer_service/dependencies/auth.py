"""
Route guards for the Benefit Designer Service.

The quoting service reads templates with the internal service key; browsers
need a service token with the BenefitDesigner or Admin role.
"""

from shared.schemas import SERVICE_ROLE_MAP
from shared.security import ServiceGuard, ServiceTokenVerifier

from ..config import settings

guard = ServiceGuard(
    settings.INTERNAL_SERVICE_KEY,
    ServiceTokenVerifier(settings.service_token_config()),
)

require_designer_access = guard.require_caller(*SERVICE_ROLE_MAP[settings.SERVICE_NAME])
