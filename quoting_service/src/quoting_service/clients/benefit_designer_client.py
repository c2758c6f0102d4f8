"""
Benefit Designer Service client for the Quoting Service.
"""

from typing import Any, Dict, Optional

from shared.clients import ServiceClient

from ..config import settings


class BenefitDesignerClient(ServiceClient):
    """Client for communicating with the Benefit Designer Service."""

    async def fetch_template_by_id(
        self, template_id: int, service_token: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self.get(
            f"/api/templates/{template_id}",
            headers={"Cache-Control": "no-store"},
            service_token=service_token,
        )


def get_benefit_designer_client() -> BenefitDesignerClient:
    """
    FastAPI dependency for obtaining a BenefitDesignerClient instance.

    Returns:
        Configured BenefitDesignerClient instance
    """
    return BenefitDesignerClient(
        settings.BENEFIT_DESIGNER_URL,
        settings.INTERNAL_SERVICE_KEY,
        service_name="benefit-designer",
        timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
    )
