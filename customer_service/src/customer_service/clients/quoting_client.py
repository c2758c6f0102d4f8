"""
Quoting Service client for the Customer Service.
"""

from typing import Any, Dict, List, Optional

from shared.clients import ServiceClient

from ..config import settings

ARCHIVED = "Archived"


class QuotingClient(ServiceClient):
    """Client for communicating with the Quoting Service."""

    async def fetch_quotes(self, service_token: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self.get("/api/quotes", service_token=service_token)

    async def fetch_quote_detail(
        self, quote_id: int, service_token: Optional[str] = None
    ) -> Dict[str, Any]:
        """The quote with its applicant or group, employees, classes and coverages."""
        return await self.get(f"/api/quotes/{quote_id}", service_token=service_token)

    async def update_quote(
        self, quote_id: int, data: Dict[str, Any], service_token: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self.patch(f"/api/quotes/{quote_id}", json=data, service_token=service_token)

    async def fetch_applicants(self, service_token: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self.get("/api/applicants", service_token=service_token)

    async def update_applicant(
        self, applicant_id: int, data: Dict[str, Any], service_token: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self.patch(
            f"/api/applicants/{applicant_id}", json=data, service_token=service_token
        )

    async def fetch_groups(self, service_token: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self.get("/api/groups", service_token=service_token)

    async def fetch_coverages(
        self, quote_id: Optional[int] = None, service_token: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        params = {"quoteId": quote_id} if quote_id is not None else None
        return await self.get("/api/coverages", params=params, service_token=service_token)

    async def archive_quote(
        self, quote_id: int, service_token: Optional[str] = None
    ) -> Dict[str, Any]:
        """Mark a quote Archived once it has become a policy."""
        return await self.update_quote(quote_id, {"status": ARCHIVED}, service_token=service_token)


def get_quoting_client() -> QuotingClient:
    """
    FastAPI dependency for obtaining a QuotingClient instance.

    Returns:
        Configured QuotingClient instance
    """
    return QuotingClient(
        settings.QUOTING_SERVICE_URL,
        settings.INTERNAL_SERVICE_KEY,
        service_name="quoting",
        timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
    )
