"""
Tests for the quote views fanned out to the quoting service.
"""

import httpx
import pytest
from fastapi import status

from shared.schemas import Role

QUOTES = [{"id": 1, "status": "In Progress", "type": "Individual", "applicantId": 4}]
APPLICANTS = [{"id": 4, "firstName": "Grace", "lastName": "Hopper"}]
GROUPS = [{"id": 2, "groupName": "Acme"}]


def serve_all(quoting_handler):
    quoting_handler.routes.update(
        {
            ("GET", "/api/quotes"): httpx.Response(200, json=QUOTES),
            ("GET", "/api/applicants"): httpx.Response(200, json=APPLICANTS),
            ("GET", "/api/groups"): httpx.Response(200, json=GROUPS),
        }
    )


@pytest.mark.asyncio
async def test_fan_out_combines_three_calls(client, quoting_handler, bearer_factory):
    serve_all(quoting_handler)

    response = await client.get("/api/quotes", headers=bearer_factory(Role.CUSTOMER_SERVICE))

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"quotes": QUOTES, "applicants": APPLICANTS, "groups": GROUPS}
    assert sorted(r.url.path for r in quoting_handler.requests) == [
        "/api/applicants",
        "/api/groups",
        "/api/quotes",
    ]
    assert all(r.headers["x-service-key"] == "test-internal-key" for r in quoting_handler.requests)


@pytest.mark.asyncio
async def test_fan_out_with_one_failure_returns_no_partial_result(
    client, quoting_handler, service_headers
):
    serve_all(quoting_handler)
    quoting_handler.routes[("GET", "/api/groups")] = httpx.Response(500, text="boom")

    response = await client.get("/api/quotes", headers=service_headers)

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    body = response.json()
    assert body["message"] == "Failed to fetch quotes from Quoting Service"
    assert "500" in body["error"]
    assert "quotes" not in body
    assert "applicants" not in body


@pytest.mark.asyncio
async def test_fan_out_with_unreachable_quoting_is_500(client, quoting_handler, service_headers):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    serve_all(quoting_handler)
    quoting_handler.routes[("GET", "/api/applicants")] = refuse

    response = await client.get("/api/quotes", headers=service_headers)

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["message"] == "Failed to fetch quotes from Quoting Service"


@pytest.mark.asyncio
async def test_quote_detail_is_relayed(client, quoting_handler, service_headers):
    detail = {"quote": QUOTES[0], "applicant": APPLICANTS[0], "coverages": []}
    quoting_handler.routes[("GET", "/api/quotes/1")] = httpx.Response(200, json=detail)

    response = await client.get("/api/quotes/1", headers=service_headers)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == detail


@pytest.mark.asyncio
async def test_missing_quote_is_404(client, quoting_handler, service_headers):
    response = await client.get("/api/quotes/99", headers=service_headers)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Quote not found"}


@pytest.mark.asyncio
async def test_quoting_role_cannot_use_customer_service(client, quoting_handler, bearer_factory):
    response = await client.get("/api/quotes", headers=bearer_factory(Role.QUOTING))

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert quoting_handler.requests == []
