"""
Tests for the inter-service HTTP client.
"""

import json

import httpx
import pytest

from shared.clients import ServiceClient
from shared.errors import UpstreamError, UpstreamTimeout


def make_client(handler, **kwargs) -> ServiceClient:
    return ServiceClient(
        "http://quoting.test/",
        "internal-key",
        service_name="quoting",
        retry_wait=0,
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


@pytest.mark.asyncio
async def test_attaches_service_key_content_type_and_bearer():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["headers"] = request.headers
        return httpx.Response(200, json=[{"id": 1}])

    client = make_client(handler)
    result = await client.get("/api/quotes", service_token="tok")

    assert result == [{"id": 1}]
    assert seen["url"] == "http://quoting.test/api/quotes"
    assert seen["headers"]["x-service-key"] == "internal-key"
    assert seen["headers"]["content-type"] == "application/json"
    assert seen["headers"]["authorization"] == "Bearer tok"


@pytest.mark.asyncio
async def test_no_bearer_without_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["headers"] = request.headers
        return httpx.Response(200, json={})

    await make_client(handler).get("/api/groups")
    assert "authorization" not in seen["headers"]


@pytest.mark.asyncio
async def test_non_success_raises_upstream_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"message": "Quote not found"})

    with pytest.raises(UpstreamError) as excinfo:
        await make_client(handler).get("/api/quotes/9")

    assert excinfo.value.upstream_status == 404
    assert excinfo.value.status_text == "Not Found"
    assert "Quote not found" in excinfo.value.body


@pytest.mark.asyncio
async def test_sends_json_body_on_patch():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["body"] = request.content
        return httpx.Response(200, json={"id": 3, "status": "Archived"})

    result = await make_client(handler).patch("/api/quotes/3", json={"status": "Archived"})

    assert seen["method"] == "PATCH"
    assert json.loads(seen["body"]) == {"status": "Archived"}
    assert result["status"] == "Archived"


@pytest.mark.asyncio
async def test_retries_once_on_connect_error():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        if calls["count"] == 1:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, json={"ok": True})

    result = await make_client(handler).get("/api/coverages")

    assert result == {"ok": True}
    assert calls["count"] == 2


@pytest.mark.asyncio
async def test_gives_up_after_single_retry():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(httpx.ConnectError):
        await make_client(handler).get("/api/coverages")
    assert calls["count"] == 2


@pytest.mark.asyncio
async def test_persistent_timeout_is_upstream_timeout():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(UpstreamTimeout) as excinfo:
        await make_client(handler).get("/api/templates")
    assert excinfo.value.status_code == 504
    assert calls["count"] == 2


@pytest.mark.asyncio
async def test_http_errors_are_not_retried():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(503, text="unavailable")

    response = await make_client(handler).send("GET", "/api/templates")
    assert response.status_code == 503
    assert calls["count"] == 1


@pytest.mark.asyncio
async def test_post_sends_body_and_delete_sends_none():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path, request.content))
        return httpx.Response(201 if request.method == "POST" else 200, json={"id": 5})

    client = make_client(handler)
    created = await client.post("/api/quote-benefits", json={"quoteId": 1, "templateDbId": 12})
    removed = await client.delete("/api/quote-benefits/5")

    assert created == {"id": 5}
    assert removed == {"id": 5}
    assert seen[0][:2] == ("POST", "/api/quote-benefits")
    assert json.loads(seen[0][2]) == {"quoteId": 1, "templateDbId": 12}
    assert seen[1] == ("DELETE", "/api/quote-benefits/5", b"")


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["POST", "PATCH"])
async def test_writes_are_not_resent_after_read_timeout(method):
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(UpstreamTimeout):
        await make_client(handler).send(method, "/api/quotes/3", json={"status": "Archived"})
    assert calls["count"] == 1


@pytest.mark.asyncio
async def test_writes_retry_when_connection_failed():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        if calls["count"] == 1:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, json={"status": "Archived"})

    result = await make_client(handler).patch("/api/quotes/3", json={"status": "Archived"})

    assert result == {"status": "Archived"}
    assert calls["count"] == 2


@pytest.mark.asyncio
async def test_delete_retries_after_read_timeout():
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        if calls["count"] == 1:
            raise httpx.ReadTimeout("timed out", request=request)
        return httpx.Response(200, json={"message": "deleted"})

    assert await make_client(handler).delete("/api/quotes/3") == {"message": "deleted"}
    assert calls["count"] == 2
