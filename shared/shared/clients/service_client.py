"""
HTTP client for calls between sibling services.

Every request carries the shared internal service key, a JSON content type and,
when one is supplied, the caller's service token. Transport failures get one
retry; a timeout that survives the retry is raised as UpstreamTimeout. POST and
PATCH are only retried when the request never reached the server.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from ..errors import UpstreamError, UpstreamTimeout
from ..security.service_key import SERVICE_KEY_HEADER

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "PUT", "DELETE"})

TRANSIENT_ERRORS = (httpx.ConnectError, httpx.TimeoutException)

# A read or write timeout may come after the server applied the request
UNSENT_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout)


def retryable_errors(method: str) -> tuple:
    return TRANSIENT_ERRORS if method.upper() in IDEMPOTENT_METHODS else UNSENT_ERRORS


class ServiceClient:
    """Client for communicating with a sibling service."""

    def __init__(
        self,
        base_url: str,
        service_key: Optional[str],
        *,
        service_name: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        max_attempts: int = 2,
        retry_wait: float = 0.2,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the sibling service (e.g. http://localhost:3001)
            service_key: Shared internal service key
            service_name: Name used in log lines
            timeout: Per-attempt timeout in seconds
            max_attempts: Total attempts for transient transport failures
            retry_wait: Pause between attempts in seconds
            transport: Optional httpx transport, used by tests
        """
        self.base_url = base_url.rstrip("/")
        self.service_name = service_name
        self._service_key = service_key or ""
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._retry_wait = retry_wait
        self._transport = transport

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(
        self, service_token: Optional[str], extra: Optional[Dict[str, str]]
    ) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            SERVICE_KEY_HEADER: self._service_key,
        }
        if service_token:
            headers["Authorization"] = f"Bearer {service_token}"
        if extra:
            headers.update(extra)
        return headers

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
        service_token: Optional[str] = None,
    ) -> httpx.Response:
        """
        Send a request and return the raw response, whatever its status.

        Raises:
            UpstreamTimeout: Every attempt timed out
            httpx.RequestError: Any other transport failure
        """
        url = self.build_url(path)
        request_headers = self._headers(service_token, headers)

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._max_attempts),
                wait=wait_fixed(self._retry_wait),
                retry=retry_if_exception_type(retryable_errors(method)),
                reraise=True,
            ):
                with attempt:
                    if attempt.retry_state.attempt_number > 1:
                        logger.warning(
                            f"Retrying {method} {url} on {self.service_name} "
                            f"(attempt {attempt.retry_state.attempt_number})"
                        )
                    async with httpx.AsyncClient(
                        timeout=self._timeout, transport=self._transport
                    ) as client:
                        response = await client.request(
                            method,
                            url,
                            params=params,
                            json=json,
                            headers=request_headers,
                        )
        except httpx.TimeoutException as e:
            logger.error(f"{method} {url} on {self.service_name} timed out: {e}")
            raise UpstreamTimeout(f"{self.service_name} did not respond in time")

        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    async def request_json(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self.send(method, path, **kwargs)
        if not response.is_success:
            logger.error(
                f"{self.service_name} returned {response.status_code} for {method} {path}"
            )
            raise UpstreamError(response.status_code, response.reason_phrase, response.text)
        if not response.content:
            return None
        return response.json()

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request_json("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        return await self.request_json("POST", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> Any:
        return await self.request_json("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request_json("DELETE", path, **kwargs)
