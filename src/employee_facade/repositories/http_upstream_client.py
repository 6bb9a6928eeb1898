"""httpx implementation of UpstreamClient.

Talks to the third-party employee API over HTTP. Every call is a single
attempt with a bounded timeout; failures are classified here and returned,
never raised.

Endpoints (relative to the configured base URL):
- GET employees
- GET employee/{id}
- POST create (form-encoded name, salary, age)
- DELETE delete/{id}
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from employee_facade.config import get_http_client, settings
from employee_facade.entities import Failure, FailureKind
from employee_facade.protocols import UpstreamResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class HttpUpstreamClient:
    """httpx-based implementation of the UpstreamClient protocol.

    This class satisfies the UpstreamClient protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = HttpUpstreamClient.create(base_url="http://localhost:9000/api/v1/")
        outcome = await client.list_employees()
        await client.close()
        ```
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the upstream client.

        Args:
            http_client: Preconfigured httpx client. If None, one is created
                lazily from base_url and timeout.
            base_url: Upstream base URL. Defaults to settings.upstream_base_url.
            timeout: Per-request timeout in seconds. Defaults to settings.
        """
        self._base_url = base_url or settings.upstream_base_url
        self._timeout = timeout or settings.upstream_timeout
        self._client = http_client

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> "HttpUpstreamClient":
        """Factory method to create HttpUpstreamClient with defaults.

        Args:
            base_url: Upstream base URL. If None, uses settings.
            timeout: Request timeout in seconds. If None, uses settings.

        Returns:
            Configured HttpUpstreamClient
        """
        return cls(base_url=base_url, timeout=timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = get_http_client(self._base_url, self._timeout)
        return self._client

    async def list_employees(self) -> UpstreamResponse | Failure:
        return await self._request("GET", "employees")

    async def get_employee(self, employee_id: str) -> UpstreamResponse | Failure:
        return await self._request("GET", f"employee/{quote(employee_id, safe='')}")

    async def create_employee(self, name: str, salary: str, age: str) -> UpstreamResponse | Failure:
        form = {"name": name, "salary": salary, "age": age}
        return await self._request("POST", "create", data=form)

    async def delete_employee(self, employee_id: str) -> UpstreamResponse | Failure:
        return await self._request("DELETE", f"delete/{quote(employee_id, safe='')}")

    async def _request(
        self,
        method: str,
        path: str,
        data: dict[str, Any] | None = None,
    ) -> UpstreamResponse | Failure:
        try:
            response = await self.client.request(method, path, data=data)
        except httpx.HTTPError as e:
            logger.error("Upstream %s %s failed: %s", method, path, e)
            return Failure(FailureKind.TRANSPORT, 500, INTERNAL_ERROR_MESSAGE)

        if response.is_error:
            logger.warning(
                "Upstream %s %s returned %s %s",
                method,
                path,
                response.status_code,
                response.reason_phrase,
            )
            return Failure(FailureKind.UPSTREAM_HTTP, response.status_code, response.reason_phrase)

        try:
            body = response.json() if response.content else None
        except ValueError as e:
            logger.error("Upstream %s %s returned an undecodable body: %s", method, path, e)
            return Failure(FailureKind.TRANSPORT, 500, INTERNAL_ERROR_MESSAGE)

        return UpstreamResponse(status_code=response.status_code, body=body)

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
