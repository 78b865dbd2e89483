"""HTTP client bound to the application's router.

Requests are sent with httpx. When an ASGI app is given, they are dispatched
in-process through ``httpx.ASGITransport``; otherwise they go over the
network to ``base_url`` (a server already listening on the configured port).

Architecture:
    - Infrastructure layer (adapter for the HTTP boundary)
    - No retries, no error translation: httpx exceptions propagate
"""

from types import TracebackType
from typing import Any

import httpx
import structlog

from fixture_testkit.core.enums import HttpMethod


class RouterClient:
    """Async HTTP client for one application under test.

    Usable as an async context manager (one connection pool for many
    requests) or directly, in which case each request opens and closes its
    own client.

    Attributes:
        base_url: ``http://host:port`` all paths are resolved against.

    Example:
        >>> async with RouterClient(base_url="http://localhost:2426", app=app) as client:
        ...     response = await client.get("/widgets")
    """

    def __init__(
        self,
        *,
        base_url: str,
        app: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL of the application (no trailing slash needed).
            app: ASGI application to dispatch to in-process, or None for network.
            headers: Headers sent with every request.
        """
        self.base_url = base_url.rstrip("/")
        self._app = app
        self._headers = headers or {}
        self._client: httpx.AsyncClient | None = None
        self._logger = structlog.get_logger("router_client")

    def _build_client(self) -> httpx.AsyncClient:
        transport = httpx.ASGITransport(app=self._app) if self._app is not None else None
        return httpx.AsyncClient(
            transport=transport,
            base_url=self.base_url,
            headers=self._headers,
        )

    async def __aenter__(self) -> "RouterClient":
        self._client = self._build_client()
        await self._client.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        client, self._client = self._client, None
        if client is not None:
            await client.__aexit__(exc_type, exc, tb)

    async def request(
        self,
        method: HttpMethod | str,
        path: str,
        body: Any = None,
    ) -> httpx.Response:
        """Send one request and return the response, whatever its status.

        Args:
            method: HTTP verb.
            path: Path relative to ``base_url`` (e.g. ``/widgets/1``).
            body: JSON-serializable payload, sent only for PUT and POST.

        Returns:
            httpx.Response: The raw response.
        """
        if not isinstance(method, HttpMethod):
            method = HttpMethod(method.upper())
        json_body = body if method.sends_body else None

        if self._client is not None:
            response = await self._client.request(method.value, path, json=json_body)
        else:
            async with self._build_client() as client:
                response = await client.request(method.value, path, json=json_body)

        self._logger.debug(
            "router_request",
            method=method.value,
            path=path,
            status_code=response.status_code,
        )
        return response

    async def get(self, path: str) -> httpx.Response:
        return await self.request(HttpMethod.GET, path)

    async def put(self, path: str, body: Any = None) -> httpx.Response:
        return await self.request(HttpMethod.PUT, path, body)

    async def post(self, path: str, body: Any = None) -> httpx.Response:
        return await self.request(HttpMethod.POST, path, body)

    async def delete(self, path: str) -> httpx.Response:
        return await self.request(HttpMethod.DELETE, path)
