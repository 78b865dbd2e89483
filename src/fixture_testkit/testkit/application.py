"""Concrete application handle.

Bundles the ASGI router and database adapter of the application under test
and exposes the capability contract the testkit calls
(``ApplicationHandleProtocol``).

Usage:
    database = Database("sqlite+aiosqlite:///test.db")
    app = ApplicationHandle(
        router=fastapi_app,
        adapter=SQLAlchemyAdapter(database, Base),
    )
    response = await app.issue_request("GET", "/widgets")
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import httpx

from fixture_testkit.core.enums import HttpMethod
from fixture_testkit.domain.protocols import DatabaseAdapterProtocol
from fixture_testkit.infrastructure.http import RouterClient
from fixture_testkit.testkit.uri import build_uri


@dataclass(slots=True, kw_only=True)
class ApplicationHandle:
    """Router plus database adapter of one application under test.

    Attributes:
        router: ASGI application (FastAPI, Starlette, ...).
        adapter: Database adapter (normally ``SQLAlchemyAdapter``).
        base_url: Base URL requests are addressed to.
    """

    router: Any
    adapter: DatabaseAdapterProtocol
    base_url: str = field(default_factory=lambda: build_uri(""))

    def client(self, base_url: str | None = None) -> RouterClient:
        """New client for the router (over the network when ``router`` is None)."""
        return RouterClient(base_url=base_url or self.base_url, app=self.router)

    async def issue_request(
        self,
        method: HttpMethod | str,
        path: str,
        body: Any = None,
        *,
        base_url: str | None = None,
    ) -> httpx.Response:
        return await self.client(base_url).request(method, path, body)

    async def await_ready(self) -> None:
        await self.adapter.await_ready()

    async def drop_all(self) -> None:
        await self.adapter.drop_database()

    def list_models(self) -> Sequence[Any]:
        return self.adapter.list_models()

    async def ensure_indexes(self, model: Any) -> None:
        await self.adapter.ensure_indexes(model)

    async def create_document(self, resource: str, doc: Mapping[str, Any]) -> Any:
        return await self.adapter.create(resource, doc)
