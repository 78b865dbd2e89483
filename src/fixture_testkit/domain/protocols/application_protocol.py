"""Capability contracts for the application under test.

The testkit never constructs the application. It receives a handle bundling
an HTTP router and a database adapter, and only calls the methods below.

Architecture:
    ApplicationHandleProtocol
        ├── issue_request()        -> HTTP boundary
        └── adapter: DatabaseAdapterProtocol
                ├── await_ready()
                ├── drop_database()
                ├── list_models()
                ├── ensure_indexes()
                └── create()       -> per-resource document creation

    ResourceModelProtocol: anything with ``async create(doc)``, used by
    ``insert_docs`` (a ``ResourceCollection`` or a hand-written fake).
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

import httpx


@runtime_checkable
class ResourceModelProtocol(Protocol):
    """A single resource collection that documents can be created in."""

    async def create(self, doc: Mapping[str, Any]) -> Any:
        """Persist one document and return the created record."""
        ...


class DatabaseAdapterProtocol(Protocol):
    """Direct data access used for setup and teardown."""

    async def await_ready(self) -> None:
        """Return once the connection is usable; raise if it is not."""
        ...

    async def drop_database(self) -> None:
        """Drop everything stored in the underlying database."""
        ...

    def list_models(self) -> Sequence[Any]:
        """Return every registered model."""
        ...

    async def ensure_indexes(self, model: Any) -> None:
        """(Re-)create storage and indexes for one model."""
        ...

    async def create(self, resource: str, doc: Mapping[str, Any]) -> Any:
        """Persist one document in the named resource."""
        ...


@runtime_checkable
class ApplicationHandleProtocol(Protocol):
    """The externally-owned application bundle under test.

    Attributes:
        router: ASGI application requests are dispatched to.
        adapter: Database adapter for direct data manipulation.
    """

    router: Any
    adapter: DatabaseAdapterProtocol

    async def issue_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        base_url: str | None = None,
    ) -> httpx.Response:
        """Send one HTTP request to the router and return the response.

        ``base_url`` overrides the address the handle was built with.
        """
        ...

    async def await_ready(self) -> None: ...

    async def drop_all(self) -> None: ...

    def list_models(self) -> Sequence[Any]: ...

    async def ensure_indexes(self, model: Any) -> None: ...

    async def create_document(self, resource: str, doc: Mapping[str, Any]) -> Any: ...
