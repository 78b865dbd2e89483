"""FixtureTestKit: setup/teardown primitives and status-asserting requests.

Every operation takes the application handle as its first argument. The
handle may also be passed as an awaitable that resolves to it (an
``asyncio.Task`` or ``Future`` can be awaited any number of times), so a
test module can start building the app once and share the task.

Batch operations (``insert_docs``, ``seed_resource``) launch every creation
at once and join on all of them: the first failure propagates and nothing
already written is rolled back.

Usage:
    kit = create_testkit(port=2426, fixtures_dir="tests/fixtures")

    fixtures = kit.load_fixtures()
    await kit.reset_database(app)
    await kit.seed_resource(app, "widgets", fixtures["widgets"])

    await kit.http_post(app, "/widgets", {"name": "a"})   # asserts 201
    await kit.expect_immutable_post(app, "/locked", {})   # asserts 405
"""

import asyncio
import copy
import inspect
from collections.abc import AsyncIterator, Awaitable, Iterable, Mapping
from contextlib import asynccontextmanager
from os import PathLike
from pathlib import Path
from typing import Any, TypeAlias

import httpx

from fixture_testkit.core.config import TestKitSettings, get_settings
from fixture_testkit.core.constants import (
    STATUS_BAD_REQUEST,
    STATUS_CREATED,
    STATUS_METHOD_NOT_ALLOWED,
    STATUS_NO_CONTENT,
    STATUS_OK,
    STATUS_SERVER_ERROR,
)
from fixture_testkit.core.enums import HttpMethod
from fixture_testkit.core.errors import StatusCodeMismatchError
from fixture_testkit.domain.protocols import (
    ApplicationHandleProtocol,
    LoggerProtocol,
    ResourceModelProtocol,
)
from fixture_testkit.infrastructure.fixtures import FixtureLoaderRegistry
from fixture_testkit.infrastructure.fixtures import load_fixtures as _load_fixtures
from fixture_testkit.infrastructure.http import RouterClient
from fixture_testkit.infrastructure.logging import get_logger
from fixture_testkit.testkit.normalize import normalize_fixture_docs
from fixture_testkit.testkit.uri import build_uri

AppLike: TypeAlias = (
    ApplicationHandleProtocol | Awaitable[ApplicationHandleProtocol]
)


async def resolve_app(app: AppLike) -> ApplicationHandleProtocol:
    """Await the handle if it was passed as an awaitable."""
    if inspect.isawaitable(app):
        return await app
    return app


class FixtureTestKit:
    """Fixture loading, database seeding and HTTP status assertions.

    Build instances with ``create_testkit``.

    Attributes:
        settings: Host, port and fixture directory this kit is bound to.
    """

    normalize_fixture_docs = staticmethod(normalize_fixture_docs)

    def __init__(
        self,
        *,
        settings: TestKitSettings,
        logger: LoggerProtocol,
        registry: FixtureLoaderRegistry | None = None,
    ) -> None:
        self.settings = settings
        self._logger = logger
        self._registry = (
            registry if registry is not None else FixtureLoaderRegistry.default()
        )

    @property
    def port(self) -> int:
        return self.settings.port

    @property
    def fixtures_dir(self) -> Path:
        return self.settings.fixtures_dir

    @property
    def base_url(self) -> str:
        """``http://host:port`` every request of this kit is addressed to."""
        return self.build_uri("")

    # ------------------------------------------------------------------
    # Fixtures and data
    # ------------------------------------------------------------------

    def build_uri(self, path: str) -> str:
        """Absolute URI of ``path`` on the configured host and port."""
        return build_uri(path, port=self.settings.port, host=self.settings.host)

    def load_fixtures(
        self, directory: str | PathLike[str] | None = None
    ) -> dict[str, Any]:
        """Load fixture files, keyed by base file name.

        Blocks the calling thread while reading the filesystem.

        Args:
            directory: Directory to read (defaults to ``settings.fixtures_dir``).

        Returns:
            dict: ``{file stem: document or list of documents}``.
        """
        path = Path(directory) if directory is not None else self.fixtures_dir
        fixtures = _load_fixtures(path, self._registry)
        self._logger.debug(
            "fixtures_loaded", directory=str(path), names=sorted(fixtures)
        )
        return fixtures

    async def insert_docs(
        self,
        resource_model: ResourceModelProtocol,
        docs: Mapping[str, Any] | Iterable[Mapping[str, Any]],
    ) -> int:
        """Create every document concurrently and count the results.

        Args:
            resource_model: Anything with ``async create(doc)``.
            docs: Storage documents (a single document is accepted too).

        Returns:
            int: Number of documents created.

        Raises:
            Exception: The first error raised by any ``create`` call.
        """
        batch = [docs] if isinstance(docs, Mapping) else list(docs)
        created = await asyncio.gather(*(resource_model.create(doc) for doc in batch))
        self._logger.debug("docs_inserted", count=len(created))
        return len(created)

    async def reset_database(self, app: AppLike) -> ApplicationHandleProtocol:
        """Wipe the database and re-create every model's table and indexes.

        Waits for the connection, drops everything, then re-creates models
        one at a time in dependency order. Only use against an isolated test
        database.

        Returns:
            The resolved application handle, for chaining.
        """
        handle = await resolve_app(app)
        await handle.await_ready()
        await handle.drop_all()
        models = list(handle.list_models())
        for model in models:
            await handle.ensure_indexes(model)
        self._logger.info("database_reset", models=len(models))
        return handle

    async def seed_resource(
        self,
        app: AppLike,
        resource: str,
        collection: Mapping[str, Any] | Iterable[Mapping[str, Any]],
    ) -> list[Any]:
        """Create every item of a collection through the adapter.

        The collection is deep-copied first, so the caller's fixtures are
        left untouched.

        Returns:
            list: Created records, in input order.
        """
        handle = await resolve_app(app)
        items = copy.deepcopy(
            [collection] if isinstance(collection, Mapping) else list(collection)
        )
        created = await asyncio.gather(
            *(handle.create_document(resource, item) for item in items)
        )
        self._logger.debug("resource_seeded", resource=resource, count=len(created))
        return list(created)

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    @asynccontextmanager
    async def client(self, app: AppLike) -> AsyncIterator[RouterClient]:
        """Open a client on the handle's router for ad-hoc requests."""
        handle = await resolve_app(app)
        async with RouterClient(base_url=self.base_url, app=handle.router) as client:
            yield client

    async def _expect_status(
        self,
        app: AppLike,
        method: HttpMethod,
        endpoint: str,
        expected: int,
        body: Any = None,
    ) -> httpx.Response:
        handle = await resolve_app(app)
        response = await handle.issue_request(
            method, endpoint, body, base_url=self.base_url
        )

        if response.status_code != expected:
            self._logger.warning(
                "unexpected_status",
                method=method.value,
                endpoint=endpoint,
                expected=expected,
                actual=response.status_code,
            )
            raise StatusCodeMismatchError(
                method=method.value,
                endpoint=endpoint,
                expected=expected,
                actual=response.status_code,
                body=response.text,
            )

        self._logger.debug(
            "status_asserted", method=method.value, endpoint=endpoint, status=expected
        )
        return response

    async def http_get(self, app: AppLike, endpoint: str) -> httpx.Response:
        """GET ``endpoint`` and assert 200."""
        return await self._expect_status(app, HttpMethod.GET, endpoint, STATUS_OK)

    async def http_put(
        self, app: AppLike, endpoint: str, body: Any = None
    ) -> httpx.Response:
        """PUT ``body`` to ``endpoint`` and assert 200."""
        return await self._expect_status(app, HttpMethod.PUT, endpoint, STATUS_OK, body)

    async def http_post(
        self, app: AppLike, endpoint: str, body: Any = None
    ) -> httpx.Response:
        """POST ``body`` to ``endpoint`` and assert 201."""
        return await self._expect_status(
            app, HttpMethod.POST, endpoint, STATUS_CREATED, body
        )

    async def http_delete(self, app: AppLike, endpoint: str) -> httpx.Response:
        """DELETE ``endpoint`` and assert 204."""
        return await self._expect_status(
            app, HttpMethod.DELETE, endpoint, STATUS_NO_CONTENT
        )

    async def expect_immutable_put(
        self, app: AppLike, endpoint: str, body: Any = None
    ) -> httpx.Response:
        """PUT ``body`` to ``endpoint`` and assert the endpoint rejects it with 400."""
        return await self._expect_status(
            app, HttpMethod.PUT, endpoint, STATUS_BAD_REQUEST, body
        )

    async def expect_immutable_post(
        self, app: AppLike, endpoint: str, body: Any = None
    ) -> httpx.Response:
        """POST ``body`` to ``endpoint`` and assert 405."""
        return await self._expect_status(
            app, HttpMethod.POST, endpoint, STATUS_METHOD_NOT_ALLOWED, body
        )

    async def expect_immutable_delete(
        self, app: AppLike, endpoint: str
    ) -> httpx.Response:
        """DELETE ``endpoint`` and assert 500."""
        return await self._expect_status(
            app, HttpMethod.DELETE, endpoint, STATUS_SERVER_ERROR
        )


def create_testkit(
    port: int | None = None,
    fixtures_dir: str | PathLike[str] | None = None,
    *,
    host: str | None = None,
    settings: TestKitSettings | None = None,
    logger: LoggerProtocol | None = None,
    registry: FixtureLoaderRegistry | None = None,
) -> FixtureTestKit:
    """Build a testkit bound to a port and fixture directory.

    Explicit arguments override ``settings``, which default to
    ``get_settings()`` (environment variables prefixed ``TESTKIT_``).

    Args:
        port: Port the application under test is addressed on.
        fixtures_dir: Directory ``load_fixtures()`` reads by default.
        host: Host the application under test is addressed by.
        settings: Base settings.
        logger: Structured logger (defaults to ``get_logger()``).
        registry: Fixture loaders by file suffix.

    Returns:
        FixtureTestKit: Configured testkit.
    """
    overrides: dict[str, Any] = {}
    if port is not None:
        overrides["port"] = port
    if host is not None:
        overrides["host"] = host
    if fixtures_dir is not None:
        overrides["fixtures_dir"] = Path(fixtures_dir)

    base = settings if settings is not None else get_settings()
    return FixtureTestKit(
        settings=base.model_copy(update=overrides) if overrides else base,
        logger=logger if logger is not None else get_logger(),
        registry=registry,
    )
