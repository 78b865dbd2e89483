"""Pytest fixtures for suites that use the testkit.

Enable in a ``conftest.py``:

    pytest_plugins = ("fixture_testkit.pytest_plugin",)

Then override ``testkit_settings`` to point at your port, fixture directory
and test database:

    @pytest.fixture(scope="session")
    def testkit_settings():
        return TestKitSettings(
            port=2426,
            fixtures_dir=Path(__file__).parent / "fixtures",
            database_url="sqlite+aiosqlite:///test.db",
        )
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio

from fixture_testkit.core.config import TestKitSettings, get_settings
from fixture_testkit.infrastructure.persistence import Database
from fixture_testkit.testkit import FixtureTestKit, create_testkit


@pytest.fixture(scope="session")
def testkit_settings() -> TestKitSettings:
    """Settings the ``testkit`` fixture is built from (environment by default)."""
    return get_settings()


@pytest.fixture(scope="session")
def testkit(testkit_settings: TestKitSettings) -> FixtureTestKit:
    """Testkit bound to ``testkit_settings``."""
    return create_testkit(settings=testkit_settings)


@pytest.fixture
def fixtures(testkit: FixtureTestKit) -> dict[str, Any]:
    """Fixture files from ``testkit_settings.fixtures_dir``, loaded fresh per test."""
    return testkit.load_fixtures()


@pytest_asyncio.fixture
async def testkit_database(
    testkit_settings: TestKitSettings,
) -> AsyncGenerator[Database, None]:
    """Database at ``testkit_settings.database_url``, disposed after the test.

    Skips the test when no database URL is configured.
    """
    if testkit_settings.database_url is None:
        pytest.skip("TESTKIT_DATABASE_URL is not set")

    database = Database(
        testkit_settings.database_url, echo=testkit_settings.db_echo
    )
    yield database
    await database.close()
