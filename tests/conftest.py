"""Pytest configuration for the testkit's own suite.

Provides:
1. The testkit plugin fixtures bound to this suite's fixture directory
2. A temporary SQLite database per test (aiosqlite)
3. The widget application handle, reset before each test
"""

from pathlib import Path

import pytest
import pytest_asyncio

from fixture_testkit.core.config import TestKitSettings
from fixture_testkit.core.enums import Environment
from fixture_testkit.infrastructure.persistence import Database, SQLAlchemyAdapter
from fixture_testkit.testkit import ApplicationHandle
from tests.utils.widget_app import Base, create_widget_app

pytest_plugins = ("fixture_testkit.pytest_plugin",)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with fake dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with a real database"
    )
    config.addinivalue_line("markers", "api: End-to-end tests through the router")


@pytest.fixture(scope="session")
def testkit_settings() -> TestKitSettings:
    return TestKitSettings(
        environment=Environment.TESTING,
        port=2426,
        fixtures_dir=FIXTURES_DIR,
    )


@pytest_asyncio.fixture
async def database(tmp_path):
    """Fresh SQLite database file for one test."""
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'testkit.db'}")
    yield db
    await db.close()


@pytest.fixture
def adapter(database) -> SQLAlchemyAdapter:
    return SQLAlchemyAdapter(database, Base)


@pytest_asyncio.fixture
async def widget_app(adapter, testkit) -> ApplicationHandle:
    """Widget application with an empty, freshly created schema."""
    handle = ApplicationHandle(
        router=create_widget_app(adapter),
        adapter=adapter,
    )
    await testkit.reset_database(handle)
    return handle


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    Usage:
        def test_something(mock_logger):
            kit = create_testkit(logger=mock_logger)
            ...
            mock_logger.warning.assert_called_once()
    """
    from unittest.mock import Mock

    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    return logger
