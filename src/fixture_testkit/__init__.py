"""Fixture and HTTP-assertion helpers for database-backed resource APIs.

Usage:
    from fixture_testkit import create_testkit, ApplicationHandle

    kit = create_testkit(port=2426, fixtures_dir="tests/fixtures")
    fixtures = kit.load_fixtures()
    await kit.reset_database(app)
    await kit.seed_resource(app, "widgets", fixtures["widgets"])
    await kit.http_get(app, "/widgets")
"""

from fixture_testkit.infrastructure.fixtures import load_fixtures
from fixture_testkit.testkit import (
    ApplicationHandle,
    FixtureTestKit,
    build_uri,
    create_testkit,
    normalize_fixture_docs,
    uri_builder,
)

__all__ = [
    "ApplicationHandle",
    "FixtureTestKit",
    "build_uri",
    "create_testkit",
    "load_fixtures",
    "normalize_fixture_docs",
    "uri_builder",
]
