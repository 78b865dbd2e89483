"""Fixture file loading."""

from fixture_testkit.infrastructure.fixtures.loader import (
    FixtureLoader,
    FixtureLoaderRegistry,
    load_fixtures,
    load_json_fixture,
    load_python_fixture,
)

__all__ = [
    "FixtureLoader",
    "FixtureLoaderRegistry",
    "load_fixtures",
    "load_json_fixture",
    "load_python_fixture",
]
