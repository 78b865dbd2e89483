"""Testkit public API."""

from fixture_testkit.testkit.application import ApplicationHandle
from fixture_testkit.testkit.kit import FixtureTestKit, create_testkit, resolve_app
from fixture_testkit.testkit.normalize import normalize_fixture_docs
from fixture_testkit.testkit.uri import build_uri, uri_builder

__all__ = [
    "ApplicationHandle",
    "FixtureTestKit",
    "build_uri",
    "create_testkit",
    "normalize_fixture_docs",
    "resolve_app",
    "uri_builder",
]
