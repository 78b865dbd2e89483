"""HTTP boundary."""

from fixture_testkit.infrastructure.http.router_client import RouterClient

__all__ = ["RouterClient"]
