"""Core enums package.

Usage:
    from fixture_testkit.core.enums import Environment, HttpMethod
"""

from fixture_testkit.core.enums.environment import Environment
from fixture_testkit.core.enums.http_method import HttpMethod

__all__ = ["Environment", "HttpMethod"]
