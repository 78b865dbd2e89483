"""Absolute URIs for the application under test."""

from collections.abc import Callable

from fixture_testkit.core.constants import DEFAULT_HOST, DEFAULT_PORT


def build_uri(path: str, port: int = DEFAULT_PORT, host: str = DEFAULT_HOST) -> str:
    """Join the local base URL and a path.

    Example:
        >>> build_uri("/x")
        'http://localhost:2426/x'
    """
    return f"http://{host}:{port}{path}"


def uri_builder(
    port: int = DEFAULT_PORT, host: str = DEFAULT_HOST
) -> Callable[[str], str]:
    """Return ``build_uri`` bound to one host and port."""

    def uri(path: str) -> str:
        return build_uri(path, port=port, host=host)

    return uri
