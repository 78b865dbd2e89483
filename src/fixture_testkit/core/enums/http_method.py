"""HTTP verbs the testkit issues against the router."""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP methods used by the status-asserting helpers."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"

    @property
    def sends_body(self) -> bool:
        """Whether requests with this method carry a JSON body."""
        return self in (HttpMethod.PUT, HttpMethod.POST)
