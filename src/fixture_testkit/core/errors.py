"""Testkit error types.

The testkit does not translate errors raised by httpx, SQLAlchemy or the
filesystem; those propagate to the calling test unchanged. The types below
cover the few failures the testkit itself detects.

Error Hierarchy:
    StatusCodeMismatchError (AssertionError)
    UnsupportedFixtureFormatError (ValueError)
    FixtureModuleError (ValueError)
    UnknownResourceError (LookupError)
"""

from pathlib import Path

from fixture_testkit.core.constants import RESPONSE_BODY_MAX_LENGTH


class StatusCodeMismatchError(AssertionError):
    """Response status code differs from the expected one.

    Subclasses AssertionError so pytest reports it as a test failure rather
    than an error.

    Attributes:
        method: HTTP method that was issued.
        endpoint: Path the request was sent to.
        expected: Status code the caller asserted.
        actual: Status code the router returned.
        body: Response text, truncated.
    """

    def __init__(
        self,
        *,
        method: str,
        endpoint: str,
        expected: int,
        actual: int,
        body: str = "",
    ) -> None:
        self.method = method
        self.endpoint = endpoint
        self.expected = expected
        self.actual = actual
        self.body = body[:RESPONSE_BODY_MAX_LENGTH]
        super().__init__(
            f"expected {method} {endpoint} to have status {expected} "
            f"but got {actual}"
        )


class UnsupportedFixtureFormatError(ValueError):
    """No loader is registered for a fixture file's suffix."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"No fixture loader registered for {path.suffix or '<no suffix>'!r} "
            f"({path})"
        )


class FixtureModuleError(ValueError):
    """Python fixture module exposes neither FIXTURES nor fixtures()."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Fixture module {path} must define FIXTURES or a fixtures() callable"
        )


class UnknownResourceError(LookupError):
    """Resource name does not match any registered model."""

    def __init__(self, resource: str, known: list[str]) -> None:
        self.resource = resource
        self.known = known
        super().__init__(
            f"Unknown resource {resource!r} (registered: {', '.join(known) or 'none'})"
        )
