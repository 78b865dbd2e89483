"""Centralized constants for the testkit.

These are fixed protocol details, NOT environment-specific configuration.
For overridable settings (port, host, fixture directory), use
`fixture_testkit.core.config` instead.
"""

# =============================================================================
# Server Addressing
# =============================================================================

DEFAULT_HOST: str = "localhost"
"""Host the application under test is addressed by."""

DEFAULT_PORT: int = 2426
"""Port the application under test is bound to."""

DEFAULT_FIXTURES_DIR: str = "fixtures"
"""Directory fixture files are read from when none is given."""


# =============================================================================
# Expected Status Codes
# =============================================================================

STATUS_OK: int = 200
"""Successful GET / PUT."""

STATUS_CREATED: int = 201
"""Successful POST."""

STATUS_NO_CONTENT: int = 204
"""Successful DELETE."""

STATUS_BAD_REQUEST: int = 400
"""Rejected PUT on an immutable endpoint."""

STATUS_METHOD_NOT_ALLOWED: int = 405
"""Rejected POST on an immutable endpoint."""

STATUS_SERVER_ERROR: int = 500
"""Rejected DELETE on an immutable endpoint."""


# =============================================================================
# Fixture Documents
# =============================================================================

FIXTURE_ID_KEY: str = "id"
STORAGE_ID_KEY: str = "_id"
LINKS_KEY: str = "links"

FIXTURE_MODULE_ATTRIBUTE: str = "FIXTURES"
"""Module-level name a Python fixture file may assign its documents to."""

FIXTURE_MODULE_FACTORY: str = "fixtures"
"""Zero-argument callable a Python fixture file may define instead."""


# =============================================================================
# Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum response body length carried in assertion errors."""
