"""Runtime environment types.

Selects the log renderer:
- DEVELOPMENT: human-readable console output
- TESTING / CI: JSON output for machine parsing
"""

from enum import Enum


class Environment(str, Enum):
    """Testkit runtime environments."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
