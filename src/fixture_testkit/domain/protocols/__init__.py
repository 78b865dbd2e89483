"""Protocol definitions (structural interfaces).

Usage:
    from fixture_testkit.domain.protocols import ApplicationHandleProtocol
"""

from fixture_testkit.domain.protocols.application_protocol import (
    ApplicationHandleProtocol,
    DatabaseAdapterProtocol,
    ResourceModelProtocol,
)
from fixture_testkit.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "ApplicationHandleProtocol",
    "DatabaseAdapterProtocol",
    "LoggerProtocol",
    "ResourceModelProtocol",
]
