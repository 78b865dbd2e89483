"""Structured logging for the testkit.

Adapter selection is centralized in ``get_logger`` (composition root):
- development: ConsoleAdapter (human-readable)
- testing/ci: ConsoleAdapter (JSON)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fixture_testkit.core.config import get_settings
from fixture_testkit.infrastructure.logging.console_adapter import ConsoleAdapter

if TYPE_CHECKING:
    from fixture_testkit.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the process-wide logger singleton.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


__all__ = ["ConsoleAdapter", "get_logger"]
