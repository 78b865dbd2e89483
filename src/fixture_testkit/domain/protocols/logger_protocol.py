"""LoggerProtocol definition for structured logging.

Keeps the testkit backend-agnostic: any object with these call signatures
(structural subtyping) can be passed to ``create_testkit(logger=...)``.

Usage:
    from fixture_testkit.infrastructure.logging import get_logger

    logger: LoggerProtocol = get_logger()
    logger.info("fixtures_loaded", directory=str(path), count=3)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message.
            error: Optional exception whose type and text are recorded.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger with context attached to every subsequent call."""
        ...
