"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured (key-value) logging. Domain and
application code depend on this protocol only; the container provides the
structlog-backed adapter.

Log Levels:
    - DEBUG: Diagnostic detail (payload sizes, routing keys)
    - INFO: Lifecycle milestones (event_created, event_published)
    - WARNING: Rejected commands (validation, invalid state)
    - ERROR: Persistence or delivery failed
    - CRITICAL: Process-wide failure (broker configuration unusable)

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("event_created", event_id=str(event.id))

    handler_logger = logger.bind(handler="PublishEventHandler")
    handler_logger.warning("event_publish_rejected", state="Cancelled")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message. Same arguments as error()."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Args:
            **context: Context included in all subsequent log calls.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
