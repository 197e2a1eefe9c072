"""LoggerProtocol definition for structured logging.

The core functions never log. Host-facing code (the type binding handler)
logs through this protocol so the backend stays swappable.

Log Levels:
    - DEBUG: Accepted values, wire round trips
    - INFO: Handler lifecycle
    - WARNING: Rejected input or wire payloads
    - ERROR: Unexpected failures in host glue

Security:
    - Rejected input is logged by length and violation, not verbatim

Usage:
    from emailaddr.core.container import get_logger

    logger = get_logger().bind(component="email_type")
    logger.warning("Input rejected", error_code="invalid_format", input_length=12)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
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
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged (immutable pattern).

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
