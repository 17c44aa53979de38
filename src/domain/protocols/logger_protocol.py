"""LoggerProtocol definition for structured logging.

Handlers and adapters log through this port, never through a concrete
backend. Every call is a short message plus key-value context.

Security:
    - NEVER log passwords, password hashes or bearer tokens
    - Reset secrets are only logged by the development delivery adapter

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("user_registered", user_id=str(account.id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("login_attempt")  # trace_id included automatically
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the five standard levels and immutable context binding.
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
            message: Short event name or sentence (no f-strings; use context).
            error: Optional exception; adapters add error_type and error_message.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message (service cannot continue)."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context.

        The original logger is unchanged.

        Args:
            **context: Context to include in every subsequent call.

        Returns:
            New logger instance.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
