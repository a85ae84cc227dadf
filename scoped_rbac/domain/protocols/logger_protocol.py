"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the engine while remaining
backend-agnostic. Every call is a message plus key-value context.

Log Levels:
    - DEBUG: Cache hits, per-check diagnostics
    - INFO: Synchronization runs, grants and role changes
    - WARNING: Fail-closed resolution gaps (unresolvable scopes)
    - ERROR: Operation failed, engine continues
    - CRITICAL: System-wide failure

Usage:
    logger: LoggerProtocol = get_logger()
    logger.info("permission_granted", role="user", policy="read:post")

    engine_logger = logger.bind(component="decision_engine")
    engine_logger.debug("authorization_cache_hit", key=key)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name or short message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: Event name or short message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Event name or short message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or short message.
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message.

        Args:
            message: Event name or short message.
            error: Optional exception instance.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
