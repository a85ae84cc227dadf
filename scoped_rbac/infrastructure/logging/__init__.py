"""Logging adapters."""

from scoped_rbac.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
