"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for all error data. Domain functions return
it inside a Failure; it is NOT an exception. At the library boundary an
RBACError exception carries the DomainError to the caller.

Usage:
    from scoped_rbac.core.errors import DomainError
    from scoped_rbac.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from scoped_rbac.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
