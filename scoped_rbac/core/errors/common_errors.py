"""Common error data classes.

Error Types:
- ValidationError: Structural validation failures (config, policy strings)
- NotFoundError: Referenced identifier is not registered

Usage:
    from scoped_rbac.core.errors import ValidationError
    from scoped_rbac.core.enums import ErrorCode
    from scoped_rbac.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.POLICY_MALFORMED,
        message="Policy must have 2 or 3 segments",
        field="policy",
    ))
"""

from dataclasses import dataclass

from scoped_rbac.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Structural validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field or segment name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Referenced identifier is not registered.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Category of identifier (grant, role, ...).
        resource_id: The identifier that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str
