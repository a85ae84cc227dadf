"""Exceptions raised at the library boundary.

The decision API returns plain booleans for denials. Only structural misuse
(bad configuration, unregistered grants, malformed policy strings) is raised,
wrapping the DomainError that describes it.

Hierarchy:
    RBACError (Exception)
    ├── ConfigurationError
    │   └── GrantNotRegisteredError
    └── PolicyError
"""

from scoped_rbac.core.enums import ErrorCode
from scoped_rbac.core.errors.common_errors import NotFoundError
from scoped_rbac.core.errors.domain_error import DomainError


class RBACError(Exception):
    """Base exception for structural misuse of the engine.

    Attributes:
        error: DomainError describing the failure.
    """

    def __init__(self, error: DomainError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def code(self) -> ErrorCode:
        """Error code of the wrapped DomainError."""
        return self.error.code


class ConfigurationError(RBACError):
    """Invalid authorization model configuration."""


class GrantNotRegisteredError(ConfigurationError):
    """A role grant referenced a grant that was never registered."""

    @classmethod
    def for_grant(cls, grant: str, role: str) -> "GrantNotRegisteredError":
        """Build the error for a missing grant.

        Args:
            grant: Grant identifier that is not registered.
            role: Role the grant was being given to.

        Returns:
            GrantNotRegisteredError wrapping a NotFoundError.
        """
        return cls(
            NotFoundError(
                code=ErrorCode.GRANT_NOT_REGISTERED,
                message=f"Grant {grant} does not exist",
                resource_type="grant",
                resource_id=grant,
                details={"role": role},
            )
        )


class PolicyError(RBACError):
    """Malformed policy string or misuse of scoped arguments."""
