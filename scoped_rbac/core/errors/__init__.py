"""Core errors package.

Usage:
    from scoped_rbac.core.errors import DomainError, ValidationError, PolicyError
"""

from scoped_rbac.core.errors.common_errors import NotFoundError, ValidationError
from scoped_rbac.core.errors.domain_error import DomainError
from scoped_rbac.core.errors.rbac_exception import (
    ConfigurationError,
    GrantNotRegisteredError,
    PolicyError,
    RBACError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "RBACError",
    "ConfigurationError",
    "GrantNotRegisteredError",
    "PolicyError",
]
