"""Embeddable role-based access control with data-relative scopes.

Usage:
    from scoped_rbac import ScopedArgs, create_rbac

    rbac = await create_rbac(config)
    await rbac.can("user", "read:post")
    await rbac.can(
        "user",
        "edit:post:org",
        ScopedArgs(subject=[1, 2], data={"orgId": 2}),
    )
"""

from scoped_rbac.application.services import DecisionEngine, RBACSynchronizer
from scoped_rbac.core.container import create_rbac
from scoped_rbac.core.errors import (
    ConfigurationError,
    GrantNotRegisteredError,
    PolicyError,
    RBACError,
)
from scoped_rbac.domain.entities import EntityScopeKey, RBACConfig, RolePolicy
from scoped_rbac.domain.protocols import (
    AuthorizationProtocol,
    RBACCacheProtocol,
    RBACPersistenceProtocol,
)
from scoped_rbac.domain.value_objects import ScopedArgs

__all__ = [
    "AuthorizationProtocol",
    "ConfigurationError",
    "DecisionEngine",
    "EntityScopeKey",
    "GrantNotRegisteredError",
    "PolicyError",
    "RBACCacheProtocol",
    "RBACConfig",
    "RBACError",
    "RBACPersistenceProtocol",
    "RBACSynchronizer",
    "RolePolicy",
    "ScopedArgs",
    "create_rbac",
]
