"""Domain entities package."""

from scoped_rbac.domain.entities.rbac_config import (
    EntityScopeKey,
    RBACConfig,
    RolePolicy,
)

__all__ = ["EntityScopeKey", "RBACConfig", "RolePolicy"]
