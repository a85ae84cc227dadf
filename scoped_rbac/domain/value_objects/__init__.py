"""Domain value objects package."""

from scoped_rbac.domain.value_objects.edges import (
    RolePermissionEdge,
    ScopedPermissionEdge,
)
from scoped_rbac.domain.value_objects.policy import (
    Policy,
    ScopedArgs,
    Subject,
    parse_policy,
    parse_role_permission,
    parse_scoped_role_permission,
)

__all__ = [
    "Policy",
    "RolePermissionEdge",
    "ScopedArgs",
    "ScopedPermissionEdge",
    "Subject",
    "parse_policy",
    "parse_role_permission",
    "parse_scoped_role_permission",
]
