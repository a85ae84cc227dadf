"""Authorization database models.

Importing this package registers every table on BaseModel.metadata.
"""

from scoped_rbac.infrastructure.persistence.models.catalog import (
    GrantModel,
    PermissionModel,
    RoleModel,
    ScopeModel,
)
from scoped_rbac.infrastructure.persistence.models.edges import (
    RoleGrantModel,
    RolePermissionModel,
    ScopedRolePermissionModel,
    SubjectRoleModel,
)

__all__ = [
    "GrantModel",
    "PermissionModel",
    "RoleGrantModel",
    "RoleModel",
    "RolePermissionModel",
    "ScopeModel",
    "ScopedRolePermissionModel",
    "SubjectRoleModel",
]
