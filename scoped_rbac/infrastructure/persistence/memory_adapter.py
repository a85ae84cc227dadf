"""In-memory persistence adapter.

Reference implementation of RBACPersistenceProtocol. Every collection is an
insertion-ordered index owned by the adapter instance (dict keys used as an
ordered set), so upserts and edge creation are idempotent and several engines
can run side by side in one process.

Note: Does NOT inherit from RBACPersistenceProtocol (uses structural typing).
"""

from collections import defaultdict

from scoped_rbac.core.errors import GrantNotRegisteredError
from scoped_rbac.domain.value_objects import (
    RolePermissionEdge,
    ScopedPermissionEdge,
    Subject,
)


class MemoryPersistenceAdapter:
    """Dict-indexed authorization store.

    Attributes:
        roles, permissions, scopes, grants: Registered identifiers.
        role_permissions: role -> unscoped edges.
        scoped_role_permissions: role -> scoped edges.
        role_grants: role -> grants.
        subject_roles: subject (string form) -> roles.
    """

    def __init__(self) -> None:
        self.roles: dict[str, None] = {}
        self.permissions: dict[str, None] = {}
        self.scopes: dict[str, None] = {}
        self.grants: dict[str, None] = {}
        self.role_permissions: defaultdict[str, dict[RolePermissionEdge, None]] = (
            defaultdict(dict)
        )
        self.scoped_role_permissions: defaultdict[
            str, dict[ScopedPermissionEdge, None]
        ] = defaultdict(dict)
        self.role_grants: defaultdict[str, dict[str, None]] = defaultdict(dict)
        self.subject_roles: defaultdict[str, dict[str, None]] = defaultdict(dict)

    # Roles
    async def upsert_role(self, role: str) -> str:
        self.roles.setdefault(role, None)
        return role

    async def get_role(self, role: str) -> str | None:
        return role if role in self.roles else None

    # Permissions
    async def upsert_permission(self, permission: str) -> str:
        self.permissions.setdefault(permission, None)
        return permission

    async def get_permission(self, permission: str) -> str | None:
        return permission if permission in self.permissions else None

    # Scopes
    async def upsert_scope(self, scope: str) -> str:
        self.scopes.setdefault(scope, None)
        return scope

    async def get_scope(self, scope: str) -> str | None:
        return scope if scope in self.scopes else None

    # Grants
    async def upsert_grant(self, grant: str) -> str:
        self.grants.setdefault(grant, None)
        return grant

    async def get_grant(self, grant: str) -> str | None:
        return grant if grant in self.grants else None

    # Edges
    async def grant_role_permission(
        self, role: str, policy: RolePermissionEdge
    ) -> str:
        self.role_permissions[role].setdefault(policy, None)
        return policy.permission

    async def get_role_policies(self, role: str) -> list[RolePermissionEdge]:
        return list(self.role_permissions.get(role, ()))

    async def grant_scoped_permission(
        self, role: str, policy: ScopedPermissionEdge
    ) -> str:
        self.scoped_role_permissions[role].setdefault(policy, None)
        return policy.permission

    async def get_role_scoped_policies(self, role: str) -> list[ScopedPermissionEdge]:
        return list(self.scoped_role_permissions.get(role, ()))

    async def give_role_grant(self, role: str, grant: str) -> str:
        """Create the (role, grant) edge.

        Raises:
            GrantNotRegisteredError: If the grant was never upserted.
        """
        if grant not in self.grants:
            raise GrantNotRegisteredError.for_grant(grant, role)
        self.role_grants[role].setdefault(grant, None)
        return grant

    async def get_role_grants(self, role: str) -> list[str]:
        return list(self.role_grants.get(role, ()))

    async def grant_subject_role(self, subject: Subject, role: str) -> str:
        self.subject_roles[str(subject)].setdefault(role, None)
        return role

    async def get_actor_roles(self, subject: Subject) -> list[str]:
        return list(self.subject_roles.get(str(subject), ()))

    def edge_count(self) -> int:
        """Total number of persisted edges (all kinds)."""
        return sum(
            len(edges)
            for index in (
                self.role_permissions,
                self.scoped_role_permissions,
                self.role_grants,
                self.subject_roles,
            )
            for edges in index.values()
        )
