"""Persistence protocol (port) for the authorization model.

Durable store of roles, permissions, scopes, grants and the edges between
them. Infrastructure adapters (in-memory, SQLAlchemy) implement this protocol
without inheritance.

Contract:
    - Every ``upsert_*`` and edge-creating call is idempotent: calling it
      twice with the same arguments leaves state unchanged after the first.
    - ``give_role_grant`` raises GrantNotRegisteredError when the grant was
      never upserted.
    - Queries for unknown roles or subjects return empty lists.
    - Atomicity and locking are the adapter's responsibility.
"""

from typing import Protocol

from scoped_rbac.domain.value_objects import (
    RolePermissionEdge,
    ScopedPermissionEdge,
    Subject,
)


class RBACPersistenceProtocol(Protocol):
    """Protocol for authorization model storage."""

    # Roles
    async def upsert_role(self, role: str) -> str:
        """Register a role (idempotent). Returns the role id."""
        ...

    async def get_role(self, role: str) -> str | None:
        """Return the role id if registered, else None."""
        ...

    # Permissions
    async def upsert_permission(self, permission: str) -> str:
        """Register a permission (idempotent). Returns the permission id."""
        ...

    async def get_permission(self, permission: str) -> str | None:
        """Return the permission id if registered, else None."""
        ...

    # Scopes (entities are registered here too, as scope namespaces)
    async def upsert_scope(self, scope: str) -> str:
        """Register a scope (idempotent). Returns the scope id."""
        ...

    async def get_scope(self, scope: str) -> str | None:
        """Return the scope id if registered, else None."""
        ...

    # Grants
    async def upsert_grant(self, grant: str) -> str:
        """Register a grant (idempotent). Returns the grant id."""
        ...

    async def get_grant(self, grant: str) -> str | None:
        """Return the grant id if registered, else None."""
        ...

    # Role -> permission edges
    async def grant_role_permission(
        self, role: str, policy: RolePermissionEdge
    ) -> str:
        """Create the (role, permission, entity) edge (idempotent).

        Returns:
            The permission id.
        """
        ...

    async def get_role_policies(self, role: str) -> list[RolePermissionEdge]:
        """List the unscoped permission edges of a role."""
        ...

    # Role -> scoped permission edges
    async def grant_scoped_permission(
        self, role: str, policy: ScopedPermissionEdge
    ) -> str:
        """Create the (role, permission, entity, scope) edge (idempotent).

        Returns:
            The permission id.
        """
        ...

    async def get_role_scoped_policies(self, role: str) -> list[ScopedPermissionEdge]:
        """List the scoped permission edges of a role."""
        ...

    # Role -> grant edges
    async def give_role_grant(self, role: str, grant: str) -> str:
        """Create the (role, grant) edge (idempotent).

        Raises:
            GrantNotRegisteredError: If the grant was never upserted.
        """
        ...

    async def get_role_grants(self, role: str) -> list[str]:
        """List the grants held by a role."""
        ...

    # Subject -> role edges
    async def grant_subject_role(self, subject: Subject, role: str) -> str:
        """Create the (subject, role) edge (idempotent). Returns the role id.

        Subjects are identified by their string form: 1 and "1" are the same
        subject.
        """
        ...

    async def get_actor_roles(self, subject: Subject) -> list[str]:
        """List the roles held by a subject."""
        ...
