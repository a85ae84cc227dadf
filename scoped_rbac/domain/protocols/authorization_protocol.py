"""Authorization protocol (port) for the decision API.

Following hexagonal architecture:
- Domain defines the PORT (this protocol)
- The application layer provides the implementation (DecisionEngine)
- Embedders type against the protocol, not the engine

Usage:
    authz: AuthorizationProtocol = await create_rbac(config)

    allowed = await authz.can("user", "read:post")
    allowed = await authz.can(
        "user",
        "edit:post:org",
        ScopedArgs(subject=[1, 2], data={"orgId": 2}),
    )
    await authz.grant_role(subject=42, role="user")
"""

from collections.abc import Mapping
from typing import Any, Protocol

from scoped_rbac.domain.value_objects import ScopedArgs, Subject


class AuthorizationProtocol(Protocol):
    """Protocol for RBAC decisions and assignments.

    Error Handling:
        Denials are returned as False, never raised.
        Structural misuse (malformed policies, unknown segments, unregistered
        grants) raises RBACError subclasses.
        Backend failures propagate unchanged.
    """

    async def can(
        self,
        role: str,
        policy: str,
        scoped: ScopedArgs | Mapping[str, Any] | None = None,
    ) -> bool:
        """Check whether a role may perform a policy.

        Args:
            role: Role identifier.
            policy: ``"permission:entity"`` or ``"permission:entity:scope"``.
            scoped: Subject and entity data; required iff the scope form is
                used.

        Returns:
            bool: True if allowed, False if denied.
        """
        ...

    async def has_grant(self, role: str, grant: str) -> bool:
        """Check whether a role holds a standalone grant."""
        ...

    async def grant(self, role: str, entity: str, permission: str) -> None:
        """Give a role an unscoped permission on an entity."""
        ...

    async def give_grant(self, role: str, grant: str) -> None:
        """Give a role a standalone grant."""
        ...

    async def grant_role(self, subject: Subject, role: str) -> None:
        """Assign a role to a subject."""
        ...

    async def revoke_role(self, subject: Subject, role: str) -> None:
        """Revoke a role from a subject (the persisted edge is retained)."""
        ...

    async def get_subject_roles(self, subject: Subject) -> list[str]:
        """List the active roles of a subject."""
        ...

    async def subject_has_role(self, subject: Subject, role: str) -> bool:
        """Check whether a subject actively holds a role."""
        ...

    async def subject_can(
        self,
        subject: Subject,
        policy: str,
        scoped: ScopedArgs | Mapping[str, Any] | None = None,
    ) -> bool:
        """Check whether any active role of a subject may perform a policy."""
        ...
