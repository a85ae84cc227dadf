"""Permission edge value objects exchanged with the persistence contract."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class RolePermissionEdge:
    """Unscoped grant of an action on an entity type.

    Attributes:
        permission: Action verb (e.g. "read").
        entity: Object type the action applies to (e.g. "post").
    """

    permission: str
    entity: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ScopedPermissionEdge:
    """Grant of an action on an entity type, restricted to a scope.

    Attributes:
        permission: Action verb (e.g. "edit").
        entity: Object type the action applies to (e.g. "post").
        scope: Data-relative qualifier (e.g. "org").
    """

    permission: str
    entity: str
    scope: str

    @property
    def unscoped(self) -> RolePermissionEdge:
        """The same edge without its scope."""
        return RolePermissionEdge(permission=self.permission, entity=self.entity)
