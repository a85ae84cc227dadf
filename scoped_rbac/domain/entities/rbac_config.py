"""Authorization model configuration (immutable).

The embedder declares the whole authorization domain once, at construction:
roles, entities, permissions, scopes, grants, the superadmin role, which
permissions each role holds, and how scope membership is resolved from entity
data. The configuration never changes for the lifetime of an engine.

Usage:
    config = RBACConfig.from_mapping({
        "roles": ["admin", "user"],
        "superAdminRole": "admin",
        "entities": ["post"],
        "permissions": ["read", "edit"],
        "scopes": ["org"],
        "grants": ["register"],
        "rolePermissionMap": {
            "user": {
                "permissions": ["post:read"],
                "scopedPermissions": ["post:edit:org"],
            },
        },
        "entityScopeMap": {"post": [{"scope": "org", "key": "orgId"}]},
    })
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class RolePolicy:
    """Permissions declared for one non-superadmin role.

    Attributes:
        permissions: ``"entity:permission"`` entries.
        scoped_permissions: ``"entity:permission:scope"`` entries.
        grants: Grant identifiers.
    """

    permissions: tuple[str, ...] = ()
    scoped_permissions: tuple[str, ...] = ()
    grants: tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "RolePolicy":
        """Build from ``{permissions, scopedPermissions?, grants?}``."""
        return cls(
            permissions=tuple(raw.get("permissions") or ()),
            scoped_permissions=tuple(
                raw.get("scopedPermissions") or raw.get("scoped_permissions") or ()
            ),
            grants=tuple(raw.get("grants") or ()),
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityScopeKey:
    """Where to find the scope-matching value in an entity record.

    Example:
        EntityScopeKey(scope="org", data_key="orgId") means that for the
        "org" scope the subject is compared against ``data["orgId"]``.

    Attributes:
        scope: Scope identifier.
        data_key: Key of the caller-supplied data record.
    """

    scope: str
    data_key: str

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "EntityScopeKey":
        """Build from ``{scope, key}`` (``dataKey``/``data_key`` also accepted)."""
        data_key = raw.get("key") or raw.get("dataKey") or raw.get("data_key")
        return cls(scope=raw["scope"], data_key=data_key)


@dataclass(frozen=True, slots=True, kw_only=True)
class RBACConfig:
    """Declarative authorization domain.

    Attributes:
        roles: Declared roles, in order.
        super_admin_role: Role that bypasses every permission check.
        entities: Entity types, in order.
        permissions: Action verbs, in order.
        scopes: Scope qualifiers, in order.
        grants: Standalone capabilities, in order.
        role_permission_map: Non-superadmin role -> RolePolicy.
        entity_scope_map: Entity -> EntityScopeKey entries.
    """

    roles: tuple[str, ...]
    super_admin_role: str
    entities: tuple[str, ...]
    permissions: tuple[str, ...]
    scopes: tuple[str, ...] = ()
    grants: tuple[str, ...] = ()
    role_permission_map: Mapping[str, RolePolicy] = field(default_factory=dict)
    entity_scope_map: Mapping[str, tuple[EntityScopeKey, ...]] = field(
        default_factory=dict
    )

    def __post_init__(self) -> None:
        # Freeze sequences and mappings handed in by the caller
        for name in ("roles", "entities", "permissions", "scopes", "grants"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(
            self,
            "role_permission_map",
            MappingProxyType(
                {
                    role: _role_policy(policy)
                    for role, policy in self.role_permission_map.items()
                }
            ),
        )
        object.__setattr__(
            self,
            "entity_scope_map",
            MappingProxyType(
                {
                    entity: _scope_keys(keys)
                    for entity, keys in self.entity_scope_map.items()
                }
            ),
        )

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "RBACConfig":
        """Build from the camelCase configuration schema.

        Args:
            raw: ``{roles, superAdminRole, entities, permissions, scopes,
                grants, rolePermissionMap, entityScopeMap?}``. snake_case keys
                are accepted too.

        Returns:
            RBACConfig: Unvalidated configuration. Run validate_rbac_config()
            before use (create_rbac() does).
        """
        role_map = raw.get("rolePermissionMap", raw.get("role_permission_map")) or {}
        scope_map = raw.get("entityScopeMap", raw.get("entity_scope_map")) or {}
        return cls(
            roles=tuple(raw["roles"]),
            super_admin_role=raw.get("superAdminRole", raw.get("super_admin_role")),
            entities=tuple(raw["entities"]),
            permissions=tuple(raw["permissions"]),
            scopes=tuple(raw.get("scopes") or ()),
            grants=tuple(raw.get("grants") or ()),
            role_permission_map=role_map,
            entity_scope_map=scope_map,
        )

    def scope_keys_for(self, entity: str) -> tuple[EntityScopeKey, ...] | None:
        """EntityScopeKey entries declared for an entity, or None."""
        return self.entity_scope_map.get(entity)

    def is_super_admin(self, role: str) -> bool:
        """Check whether a role is the superadmin role."""
        return role == self.super_admin_role


def _scope_keys(keys: Iterable[Any]) -> tuple[EntityScopeKey, ...]:
    return tuple(
        key if isinstance(key, EntityScopeKey) else EntityScopeKey.from_mapping(key)
        for key in keys
    )


def _role_policy(policy: RolePolicy | Mapping[str, Any]) -> RolePolicy:
    if isinstance(policy, RolePolicy):
        return policy
    return RolePolicy.from_mapping(policy)
