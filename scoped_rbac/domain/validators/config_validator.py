"""Structural validation of the authorization model.

Checks only what can be known from the configuration itself. Grant
references in the role map are deliberately left to the persistence backend,
which rejects unregistered grants during synchronization.
"""

from scoped_rbac.core.enums import ErrorCode
from scoped_rbac.core.errors import ValidationError
from scoped_rbac.core.result import Failure, Result, Success
from scoped_rbac.domain.entities.rbac_config import RBACConfig
from scoped_rbac.domain.value_objects.policy import (
    parse_role_permission,
    parse_scoped_role_permission,
)


def _invalid(message: str, field: str, **details: str) -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(
            code=ErrorCode.INVALID_CONFIGURATION,
            message=message,
            field=field,
            details=details or None,
        )
    )


def validate_rbac_config(config: RBACConfig) -> Result[RBACConfig, ValidationError]:
    """Validate an RBACConfig.

    Rules:
        - identifiers are unique within each category
        - the superadmin role is one of the declared roles
        - the role map names declared roles, never the superadmin role
        - role map entries have the right segment count and name declared
          entities, permissions and scopes
        - entity scope map entries name declared entities and scopes

    Args:
        config: Configuration to validate.

    Returns:
        Success(config) or Failure(ValidationError) for the first violation.
    """
    for name in ("roles", "entities", "permissions", "scopes", "grants"):
        values = getattr(config, name)
        if len(set(values)) != len(values):
            return _invalid(f"Duplicate identifiers in {name}", name)

    if not config.super_admin_role or config.super_admin_role not in config.roles:
        return _invalid(
            f"Superadmin role '{config.super_admin_role}' is not a declared role",
            "super_admin_role",
        )

    for role, role_policy in config.role_permission_map.items():
        if role == config.super_admin_role:
            return _invalid(
                "The superadmin role must not appear in the role permission map",
                "role_permission_map",
                role=role,
            )
        if role not in config.roles:
            return _invalid(
                f"Unknown role '{role}' in role permission map",
                "role_permission_map",
                role=role,
            )

        for raw in role_policy.permissions:
            parsed = parse_role_permission(raw)
            if isinstance(parsed, Failure):
                return parsed
            edge = parsed.value
            if edge.entity not in config.entities:
                return _invalid(f"Unknown entity in '{raw}'", "permissions", role=role)
            if edge.permission not in config.permissions:
                return _invalid(
                    f"Unknown permission in '{raw}'", "permissions", role=role
                )

        for raw in role_policy.scoped_permissions:
            parsed_scoped = parse_scoped_role_permission(raw)
            if isinstance(parsed_scoped, Failure):
                return parsed_scoped
            scoped = parsed_scoped.value
            if scoped.entity not in config.entities:
                return _invalid(
                    f"Unknown entity in '{raw}'", "scoped_permissions", role=role
                )
            if scoped.permission not in config.permissions:
                return _invalid(
                    f"Unknown permission in '{raw}'", "scoped_permissions", role=role
                )
            if scoped.scope not in config.scopes:
                return _invalid(
                    f"Unknown scope in '{raw}'", "scoped_permissions", role=role
                )

    for entity, scope_keys in config.entity_scope_map.items():
        if entity not in config.entities:
            return _invalid(
                f"Unknown entity '{entity}' in entity scope map",
                "entity_scope_map",
            )
        for scope_key in scope_keys:
            if scope_key.scope not in config.scopes:
                return _invalid(
                    f"Unknown scope '{scope_key.scope}' for entity '{entity}'",
                    "entity_scope_map",
                )
            if not scope_key.data_key:
                return _invalid(
                    f"Missing data key for scope '{scope_key.scope}' of '{entity}'",
                    "entity_scope_map",
                )

    return Success(value=config)
