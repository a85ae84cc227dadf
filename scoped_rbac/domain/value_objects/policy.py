"""Policy value objects and composite-string parsing.

Two colon-delimited formats exist and their segment order differs:

- Query policies (``can``): ``"permission:entity"`` or
  ``"permission:entity:scope"``.
- Configuration entries (role map): ``"entity:permission"`` or
  ``"entity:permission:scope"``.

There is no escaping; identifiers must not contain colons. Parsing checks the
segment count and, for query policies, that every segment is declared in the
authorization model.

Usage:
    match parse_policy("edit:post:org", config):
        case Success(value=policy):
            policy.is_scoped  # True
        case Failure(error=error):
            raise PolicyError(error)
"""

from collections.abc import Collection, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from scoped_rbac.core.enums import ErrorCode
from scoped_rbac.core.errors import PolicyError, ValidationError
from scoped_rbac.core.result import Failure, Result, Success
from scoped_rbac.domain.value_objects.edges import (
    RolePermissionEdge,
    ScopedPermissionEdge,
)

if TYPE_CHECKING:
    from scoped_rbac.domain.entities.rbac_config import RBACConfig

POLICY_DELIMITER = ":"

Subject = str | int


@dataclass(frozen=True, slots=True, kw_only=True)
class Policy:
    """Parsed query policy.

    Attributes:
        permission: Action verb.
        entity: Entity type.
        scope: Scope qualifier, or None for the unscoped form.
    """

    permission: str
    entity: str
    scope: str | None = None

    @property
    def is_scoped(self) -> bool:
        """True for the ``permission:entity:scope`` form."""
        return self.scope is not None

    def __str__(self) -> str:
        parts = [self.permission, self.entity]
        if self.scope is not None:
            parts.append(self.scope)
        return POLICY_DELIMITER.join(parts)


@dataclass(frozen=True, slots=True, kw_only=True)
class ScopedArgs:
    """Arguments for a scoped ``can`` query.

    Attributes:
        subject: Identifier (or identifiers) matched against the scope values.
        data: The entity instance being checked (opaque key/value record).
    """

    subject: Subject | Sequence[Subject]
    data: Mapping[str, Any]

    @property
    def subjects(self) -> tuple[Subject, ...]:
        """Subject normalized to a tuple."""
        if _is_many(self.subject):
            return tuple(self.subject)  # type: ignore[arg-type]
        return (self.subject,)  # type: ignore[return-value]

    @property
    def is_many(self) -> bool:
        """True when the subject was given as a collection."""
        return _is_many(self.subject)

    @classmethod
    def coerce(cls, value: "ScopedArgs | Mapping[str, Any]") -> "ScopedArgs":
        """Accept either a ScopedArgs or a ``{"subject", "data"}`` mapping.

        Raises:
            PolicyError: If the mapping lacks ``subject`` or ``data``.
        """
        if isinstance(value, ScopedArgs):
            return value
        missing = ", ".join(key for key in ("subject", "data") if key not in value)
        if missing:
            raise PolicyError(
                ValidationError(
                    code=ErrorCode.SCOPED_ARGS_MISSING,
                    message=f"Scoped arguments missing: {missing}",
                    field="scoped",
                    details={"missing": missing},
                )
            )
        return cls(subject=value["subject"], data=value["data"])


def _is_many(subject: object) -> bool:
    return isinstance(subject, (list, tuple, set, frozenset))


def _segments(
    raw: str, expected: Collection[int], field: str
) -> Result[list[str], ValidationError]:
    parts = raw.split(POLICY_DELIMITER)
    if len(parts) not in expected or any(not part for part in parts):
        return Failure(
            error=ValidationError(
                code=ErrorCode.POLICY_MALFORMED,
                message=(
                    f"'{raw}' must have "
                    f"{' or '.join(str(n) for n in sorted(expected))} "
                    f"non-empty '{POLICY_DELIMITER}'-delimited segments"
                ),
                field=field,
            )
        )
    return Success(value=parts)


def _unknown(kind: str, value: str, raw: str) -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(
            code=ErrorCode.POLICY_UNKNOWN_SEGMENT,
            message=f"Unknown {kind} '{value}' in '{raw}'",
            field=kind,
            details={"policy": raw, kind: value},
        )
    )


def parse_policy(raw: str, config: "RBACConfig") -> Result[Policy, ValidationError]:
    """Parse and validate a query policy string.

    Args:
        raw: ``"permission:entity"`` or ``"permission:entity:scope"``.
        config: Authorization model the segments must be declared in.

    Returns:
        Success(Policy) or Failure(ValidationError) with POLICY_MALFORMED or
        POLICY_UNKNOWN_SEGMENT.
    """
    segments = _segments(raw, (2, 3), "policy")
    if isinstance(segments, Failure):
        return segments

    permission, entity, *rest = segments.value
    scope = rest[0] if rest else None

    if permission not in config.permissions:
        return _unknown("permission", permission, raw)
    if entity not in config.entities:
        return _unknown("entity", entity, raw)
    if scope is not None and scope not in config.scopes:
        return _unknown("scope", scope, raw)

    return Success(value=Policy(permission=permission, entity=entity, scope=scope))


def parse_role_permission(raw: str) -> Result[RolePermissionEdge, ValidationError]:
    """Parse a configuration entry ``"entity:permission"``."""
    segments = _segments(raw, (2,), "permissions")
    if isinstance(segments, Failure):
        return segments
    entity, permission = segments.value
    return Success(value=RolePermissionEdge(permission=permission, entity=entity))


def parse_scoped_role_permission(
    raw: str,
) -> Result[ScopedPermissionEdge, ValidationError]:
    """Parse a configuration entry ``"entity:permission:scope"``."""
    segments = _segments(raw, (3,), "scoped_permissions")
    if isinstance(segments, Failure):
        return segments
    entity, permission, scope = segments.value
    return Success(
        value=ScopedPermissionEdge(permission=permission, entity=entity, scope=scope)
    )
