"""Authorization decision engine.

Answers "may this role do X to this entity (under this scope, for this
subject)?" and "does this role hold this grant?" against the persistence
backend, with the cache as a fast path. Also maintains role permissions,
role grants, and subject role assignments at runtime.

Decision flow (unscoped):
    1. Parse and validate the policy string
    2. Superadmin bypass
    3. Cache lookup (ALLOWED / DENIED / UNKNOWN)
    4. Persistence lookup on UNKNOWN
    5. Cache ALLOWED (and DENIED when negative caching is enabled)

Scoped decisions resolve candidate values from the caller's entity data
through the configured EntityScopeKey entries. They read the cache but never
write it.

Following hexagonal architecture:
- Implements AuthorizationProtocol (structural typing, no inheritance)
- Depends only on domain protocols for persistence, cache, and logging

Usage:
    engine = DecisionEngine(
        config=config,
        persistence=MemoryPersistenceAdapter(),
        cache=MemoryCacheAdapter(),
        cache_keys=CacheKeys(prefix="rbac"),
        logger=get_logger(),
    )
    await engine.can("user", "read:post")
"""

from collections.abc import Mapping
from typing import Any

from scoped_rbac.core.enums import ErrorCode
from scoped_rbac.core.errors import PolicyError, ValidationError
from scoped_rbac.core.result import Failure
from scoped_rbac.domain.entities import RBACConfig
from scoped_rbac.domain.enums import CachedDecision
from scoped_rbac.domain.protocols import (
    CacheKeysProtocol,
    LoggerProtocol,
    RBACCacheProtocol,
    RBACPersistenceProtocol,
)
from scoped_rbac.domain.value_objects import (
    Policy,
    RolePermissionEdge,
    ScopedArgs,
    Subject,
    parse_policy,
)


class DecisionEngine:
    """RBAC decision and assignment service.

    Attributes:
        config: Immutable authorization model.
        cache_ttl: TTL passed to every cache write (None = adapter default).
        cache_negative_decisions: Cache denials as DENIED.
    """

    def __init__(
        self,
        config: RBACConfig,
        persistence: RBACPersistenceProtocol,
        cache: RBACCacheProtocol,
        cache_keys: CacheKeysProtocol,
        logger: LoggerProtocol,
        cache_ttl: int | None = None,
        cache_negative_decisions: bool = False,
    ) -> None:
        """Initialize engine with dependencies.

        Args:
            config: Validated authorization model.
            persistence: Persistence backend (source of truth).
            cache: Decision cache (advisory).
            cache_keys: Key builder shared by reads and writes.
            logger: Structured logger.
            cache_ttl: Optional TTL for cache writes, in seconds.
            cache_negative_decisions: Whether denials are cached.
        """
        self.config = config
        self._persistence = persistence
        self._cache = cache
        self._keys = cache_keys
        self._logger = logger
        self.cache_ttl = cache_ttl
        self.cache_negative_decisions = cache_negative_decisions

    # =========================================================================
    # Decisions
    # =========================================================================

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
            scoped: Subject and entity data. Required iff the scope form is
                used.

        Returns:
            bool: True if allowed, False if denied.

        Raises:
            PolicyError: Malformed policy, undeclared segment, or scoped
                arguments missing/unexpected for the policy form.
        """
        parsed, args = self._parse(policy, scoped)
        return await self._decide(role, parsed, args)

    async def has_grant(self, role: str, grant: str) -> bool:
        """Check whether a role holds a standalone grant.

        The superadmin role has no implicit grants.

        Raises:
            PolicyError: If the grant is not declared in the configuration.
        """
        self._require_declared_grant(grant)

        key = self._keys.role_grant(role, grant)
        cached = await self._read(key)
        if cached.is_known:
            self._logger.debug(
                "authorization_cache_hit",
                role=role,
                grant=grant,
                allowed=cached is CachedDecision.ALLOWED,
            )
            return cached is CachedDecision.ALLOWED

        allowed = grant in await self._persistence.get_role_grants(role)
        await self._remember(key, allowed)

        self._logger.debug(
            "authorization_check",
            role=role,
            grant=grant,
            allowed=allowed,
        )
        return allowed

    async def subject_has_role(self, subject: Subject, role: str) -> bool:
        """Check whether a subject actively holds a role.

        A DENIED marker written by revoke_role() wins over the persisted edge
        until grant_role() overwrites it.
        """
        subject_id = str(subject)
        cached = await self._read(self._keys.subject_role(subject_id, role))
        if cached.is_known:
            return cached is CachedDecision.ALLOWED
        return role in await self._persistence.get_actor_roles(subject_id)

    async def get_subject_roles(self, subject: Subject) -> list[str]:
        """List the active roles of a subject, in assignment order."""
        subject_id = str(subject)
        roles: list[str] = []
        for role in await self._persistence.get_actor_roles(subject_id):
            if role in roles:
                continue
            cached = await self._read(self._keys.subject_role(subject_id, role))
            if cached is not CachedDecision.DENIED:
                roles.append(role)
        return roles

    async def subject_can(
        self,
        subject: Subject,
        policy: str,
        scoped: ScopedArgs | Mapping[str, Any] | None = None,
    ) -> bool:
        """Check whether any active role of a subject may perform a policy.

        The policy is validated even when the subject holds no roles.
        """
        parsed, args = self._parse(policy, scoped)
        for role in await self.get_subject_roles(subject):
            if await self._decide(role, parsed, args):
                return True
        return False

    # =========================================================================
    # Assignments
    # =========================================================================

    async def grant(self, role: str, entity: str, permission: str) -> None:
        """Give a role an unscoped permission on an entity.

        Registers the role and permission, creates the edge, and writes
        ALLOWED at the key can() reads.

        Raises:
            PolicyError: If the entity or permission is not declared.
        """
        self._parse(f"{permission}:{entity}", None)

        await self._persistence.upsert_role(role)
        await self._persistence.upsert_permission(permission)
        await self._persistence.grant_role_permission(
            role, RolePermissionEdge(permission=permission, entity=entity)
        )
        await self._write(
            self._keys.policy(role, permission, entity), CachedDecision.ALLOWED
        )

        self._logger.info(
            "permission_granted",
            role=role,
            permission=permission,
            entity=entity,
        )

    async def give_grant(self, role: str, grant: str) -> None:
        """Give a role a standalone grant.

        Raises:
            PolicyError: If the grant is not declared in the configuration.
            GrantNotRegisteredError: If the backend does not know the grant.
        """
        self._require_declared_grant(grant)

        await self._persistence.upsert_role(role)
        await self._persistence.give_role_grant(role, grant)
        await self._write(self._keys.role_grant(role, grant), CachedDecision.ALLOWED)

        self._logger.info("role_grant_given", role=role, grant=grant)

    async def grant_role(self, subject: Subject, role: str) -> None:
        """Assign a role to a subject."""
        subject_id = str(subject)
        await self._persistence.upsert_role(role)
        await self._persistence.grant_subject_role(subject_id, role)
        await self._write(
            self._keys.subject_role(subject_id, role), CachedDecision.ALLOWED
        )

        self._logger.info("subject_role_granted", subject=subject_id, role=role)

    async def revoke_role(self, subject: Subject, role: str) -> None:
        """Revoke a role from a subject.

        The SubjectRole edge stays in persistence. Revocation is recorded as
        a DENIED marker at the subject role key.
        """
        subject_id = str(subject)
        await self._persistence.upsert_role(role)
        await self._persistence.grant_subject_role(subject_id, role)
        await self._write(
            self._keys.subject_role(subject_id, role), CachedDecision.DENIED
        )

        self._logger.info("subject_role_revoked", subject=subject_id, role=role)

    # =========================================================================
    # Internals
    # =========================================================================

    def _parse(
        self,
        policy: str,
        scoped: ScopedArgs | Mapping[str, Any] | None,
    ) -> tuple[Policy, ScopedArgs | None]:
        result = parse_policy(policy, self.config)
        if isinstance(result, Failure):
            raise PolicyError(result.error)
        parsed = result.value

        if parsed.is_scoped and scoped is None:
            raise PolicyError(
                ValidationError(
                    code=ErrorCode.SCOPED_ARGS_MISSING,
                    message=f"Scoped policy '{policy}' requires subject and data",
                    field="scoped",
                )
            )
        if not parsed.is_scoped and scoped is not None:
            raise PolicyError(
                ValidationError(
                    code=ErrorCode.SCOPED_ARGS_UNEXPECTED,
                    message=f"Unscoped policy '{policy}' does not take subject or data",
                    field="scoped",
                )
            )

        args = ScopedArgs.coerce(scoped) if scoped is not None else None
        return parsed, args

    def _require_declared_grant(self, grant: str) -> None:
        if grant not in self.config.grants:
            raise PolicyError(
                ValidationError(
                    code=ErrorCode.POLICY_UNKNOWN_SEGMENT,
                    message=f"Unknown grant '{grant}'",
                    field="grant",
                    details={"grant": grant},
                )
            )

    async def _decide(
        self, role: str, policy: Policy, args: ScopedArgs | None
    ) -> bool:
        if self.config.is_super_admin(role):
            return True
        if args is None or policy.scope is None:
            return await self._decide_unscoped(role, policy)
        return await self._decide_scoped(role, policy, policy.scope, args)

    async def _decide_unscoped(self, role: str, policy: Policy) -> bool:
        key = self._keys.policy(role, policy.permission, policy.entity)
        cached = await self._read(key)
        if cached.is_known:
            self._logger.debug(
                "authorization_cache_hit",
                role=role,
                policy=str(policy),
                allowed=cached is CachedDecision.ALLOWED,
            )
            return cached is CachedDecision.ALLOWED

        edges = await self._persistence.get_role_policies(role)
        allowed = any(
            edge.permission == policy.permission and edge.entity == policy.entity
            for edge in edges
        )
        await self._remember(key, allowed)

        self._logger.debug(
            "authorization_check",
            role=role,
            policy=str(policy),
            allowed=allowed,
        )
        return allowed

    async def _decide_scoped(
        self, role: str, policy: Policy, scope: str, args: ScopedArgs
    ) -> bool:
        key = self._keys.scoped_policy(
            role, policy.permission, policy.entity, scope, args.subject
        )
        cached = await self._read(key)
        if cached.is_known:
            self._logger.debug(
                "authorization_cache_hit",
                role=role,
                policy=str(policy),
                allowed=cached is CachedDecision.ALLOWED,
            )
            return cached is CachedDecision.ALLOWED

        scope_keys = self.config.scope_keys_for(policy.entity)
        if not scope_keys:
            self._logger.warning(
                "entity_scope_unresolved",
                role=role,
                entity=policy.entity,
                scope=scope,
            )
            return False

        edges = await self._persistence.get_role_scoped_policies(role)
        if not any(
            edge.permission == policy.permission
            and edge.entity == policy.entity
            and edge.scope == scope
            for edge in edges
        ):
            allowed = False
        else:
            candidates = [
                args.data[scope_key.data_key]
                for scope_key in scope_keys
                if scope_key.scope == scope and scope_key.data_key in args.data
            ]
            allowed = any(subject in candidates for subject in args.subjects)

        self._logger.debug(
            "authorization_check",
            role=role,
            policy=str(policy),
            subjects=[str(subject) for subject in args.subjects],
            allowed=allowed,
        )
        return allowed

    async def _read(self, key: str) -> CachedDecision:
        return CachedDecision.from_cache_value(await self._cache.get(key))

    async def _write(self, key: str, decision: CachedDecision) -> None:
        await self._cache.set(key, decision.to_cache_value(), ttl=self.cache_ttl)

    async def _remember(self, key: str, allowed: bool) -> None:
        if allowed or self.cache_negative_decisions:
            await self._write(key, CachedDecision.from_bool(allowed))
