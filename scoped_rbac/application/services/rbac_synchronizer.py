"""One-shot projection of the authorization model into persistence.

Every step is an idempotent upsert, so running initialize() again with the
same configuration leaves persisted state unchanged.

Steps, in order:
    1. Roles, then the superadmin role
    2. Permissions
    3. Entities (as scope namespaces), then scopes
    4. Grants
    5. Role map: unscoped permissions via DecisionEngine.grant() (primes the
       cache), scoped permissions and role grants directly in persistence
"""

from dataclasses import dataclass

from scoped_rbac.application.services.decision_engine import DecisionEngine
from scoped_rbac.core.errors import ConfigurationError
from scoped_rbac.core.result import Failure
from scoped_rbac.domain.entities import RBACConfig
from scoped_rbac.domain.protocols import LoggerProtocol, RBACPersistenceProtocol
from scoped_rbac.domain.value_objects import (
    parse_role_permission,
    parse_scoped_role_permission,
)


@dataclass(slots=True)
class SyncStats:
    """Counts reported by a synchronization run."""

    roles: int = 0
    permissions: int = 0
    scopes: int = 0
    grants: int = 0
    role_permissions: int = 0
    scoped_role_permissions: int = 0
    role_grants: int = 0


class RBACSynchronizer:
    """Projects an RBACConfig into a persistence backend.

    Example:
        >>> synchronizer = RBACSynchronizer(config, persistence, engine, logger)
        >>> await synchronizer.initialize()
    """

    def __init__(
        self,
        config: RBACConfig,
        persistence: RBACPersistenceProtocol,
        engine: DecisionEngine,
        logger: LoggerProtocol,
    ) -> None:
        self.config = config
        self._persistence = persistence
        self._engine = engine
        self._logger = logger

    async def initialize(self) -> SyncStats:
        """Run the projection.

        Returns:
            SyncStats: What was upserted in this run.

        Raises:
            GrantNotRegisteredError: If the role map gives an unregistered
                grant.
            ConfigurationError: If a role map entry cannot be parsed.
        """
        config = self.config
        stats = SyncStats()

        self._logger.info(
            "rbac_sync_started",
            roles=len(config.roles),
            entities=len(config.entities),
            permissions=len(config.permissions),
        )

        for role in (*config.roles, config.super_admin_role):
            await self._persistence.upsert_role(role)
            stats.roles += 1

        for permission in config.permissions:
            await self._persistence.upsert_permission(permission)
            stats.permissions += 1

        for scope in (*config.entities, *config.scopes):
            await self._persistence.upsert_scope(scope)
            stats.scopes += 1

        for grant in config.grants:
            await self._persistence.upsert_grant(grant)
            stats.grants += 1

        for role, role_policy in config.role_permission_map.items():
            for raw in role_policy.permissions:
                edge = parse_role_permission(raw)
                if isinstance(edge, Failure):
                    raise ConfigurationError(edge.error)
                await self._engine.grant(role, edge.value.entity, edge.value.permission)
                stats.role_permissions += 1

            for raw in role_policy.scoped_permissions:
                scoped_edge = parse_scoped_role_permission(raw)
                if isinstance(scoped_edge, Failure):
                    raise ConfigurationError(scoped_edge.error)
                await self._persistence.grant_scoped_permission(role, scoped_edge.value)
                stats.scoped_role_permissions += 1

            for grant in role_policy.grants:
                await self._persistence.give_role_grant(role, grant)
                stats.role_grants += 1

        self._logger.info(
            "rbac_sync_completed",
            roles=stats.roles,
            permissions=stats.permissions,
            scopes=stats.scopes,
            grants=stats.grants,
            role_permissions=stats.role_permissions,
            scoped_role_permissions=stats.scoped_role_permissions,
            role_grants=stats.role_grants,
        )
        return stats
