"""Unit tests for RBACSynchronizer.

Tests cover:
- Catalog projection (roles, permissions, entity/scope namespaces, grants)
- Role map projection through grant() (cache priming) and direct edges
- Idempotent re-runs
- Unregistered role grants
- Start/complete logging with counts
"""

from unittest.mock import AsyncMock

import pytest

from scoped_rbac.application.services import DecisionEngine, RBACSynchronizer
from scoped_rbac.core.errors import GrantNotRegisteredError
from scoped_rbac.domain.entities import RBACConfig
from scoped_rbac.domain.value_objects import (
    RolePermissionEdge,
    ScopedPermissionEdge,
)


@pytest.fixture
def synchronizer(rbac_config, memory_persistence, memory_cache, cache_keys, mock_logger):
    engine = DecisionEngine(
        config=rbac_config,
        persistence=memory_persistence,
        cache=memory_cache,
        cache_keys=cache_keys,
        logger=mock_logger,
    )
    return RBACSynchronizer(rbac_config, memory_persistence, engine, mock_logger)


@pytest.mark.unit
class TestSynchronizerProjection:
    """initialize() writes the configuration into persistence."""

    @pytest.mark.asyncio
    async def test_registers_catalog(self, synchronizer, memory_persistence):
        await synchronizer.initialize()

        assert list(memory_persistence.roles) == ["admin", "user", "guest"]
        assert list(memory_persistence.permissions) == ["read", "write", "edit"]
        assert list(memory_persistence.scopes) == [
            "user",
            "post",
            "post_draft",
            "self",
            "org",
            "group",
        ]
        assert list(memory_persistence.grants) == [
            "register",
            "forgot_password",
            "reset_password",
        ]

    @pytest.mark.asyncio
    async def test_creates_role_edges(self, synchronizer, memory_persistence):
        await synchronizer.initialize()

        assert await memory_persistence.get_role_policies("user") == [
            RolePermissionEdge(permission="read", entity="post"),
            RolePermissionEdge(permission="write", entity="post"),
        ]
        assert await memory_persistence.get_role_scoped_policies("user") == [
            ScopedPermissionEdge(permission="edit", entity="user", scope="self"),
            ScopedPermissionEdge(permission="edit", entity="post", scope="self"),
            ScopedPermissionEdge(permission="edit", entity="post", scope="org"),
            ScopedPermissionEdge(permission="read", entity="post_draft", scope="org"),
        ]
        assert await memory_persistence.get_role_grants("guest") == [
            "register",
            "forgot_password",
            "reset_password",
        ]
        assert await memory_persistence.get_role_policies("admin") == []

    @pytest.mark.asyncio
    async def test_primes_only_unscoped_permissions(self, synchronizer, memory_cache):
        await synchronizer.initialize()

        assert await memory_cache.get("rbac:policy:user:read:post") == "1"
        assert await memory_cache.get("rbac:policy:user:write:post") == "1"
        assert await memory_cache.get("rbac:policy:guest:read:post") == "1"
        # user + guest unscoped permissions only
        assert len(memory_cache) == 3

    @pytest.mark.asyncio
    async def test_returns_counts(self, synchronizer):
        stats = await synchronizer.initialize()

        assert stats.roles == 4
        assert stats.permissions == 3
        assert stats.scopes == 6
        assert stats.grants == 3
        assert stats.role_permissions == 3
        assert stats.scoped_role_permissions == 4
        assert stats.role_grants == 3

    @pytest.mark.asyncio
    async def test_logs_start_and_completion(self, synchronizer, mock_logger):
        await synchronizer.initialize()

        events = [call[0][0] for call in mock_logger.info.call_args_list]
        assert events[0] == "rbac_sync_started"
        assert events[-1] == "rbac_sync_completed"


@pytest.mark.unit
class TestSynchronizerIdempotence:
    """Re-running initialize() leaves persisted state unchanged."""

    @pytest.mark.asyncio
    async def test_second_run_creates_no_duplicates(
        self, synchronizer, memory_persistence
    ):
        await synchronizer.initialize()
        edges = memory_persistence.edge_count()
        roles = list(memory_persistence.roles)

        await synchronizer.initialize()

        assert memory_persistence.edge_count() == edges
        assert list(memory_persistence.roles) == roles


@pytest.mark.unit
class TestSynchronizerErrors:
    """Failures during projection."""

    @pytest.mark.asyncio
    async def test_unregistered_role_grant_raises(
        self, config_data, memory_persistence, memory_cache, cache_keys, mock_logger
    ):
        config_data["rolePermissionMap"]["guest"]["grants"].append("delete_account")
        config = RBACConfig.from_mapping(config_data)
        engine = DecisionEngine(
            config=config,
            persistence=memory_persistence,
            cache=memory_cache,
            cache_keys=cache_keys,
            logger=mock_logger,
        )
        synchronizer = RBACSynchronizer(
            config, memory_persistence, engine, mock_logger
        )

        with pytest.raises(GrantNotRegisteredError, match="delete_account"):
            await synchronizer.initialize()

    @pytest.mark.asyncio
    async def test_persistence_error_stops_projection(
        self, rbac_config, mock_persistence, mock_cache, cache_keys, mock_logger
    ):
        mock_persistence.upsert_permission = AsyncMock(
            side_effect=ConnectionError("database unavailable")
        )
        engine = DecisionEngine(
            config=rbac_config,
            persistence=mock_persistence,
            cache=mock_cache,
            cache_keys=cache_keys,
            logger=mock_logger,
        )
        synchronizer = RBACSynchronizer(
            rbac_config, mock_persistence, engine, mock_logger
        )

        with pytest.raises(ConnectionError):
            await synchronizer.initialize()

        mock_persistence.upsert_scope.assert_not_called()
