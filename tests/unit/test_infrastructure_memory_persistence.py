"""Unit tests for MemoryPersistenceAdapter specifics.

The shared persistence contract is covered in
tests/integration/test_persistence_adapters.py.
"""

import pytest

from scoped_rbac.domain.value_objects import RolePermissionEdge
from scoped_rbac.infrastructure.persistence import MemoryPersistenceAdapter

READ_POST = RolePermissionEdge(permission="read", entity="post")


@pytest.mark.unit
class TestMemoryPersistenceAdapter:
    """Instance-owned indexes."""

    @pytest.mark.asyncio
    async def test_instances_do_not_share_state(self):
        first = MemoryPersistenceAdapter()
        second = MemoryPersistenceAdapter()

        await first.upsert_role("user")
        await first.grant_role_permission("user", READ_POST)

        assert await second.get_role("user") is None
        assert await second.get_role_policies("user") == []

    @pytest.mark.asyncio
    async def test_preserves_insertion_order(self, memory_persistence):
        for role in ("guest", "user", "admin"):
            await memory_persistence.grant_subject_role(1, role)

        assert await memory_persistence.get_actor_roles(1) == ["guest", "user", "admin"]

    @pytest.mark.asyncio
    async def test_reads_do_not_create_entries(self, memory_persistence):
        await memory_persistence.get_role_policies("nobody")
        await memory_persistence.get_actor_roles(99)

        assert "nobody" not in memory_persistence.role_permissions
        assert "99" not in memory_persistence.subject_roles

    @pytest.mark.asyncio
    async def test_edge_count(self, memory_persistence):
        await memory_persistence.upsert_grant("register")
        await memory_persistence.grant_role_permission("user", READ_POST)
        await memory_persistence.grant_role_permission("user", READ_POST)
        await memory_persistence.give_role_grant("guest", "register")
        await memory_persistence.grant_subject_role(1, "user")

        assert memory_persistence.edge_count() == 3
