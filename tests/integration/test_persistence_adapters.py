"""Contract tests shared by every persistence adapter.

Both MemoryPersistenceAdapter and SQLAlchemyPersistenceAdapter (over SQLite)
run the same tests:
- Idempotent catalog upserts and getters
- Edge creation without duplicates
- Unregistered grants rejected
- Unknown roles and subjects yield empty lists
- Integer and string subjects

Lists come back in insertion order.
"""

import pytest
import pytest_asyncio

from scoped_rbac.core.enums import ErrorCode
from scoped_rbac.core.errors import GrantNotRegisteredError
from scoped_rbac.domain.value_objects import (
    RolePermissionEdge,
    ScopedPermissionEdge,
)
from scoped_rbac.infrastructure.persistence import MemoryPersistenceAdapter

READ_POST = RolePermissionEdge(permission="read", entity="post")
WRITE_POST = RolePermissionEdge(permission="write", entity="post")
EDIT_POST_ORG = ScopedPermissionEdge(permission="edit", entity="post", scope="org")


@pytest_asyncio.fixture(params=["memory", "sqlalchemy"])
async def persistence(request, sqlalchemy_persistence):
    if request.param == "memory":
        return MemoryPersistenceAdapter()
    return sqlalchemy_persistence


@pytest.mark.integration
class TestCatalog:
    """Upsert/get for roles, permissions, scopes and grants."""

    @pytest.mark.asyncio
    async def test_getters_return_none_when_missing(self, persistence):
        assert await persistence.get_role("user") is None
        assert await persistence.get_permission("read") is None
        assert await persistence.get_scope("org") is None
        assert await persistence.get_grant("register") is None

    @pytest.mark.asyncio
    async def test_upsert_returns_id_and_registers(self, persistence):
        assert await persistence.upsert_role("user") == "user"
        assert await persistence.upsert_permission("read") == "read"
        assert await persistence.upsert_scope("org") == "org"
        assert await persistence.upsert_grant("register") == "register"

        assert await persistence.get_role("user") == "user"
        assert await persistence.get_permission("read") == "read"
        assert await persistence.get_scope("org") == "org"
        assert await persistence.get_grant("register") == "register"

    @pytest.mark.asyncio
    async def test_upsert_twice_is_idempotent(self, persistence):
        await persistence.upsert_role("user")

        assert await persistence.upsert_role("user") == "user"
        assert await persistence.get_role("user") == "user"


@pytest.mark.integration
class TestEdges:
    """Role, scoped, grant and subject edges."""

    @pytest.mark.asyncio
    async def test_role_permissions(self, persistence):
        await persistence.grant_role_permission("user", READ_POST)
        await persistence.grant_role_permission("user", WRITE_POST)
        await persistence.grant_role_permission("user", READ_POST)

        policies = await persistence.get_role_policies("user")

        assert policies == [READ_POST, WRITE_POST]

    @pytest.mark.asyncio
    async def test_scoped_permissions(self, persistence):
        assert await persistence.grant_scoped_permission("user", EDIT_POST_ORG) == "edit"
        await persistence.grant_scoped_permission("user", EDIT_POST_ORG)

        assert await persistence.get_role_scoped_policies("user") == [EDIT_POST_ORG]

    @pytest.mark.asyncio
    async def test_role_grants(self, persistence):
        await persistence.upsert_grant("register")

        assert await persistence.give_role_grant("guest", "register") == "register"
        await persistence.give_role_grant("guest", "register")

        assert await persistence.get_role_grants("guest") == ["register"]

    @pytest.mark.asyncio
    async def test_unregistered_grant_is_rejected(self, persistence):
        with pytest.raises(GrantNotRegisteredError) as exc_info:
            await persistence.give_role_grant("guest", "register")

        assert exc_info.value.code == ErrorCode.GRANT_NOT_REGISTERED
        assert await persistence.get_role_grants("guest") == []

    @pytest.mark.asyncio
    async def test_subject_roles(self, persistence):
        await persistence.grant_subject_role(42, "user")
        await persistence.grant_subject_role(42, "guest")
        await persistence.grant_subject_role(42, "user")

        assert await persistence.get_actor_roles(42) == ["user", "guest"]

    @pytest.mark.asyncio
    async def test_string_subjects(self, persistence):
        await persistence.grant_subject_role("alice", "user")

        assert await persistence.get_actor_roles("alice") == ["user"]
        assert await persistence.get_actor_roles("bob") == []

    @pytest.mark.asyncio
    async def test_subject_identity_is_string_form(self, persistence):
        await persistence.grant_subject_role(1, "user")
        await persistence.grant_subject_role("1", "guest")

        assert await persistence.get_actor_roles(1) == ["user", "guest"]
        assert await persistence.get_actor_roles("1") == ["user", "guest"]

    @pytest.mark.asyncio
    async def test_unknown_role_yields_empty_lists(self, persistence):
        assert await persistence.get_role_policies("nobody") == []
        assert await persistence.get_role_scoped_policies("nobody") == []
        assert await persistence.get_role_grants("nobody") == []

    @pytest.mark.asyncio
    async def test_edges_are_per_role(self, persistence):
        await persistence.grant_role_permission("user", READ_POST)

        assert await persistence.get_role_policies("guest") == []
