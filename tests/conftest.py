"""Shared pytest fixtures.

Provides:
1. The blog authorization model used across unit and integration tests
2. Mocked collaborators (logger, cache, persistence) for unit tests
3. Fresh in-memory backends and a synchronized engine per test
"""

from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio

from scoped_rbac.application.services import DecisionEngine, RBACSynchronizer
from scoped_rbac.domain.entities import RBACConfig
from scoped_rbac.infrastructure.cache import CacheKeys, MemoryCacheAdapter
from scoped_rbac.infrastructure.persistence import MemoryPersistenceAdapter


def build_config_data() -> dict[str, Any]:
    """Blog authorization model in its camelCase mapping form.

    Roles: admin (superadmin), user, guest.
    user: post:read, post:write, scoped edits on user/post and org drafts.
    guest: post:read and every grant.
    """
    return {
        "roles": ["admin", "user", "guest"],
        "grants": ["register", "forgot_password", "reset_password"],
        "permissions": ["read", "write", "edit"],
        "entities": ["user", "post", "post_draft"],
        "scopes": ["self", "org", "group"],
        "rolePermissionMap": {
            "user": {
                "permissions": ["post:read", "post:write"],
                "scopedPermissions": [
                    "user:edit:self",
                    "post:edit:self",
                    "post:edit:org",
                    "post_draft:read:org",
                ],
            },
            "guest": {
                "permissions": ["post:read"],
                "grants": ["register", "forgot_password", "reset_password"],
            },
        },
        "entityScopeMap": {
            "post": [
                {"scope": "self", "key": "createdBy"},
                {"scope": "org", "key": "orgId"},
                {"scope": "group", "key": "groupId"},
            ],
            "post_draft": [
                {"scope": "self", "key": "createdBy"},
                {"scope": "org", "key": "orgId"},
            ],
            "user": [{"scope": "self", "key": "id"}],
        },
        "superAdminRole": "admin",
    }


@pytest.fixture
def config_data() -> dict[str, Any]:
    """Fresh copy of the blog model mapping (safe to mutate)."""
    return build_config_data()


@pytest.fixture
def rbac_config(config_data) -> RBACConfig:
    """Blog model as an RBACConfig."""
    return RBACConfig.from_mapping(config_data)


@pytest.fixture
def mock_logger():
    """Mock logger for testing."""
    logger = Mock()
    logger.debug = Mock()
    logger.info = Mock()
    logger.warning = Mock()
    logger.error = Mock()
    return logger


@pytest.fixture
def mock_cache():
    """Mock cache that always misses."""
    cache = AsyncMock()
    cache.get = AsyncMock(return_value=None)
    cache.set = AsyncMock(return_value=None)
    return cache


@pytest.fixture
def mock_persistence():
    """Mock persistence backend with no edges."""
    persistence = AsyncMock()
    persistence.get_role_policies = AsyncMock(return_value=[])
    persistence.get_role_scoped_policies = AsyncMock(return_value=[])
    persistence.get_role_grants = AsyncMock(return_value=[])
    persistence.get_actor_roles = AsyncMock(return_value=[])
    return persistence


@pytest.fixture
def cache_keys() -> CacheKeys:
    return CacheKeys(prefix="rbac")


@pytest.fixture
def memory_cache() -> MemoryCacheAdapter:
    return MemoryCacheAdapter()


@pytest.fixture
def memory_persistence() -> MemoryPersistenceAdapter:
    return MemoryPersistenceAdapter()


@pytest_asyncio.fixture
async def engine(rbac_config, memory_persistence, memory_cache, cache_keys, mock_logger):
    """Synchronized engine over fresh in-memory backends."""
    engine = DecisionEngine(
        config=rbac_config,
        persistence=memory_persistence,
        cache=memory_cache,
        cache_keys=cache_keys,
        logger=mock_logger,
    )
    await RBACSynchronizer(
        rbac_config, memory_persistence, engine, mock_logger
    ).initialize()
    return engine
