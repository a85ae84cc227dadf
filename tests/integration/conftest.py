"""Shared fixtures for integration tests.

Provides real adapters over test doubles of their backing services:
- SQLite database file (aiosqlite) per test
- fakeredis client per test
"""

import pytest_asyncio

from scoped_rbac.infrastructure.persistence import (
    Database,
    SQLAlchemyPersistenceAdapter,
)


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Fresh SQLite database with the authorization tables created."""
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'rbac.db'}")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


@pytest_asyncio.fixture
async def sqlalchemy_persistence(test_database):
    return SQLAlchemyPersistenceAdapter(test_database)


@pytest_asyncio.fixture
async def fakeredis_client():
    """fakeredis client (in-memory Redis emulation)."""
    import fakeredis.aioredis

    client = fakeredis.aioredis.FakeRedis(decode_responses=False)
    yield client
    await client.aclose()
