"""Persistence adapters."""

from scoped_rbac.infrastructure.persistence.database import Database
from scoped_rbac.infrastructure.persistence.memory_adapter import (
    MemoryPersistenceAdapter,
)
from scoped_rbac.infrastructure.persistence.sqlalchemy_adapter import (
    SQLAlchemyPersistenceAdapter,
)

__all__ = [
    "Database",
    "MemoryPersistenceAdapter",
    "SQLAlchemyPersistenceAdapter",
]
