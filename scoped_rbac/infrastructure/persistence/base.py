"""Base model for all authorization tables.

Provides:
- BaseModel: Base class for ALL models (provides id, created_at)

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain value objects are mapped to/from these models by the adapter

Authorization rows are immutable: they are inserted once and never updated,
so there is no updated_at column.
"""

from datetime import datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides common fields that ALL models need:
    - id: UUIDv7 primary key (time-ordered, so it also orders inserts)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,  # SQLAlchemy's generic UUID type
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),  # Database sets this on INSERT
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<{self.__class__.__name__}(id={self.id})>"
