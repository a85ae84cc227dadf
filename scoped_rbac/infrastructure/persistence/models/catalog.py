"""Catalog tables: the registered identifiers of the authorization model.

Each table holds one unique ``name`` per row. Entities are stored in the
scopes table as scope namespaces.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from scoped_rbac.infrastructure.persistence.base import BaseModel


class RoleModel(BaseModel):
    """Registered role."""

    __tablename__ = "rbac_roles"

    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )


class PermissionModel(BaseModel):
    """Registered permission (action verb)."""

    __tablename__ = "rbac_permissions"

    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )


class ScopeModel(BaseModel):
    """Registered scope or entity scope namespace."""

    __tablename__ = "rbac_scopes"

    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )


class GrantModel(BaseModel):
    """Registered standalone grant."""

    __tablename__ = "rbac_grants"

    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
