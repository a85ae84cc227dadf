"""Edge tables linking roles to permissions, grants and subjects.

Every edge table carries a unique constraint over its full composite key, so
a repeated insert can never create a duplicate edge.
"""

from sqlalchemy import Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from scoped_rbac.infrastructure.persistence.base import BaseModel


class RolePermissionModel(BaseModel):
    """Unscoped (role, permission, entity) edge."""

    __tablename__ = "rbac_role_permissions"

    role: Mapped[str] = mapped_column(String(255), nullable=False)
    permission: Mapped[str] = mapped_column(String(255), nullable=False)
    entity: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint("role", "permission", "entity", name="uq_role_permission"),
        Index("idx_role_permissions_role", "role"),
    )


class ScopedRolePermissionModel(BaseModel):
    """Scoped (role, permission, entity, scope) edge."""

    __tablename__ = "rbac_scoped_role_permissions"

    role: Mapped[str] = mapped_column(String(255), nullable=False)
    permission: Mapped[str] = mapped_column(String(255), nullable=False)
    entity: Mapped[str] = mapped_column(String(255), nullable=False)
    scope: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "role", "permission", "entity", "scope", name="uq_scoped_role_permission"
        ),
        Index("idx_scoped_role_permissions_role", "role"),
    )


class RoleGrantModel(BaseModel):
    """(role, grant) edge."""

    __tablename__ = "rbac_role_grants"

    role: Mapped[str] = mapped_column(String(255), nullable=False)
    grant: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint("role", "grant", name="uq_role_grant"),
        Index("idx_role_grants_role", "role"),
    )


class SubjectRoleModel(BaseModel):
    """(subject, role) edge.

    Subjects are stored as strings; integer subject ids are stringified.
    """

    __tablename__ = "rbac_subject_roles"

    subject: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint("subject", "role", name="uq_subject_role"),
        Index("idx_subject_roles_subject", "subject"),
    )
