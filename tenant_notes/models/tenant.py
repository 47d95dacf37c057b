"""
models/tenant.py
----------------
Tenant (organisation) ORM model.

Each tenant is an isolated organisational unit. All data belonging to a tenant
is scoped by tenant_id at the query level — never trust application-level
filtering alone; always include tenant_id in WHERE clauses.

The tenant carries its own subscription plan, which only the plan transition
service changes (always together with one of its users' plans).
"""

import uuid
from enum import Enum as PyEnum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tenant_notes.db.base import Base, TimestampMixin


class Plan(str, PyEnum):
    free = "FREE"
    pro = "PRO"


class Tenant(Base, TimestampMixin):
    __tablename__ = "tenants"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    plan: Mapped[str] = mapped_column(
        String(20), nullable=False, default=Plan.free.value
    )

    # Relationships
    users: Mapped[list["User"]] = relationship(  # noqa: F821
        "User", back_populates="tenant", cascade="all, delete-orphan",
        order_by="User.created_at",
    )
    notes: Mapped[list["Note"]] = relationship(  # noqa: F821
        "Note", back_populates="tenant", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Tenant id={self.id} slug={self.slug} plan={self.plan}>"
