"""
models/user.py
--------------
User ORM model with role, plan and tenant binding.

Role design:
  - 'ADMIN':  Sees and edits every note in its tenant; manages plans.
  - 'MEMBER': Sees and edits only the notes it authored.

Role and plan are independent columns. Seed data pairs ADMIN with PRO and
MEMBER with FREE, but nothing couples them afterwards.

The hashed_password column stores bcrypt hashes only — plain text is
never stored and never logged.
"""

import uuid
from enum import Enum as PyEnum

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tenant_notes.db.base import Base, TimestampMixin
from tenant_notes.models.tenant import Plan


class UserRole(str, PyEnum):
    admin = "ADMIN"
    member = "MEMBER"


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    email: Mapped[str] = mapped_column(
        String(320), unique=True, nullable=False, index=True
    )
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=UserRole.member.value
    )
    plan: Mapped[str] = mapped_column(
        String(20), nullable=False, default=Plan.free.value
    )
    tenant_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="users")  # noqa: F821
    notes: Mapped[list["Note"]] = relationship(  # noqa: F821
        "Note", back_populates="author", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email} role={self.role} plan={self.plan}>"
