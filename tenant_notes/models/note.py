"""
models/note.py
--------------
Note ORM model.

tenant_id is denormalised here (it equals author.tenant_id) so tenant-scoped
queries and the cross-tenant check need no JOIN. It is written once at
creation from the authenticated principal and never updated.
"""

import uuid

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tenant_notes.db.base import Base, TimestampMixin


class Note(Base, TimestampMixin):
    __tablename__ = "notes"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    author_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tenant_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("tenants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    author: Mapped["User"] = relationship("User", back_populates="notes")  # noqa: F821
    tenant: Mapped["Tenant"] = relationship("Tenant", back_populates="notes")  # noqa: F821

    def __repr__(self) -> str:
        return f"<Note id={self.id} author_id={self.author_id} tenant_id={self.tenant_id}>"
