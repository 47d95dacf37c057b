"""
services/note_service.py
------------------------
Business logic for note listing, creation, update and deletion.

Critical security invariant:
  Every query MUST be scoped by the principal's tenant_id, and a note from
  another tenant is reported exactly like a missing one. Members are further
  restricted to the notes they authored; admins see their whole tenant.

Quota:
  A MEMBER on the FREE plan may author at most FREE_PLAN_NOTE_LIMIT notes.
  The plan is re-read from the author's row rather than the token so an
  upgrade applies immediately, and that row is locked (SELECT ... FOR UPDATE)
  for the rest of the transaction so concurrent creates by the same author
  count and insert one at a time.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tenant_notes.core.config import settings
from tenant_notes.core.exceptions import Forbidden, NotFound, QuotaExceeded, Unauthenticated
from tenant_notes.core.logging import get_logger
from tenant_notes.models.note import Note
from tenant_notes.models.tenant import Plan
from tenant_notes.models.user import User, UserRole
from tenant_notes.schemas.auth import Principal

logger = get_logger(__name__)


class NoteService:

    @staticmethod
    async def list_notes(db: AsyncSession, principal: Principal) -> list[Note]:
        """All notes of the tenant for admins, own notes for members; newest first."""
        query = (
            select(Note)
            .options(selectinload(Note.author))
            .where(Note.tenant_id == principal.tenant_id)
        )
        if not principal.is_admin:
            query = query.where(Note.author_id == principal.user_id)

        result = await db.execute(query.order_by(Note.created_at.desc()))
        return list(result.scalars().all())

    @staticmethod
    async def count_authored(db: AsyncSession, tenant_id: str, author_id: str) -> int:
        result = await db.execute(
            select(func.count())
            .select_from(Note)
            .where(Note.tenant_id == tenant_id, Note.author_id == author_id)
        )
        return result.scalar_one()

    @staticmethod
    async def create_note(
        db: AsyncSession,
        principal: Principal,
        title: str,
        content: str,
    ) -> Note:
        """
        Create a note owned by the principal inside the principal's tenant.

        Raises:
            QuotaExceeded: FREE member already at the note limit.
            Unauthenticated: the token's user no longer exists in its tenant.
        """
        result = await db.execute(
            select(User)
            .where(User.id == principal.user_id, User.tenant_id == principal.tenant_id)
            .with_for_update()
        )
        author = result.scalar_one_or_none()
        if author is None:
            logger.warning("Token user missing from its tenant", user_id=principal.user_id)
            raise Unauthenticated()

        if principal.role == UserRole.member and author.plan == Plan.free.value:
            limit = settings.FREE_PLAN_NOTE_LIMIT
            count = await NoteService.count_authored(db, principal.tenant_id, author.id)
            if count >= limit:
                logger.info("Note quota reached", user_id=author.id, count=count)
                raise QuotaExceeded(limit)

        note = Note(
            title=title,
            content=content,
            author=author,
            tenant_id=principal.tenant_id,  # Sourced from authenticated session
        )
        db.add(note)
        await db.flush()

        logger.info("Note created", note_id=note.id, tenant_id=principal.tenant_id)
        return note

    @staticmethod
    async def get_writable_note(
        db: AsyncSession, principal: Principal, note_id: str
    ) -> Note:
        """
        Load a note the principal may modify.

        Raises:
            NotFound: no such note, or it belongs to another tenant.
            Forbidden: a member targeting a note authored by someone else.
        """
        result = await db.execute(
            select(Note).options(selectinload(Note.author)).where(Note.id == note_id)
        )
        note = result.scalar_one_or_none()
        if note is None or note.tenant_id != principal.tenant_id:
            raise NotFound("Note")
        if not principal.is_admin and note.author_id != principal.user_id:
            raise Forbidden("You can only modify your own notes")
        return note

    @staticmethod
    async def update_note(
        db: AsyncSession,
        principal: Principal,
        note_id: str,
        title: str,
        content: str,
    ) -> Note:
        note = await NoteService.get_writable_note(db, principal, note_id)
        note.title = title
        note.content = content
        await db.flush()

        logger.info("Note updated", note_id=note.id)
        return note

    @staticmethod
    async def delete_note(db: AsyncSession, principal: Principal, note_id: str) -> None:
        note = await NoteService.get_writable_note(db, principal, note_id)
        await db.delete(note)
        await db.flush()

        logger.info("Note deleted", note_id=note_id)
