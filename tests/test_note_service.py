"""
NoteService unit tests against a real (SQLite) session.

What we test:
    - Visibility: admins see their tenant, members see their own notes
    - FREE member quota, and who is exempt from it
    - Ownership and tenant checks on update / delete
"""

import pytest

from conftest import fetch, principal_for
from tenant_notes.core.exceptions import Forbidden, NotFound, QuotaExceeded
from tenant_notes.models import Note
from tenant_notes.services.note_service import NoteService
from tenant_notes.services.plan_service import PlanService


async def _create(db, principal, *titles):
    return [await NoteService.create_note(db, principal, t, f"{t} body") for t in titles]


class TestListNotes:

    @pytest.mark.asyncio
    async def test_member_sees_only_own_notes(
        self, db_session, acme_admin, acme_member
    ):
        await _create(db_session, acme_admin, "admin note")
        await _create(db_session, acme_member, "mine")

        notes = await NoteService.list_notes(db_session, acme_member)

        assert [n.title for n in notes] == ["mine"]

    @pytest.mark.asyncio
    async def test_admin_sees_whole_tenant_newest_first(
        self, db_session, acme_admin, acme_member, globex_member
    ):
        await _create(db_session, acme_member, "first")
        await _create(db_session, acme_admin, "second")
        await _create(db_session, globex_member, "elsewhere")

        notes = await NoteService.list_notes(db_session, acme_admin)

        assert [n.title for n in notes] == ["second", "first"]
        assert notes[0].author.email == "admin@acme.test"


class TestCreateNote:

    @pytest.mark.asyncio
    async def test_created_under_principal_tenant_and_author(
        self, db_session, acme_member
    ):
        (note,) = await _create(db_session, acme_member, "a")

        assert note.tenant_id == acme_member.tenant_id
        assert note.author_id == acme_member.user_id
        assert note.author.email == "user@acme.test"

    @pytest.mark.asyncio
    async def test_free_member_limited_to_three(self, db_session, acme_member):
        await _create(db_session, acme_member, "a", "b", "c")

        with pytest.raises(QuotaExceeded) as exc_info:
            await NoteService.create_note(db_session, acme_member, "d", "")

        assert exc_info.value.limit == 3
        assert await NoteService.count_authored(
            db_session, acme_member.tenant_id, acme_member.user_id
        ) == 3

    @pytest.mark.asyncio
    async def test_admin_never_limited(self, db_session, acme_admin):
        notes = await _create(db_session, acme_admin, "a", "b", "c", "d", "e")
        assert len(notes) == 5

    @pytest.mark.asyncio
    async def test_pro_member_never_limited(self, db_session, seeded):
        member = seeded["acme"]["member"]
        member.plan = "PRO"
        await db_session.commit()
        principal = principal_for(member, seeded["acme"]["tenant"])

        notes = await _create(db_session, principal, "a", "b", "c", "d")
        assert len(notes) == 4

    @pytest.mark.asyncio
    async def test_quota_uses_current_plan_not_token_plan(
        self, db_session, acme_admin, acme_member
    ):
        await _create(db_session, acme_member, "a", "b", "c")
        await PlanService.upgrade(
            db_session, acme_admin, "acme", acme_member.user_id
        )

        # acme_member still says FREE, as a token issued before the upgrade would
        (note,) = await _create(db_session, acme_member, "d")
        assert note.title == "d"

    @pytest.mark.asyncio
    async def test_quota_counted_per_author(
        self, db_session, acme_member, second_member, seeded
    ):
        await _create(db_session, acme_member, "a", "b", "c")
        other = principal_for(second_member, seeded["acme"]["tenant"])

        (note,) = await _create(db_session, other, "x")
        assert note.author_id == second_member.id


class TestUpdateDeleteNote:

    @pytest.mark.asyncio
    async def test_author_can_update(self, db_session, acme_member):
        (note,) = await _create(db_session, acme_member, "draft")

        updated = await NoteService.update_note(
            db_session, acme_member, note.id, "final", "done"
        )

        assert updated.title == "final"
        assert updated.content == "done"
        assert updated.tenant_id == acme_member.tenant_id

    @pytest.mark.asyncio
    async def test_member_cannot_touch_colleague_note(
        self, db_session, acme_member, second_member, seeded
    ):
        (note,) = await _create(db_session, acme_member, "private")
        colleague = principal_for(second_member, seeded["acme"]["tenant"])

        with pytest.raises(Forbidden):
            await NoteService.update_note(db_session, colleague, note.id, "x", "y")
        with pytest.raises(Forbidden):
            await NoteService.delete_note(db_session, colleague, note.id)

    @pytest.mark.asyncio
    async def test_admin_can_update_and_delete_member_note(
        self, db_session, acme_admin, acme_member
    ):
        (note,) = await _create(db_session, acme_member, "draft")

        updated = await NoteService.update_note(
            db_session, acme_admin, note.id, "edited by admin", ""
        )
        assert updated.author_id == acme_member.user_id

        await NoteService.delete_note(db_session, acme_admin, note.id)
        await db_session.commit()
        assert await fetch(Note, note.id) is None

    @pytest.mark.asyncio
    async def test_other_tenant_note_looks_missing(
        self, db_session, acme_member, globex_admin, globex_member
    ):
        (note,) = await _create(db_session, acme_member, "acme only")

        for principal in (globex_admin, globex_member):
            with pytest.raises(NotFound) as cross_tenant:
                await NoteService.update_note(db_session, principal, note.id, "x", "")
            with pytest.raises(NotFound):
                await NoteService.delete_note(db_session, principal, note.id)
            assert cross_tenant.value.message == "Note not found"

        with pytest.raises(NotFound) as missing:
            await NoteService.delete_note(db_session, acme_member, "no-such-id")
        assert missing.value.message == "Note not found"
