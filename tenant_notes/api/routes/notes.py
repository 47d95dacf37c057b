"""
api/routes/notes.py
-------------------
Note CRUD endpoints, scoped to the caller's tenant.

GET    /api/notes       — Notes visible to the caller (newest first)
POST   /api/notes       — Create a note (FREE members: max 3)
PUT    /api/notes/{id}  — Edit title/content (author or tenant admin)
DELETE /api/notes/{id}  — Delete (author or tenant admin)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.db.session import get_db
from tenant_notes.dependencies import get_current_principal
from tenant_notes.schemas.auth import Principal
from tenant_notes.schemas.note import (
    DeleteResponse,
    Me,
    NoteListResponse,
    NoteRead,
    NoteWrite,
)
from tenant_notes.services.note_service import NoteService

router = APIRouter(prefix="/api/notes", tags=["Notes"])


@router.get(
    "",
    response_model=NoteListResponse,
    summary="List notes visible to the current user",
)
async def list_notes(
    db: Annotated[AsyncSession, Depends(get_db)],
    principal: Annotated[Principal, Depends(get_current_principal)],
) -> NoteListResponse:
    """
    Admins get every note in their tenant; members get their own.
    `plan` is the plan recorded in the caller's token.
    """
    notes = await NoteService.list_notes(db, principal)
    return NoteListResponse(
        notes=[NoteRead.model_validate(n) for n in notes],
        plan=principal.plan,
        me=Me(id=principal.user_id, role=principal.role),
    )


@router.post(
    "",
    response_model=NoteRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a note",
)
async def create_note(
    body: NoteWrite,
    db: Annotated[AsyncSession, Depends(get_db)],
    principal: Annotated[Principal, Depends(get_current_principal)],
) -> NoteRead:
    """Returns 403 once a FREE-plan member already owns the maximum number of notes."""
    note = await NoteService.create_note(db, principal, body.title, body.content)
    return NoteRead.model_validate(note)


@router.put(
    "/{note_id}",
    response_model=NoteRead,
    summary="Update a note",
)
async def update_note(
    note_id: str,
    body: NoteWrite,
    db: Annotated[AsyncSession, Depends(get_db)],
    principal: Annotated[Principal, Depends(get_current_principal)],
) -> NoteRead:
    note = await NoteService.update_note(db, principal, note_id, body.title, body.content)
    return NoteRead.model_validate(note)


@router.delete(
    "/{note_id}",
    response_model=DeleteResponse,
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    principal: Annotated[Principal, Depends(get_current_principal)],
) -> DeleteResponse:
    await NoteService.delete_note(db, principal, note_id)
    return DeleteResponse()
