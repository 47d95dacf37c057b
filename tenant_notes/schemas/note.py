"""
schemas/note.py
---------------
Pydantic models for note CRUD.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from tenant_notes.models.tenant import Plan
from tenant_notes.models.user import UserRole
from tenant_notes.schemas.user import AuthorRead


class NoteWrite(BaseModel):
    """Body of both POST /api/notes and PUT /api/notes/{id}."""
    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        examples=["Quarterly planning"],
    )
    content: str = Field(default="", max_length=20000)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v


class NoteRead(BaseModel):
    id: str
    title: str
    content: str
    tenant_id: str
    author_id: str
    author: AuthorRead
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class Me(BaseModel):
    id: str
    role: UserRole


class NoteListResponse(BaseModel):
    notes: list[NoteRead]
    plan: Plan
    me: Me


class DeleteResponse(BaseModel):
    success: bool = True
