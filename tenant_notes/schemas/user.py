"""
schemas/user.py
---------------
Pydantic projections of User.

Security note:
  - hashed_password is NEVER included in any response schema.
"""

from pydantic import BaseModel

from tenant_notes.models.tenant import Plan
from tenant_notes.models.user import UserRole


class UserRead(BaseModel):
    id: str
    email: str
    role: UserRole
    plan: Plan

    model_config = {"from_attributes": True}


class AuthorRead(BaseModel):
    """Author summary embedded in every note."""
    id: str
    email: str
    role: UserRole
    plan: Plan

    model_config = {"from_attributes": True}
