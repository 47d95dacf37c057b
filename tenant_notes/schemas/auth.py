"""
schemas/auth.py
---------------
Login request/response bodies and the authenticated Principal.

The Principal is what every protected endpoint works with: an immutable
view of the token claims, passed explicitly into the service layer.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from tenant_notes.models.tenant import Plan
from tenant_notes.models.user import UserRole


class LoginRequest(BaseModel):
    # Matched exactly as stored; no normalisation.
    email: str = Field(..., min_length=3, max_length=320, examples=["admin@acme.test"])
    password: str = Field(..., min_length=1, max_length=128)


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
    role: UserRole
    tenant: str  # tenant slug
    plan: Plan


class Principal(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: str
    tenant_id: str
    role: UserRole
    plan: Plan
    tenant_slug: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.admin
