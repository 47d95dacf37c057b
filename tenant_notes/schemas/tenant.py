"""
schemas/tenant.py
-----------------
Pydantic response models for Tenant and the plan transition result.

Naming convention:
  TenantRead           → outbound tenant projection
  TenantWithUsersRead  → admin dashboard listing
  PlanChangeResponse   → body of the upgrade / downgrade endpoints
"""

from pydantic import BaseModel

from tenant_notes.models.tenant import Plan
from tenant_notes.schemas.user import UserRead


class TenantRead(BaseModel):
    id: str
    name: str
    slug: str
    plan: Plan

    model_config = {"from_attributes": True}


class TenantWithUsersRead(TenantRead):
    users: list[UserRead]


class PlanChangeResponse(BaseModel):
    user: UserRead
    tenant: TenantRead
