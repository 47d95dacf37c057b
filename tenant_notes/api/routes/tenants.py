"""
api/routes/tenants.py
---------------------
Admin dashboard endpoints.

GET  /api/tenants                          — The admin's tenant with its users.
POST /api/tenants/{slug}/upgrade/{user_id}   — User + tenant → PRO.
POST /api/tenants/{slug}/downgrade/{user_id} — User + tenant → FREE.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.db.session import get_db
from tenant_notes.dependencies import get_current_admin
from tenant_notes.models.tenant import Tenant
from tenant_notes.models.user import User
from tenant_notes.schemas.auth import Principal
from tenant_notes.schemas.tenant import (
    PlanChangeResponse,
    TenantRead,
    TenantWithUsersRead,
)
from tenant_notes.schemas.user import UserRead
from tenant_notes.services.plan_service import PlanService
from tenant_notes.services.tenant_service import TenantService

router = APIRouter(prefix="/api/tenants", tags=["Tenants"])


def _plan_change_response(user: User, tenant: Tenant) -> PlanChangeResponse:
    return PlanChangeResponse(
        user=UserRead.model_validate(user),
        tenant=TenantRead.model_validate(tenant),
    )


@router.get(
    "",
    response_model=list[TenantWithUsersRead],
    summary="List the admin's tenant and its users (admin only)",
)
async def list_tenants(
    db: Annotated[AsyncSession, Depends(get_db)],
    admin: Annotated[Principal, Depends(get_current_admin)],
) -> list[TenantWithUsersRead]:
    """
    Admin-only.
    Returned as a one-element list: an admin only ever sees its own tenant.
    """
    tenant = await TenantService.get_tenant_with_users(db, admin)
    return [TenantWithUsersRead.model_validate(tenant)]


@router.post(
    "/{slug}/upgrade/{user_id}",
    response_model=PlanChangeResponse,
    summary="Upgrade a user and its tenant to PRO (admin only)",
)
async def upgrade(
    slug: str,
    user_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    admin: Annotated[Principal, Depends(get_current_admin)],
) -> PlanChangeResponse:
    user, tenant = await PlanService.upgrade(db, admin, slug, user_id)
    return _plan_change_response(user, tenant)


@router.post(
    "/{slug}/downgrade/{user_id}",
    response_model=PlanChangeResponse,
    summary="Downgrade a user and its tenant to FREE (admin only)",
)
async def downgrade(
    slug: str,
    user_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    admin: Annotated[Principal, Depends(get_current_admin)],
) -> PlanChangeResponse:
    user, tenant = await PlanService.downgrade(db, admin, slug, user_id)
    return _plan_change_response(user, tenant)
