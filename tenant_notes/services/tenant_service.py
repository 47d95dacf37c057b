"""
services/tenant_service.py
--------------------------
Tenant lookups.

Service layer is responsible for:
  - Constructing queries
  - Enforcing business rules (tenant scoping, role checks)
  - Returning domain objects (ORM models) to the route layer
  - Never returning HTTP responses (that's the route's job)
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tenant_notes.core.exceptions import Forbidden, NotFound
from tenant_notes.models.tenant import Tenant
from tenant_notes.schemas.auth import Principal


class TenantService:

    @staticmethod
    async def get_tenant_by_slug(db: AsyncSession, slug: str) -> Tenant | None:
        result = await db.execute(select(Tenant).where(Tenant.slug == slug))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_tenant_with_users(db: AsyncSession, admin: Principal) -> Tenant:
        """
        Return the admin's own tenant with its users loaded.
        Other tenants are never visible, whatever the caller asks for.
        """
        if not admin.is_admin:
            raise Forbidden("Admin privileges required")

        result = await db.execute(
            select(Tenant)
            .options(selectinload(Tenant.users))
            .where(Tenant.id == admin.tenant_id)
        )
        tenant = result.scalar_one_or_none()
        if tenant is None:
            raise NotFound("Tenant")
        return tenant
