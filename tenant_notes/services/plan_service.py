"""
services/plan_service.py
------------------------
Plan transitions driven from the admin dashboard.

An upgrade (downgrade) sets the target user's plan AND the tenant's plan to
PRO (FREE). Both writes are committed as one transaction: if anything fails
between them the session is rolled back and neither change survives.

Only the caller's role is checked. The target may be any user of the
caller's tenant, admins included; role and plan stay independent.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.exceptions import Forbidden, NotFound
from tenant_notes.core.logging import get_logger
from tenant_notes.models.tenant import Plan, Tenant
from tenant_notes.models.user import User
from tenant_notes.schemas.auth import Principal
from tenant_notes.services.tenant_service import TenantService

logger = get_logger(__name__)


class PlanService:

    @staticmethod
    async def upgrade(
        db: AsyncSession, admin: Principal, tenant_slug: str, user_id: str
    ) -> tuple[User, Tenant]:
        return await PlanService.change_plan(db, admin, tenant_slug, user_id, Plan.pro)

    @staticmethod
    async def downgrade(
        db: AsyncSession, admin: Principal, tenant_slug: str, user_id: str
    ) -> tuple[User, Tenant]:
        return await PlanService.change_plan(db, admin, tenant_slug, user_id, Plan.free)

    @staticmethod
    async def change_plan(
        db: AsyncSession,
        admin: Principal,
        tenant_slug: str,
        user_id: str,
        plan: Plan,
    ) -> tuple[User, Tenant]:
        """
        Move a user and its tenant to `plan` atomically.

        Raises:
            Forbidden: caller is not an admin.
            NotFound: slug unknown or not the caller's tenant; user not in it.
        """
        if not admin.is_admin:
            raise Forbidden("Admin privileges required")

        tenant = await TenantService.get_tenant_by_slug(db, tenant_slug)
        if tenant is None or tenant.id != admin.tenant_id:
            raise NotFound("Tenant")

        result = await db.execute(
            select(User).where(User.id == user_id, User.tenant_id == tenant.id)
        )
        user = result.scalar_one_or_none()
        if user is None:
            raise NotFound("User")

        try:
            await PlanService._set_user_plan(db, user, plan)
            await PlanService._set_tenant_plan(db, tenant, plan)
            await db.commit()
        except Exception:
            await db.rollback()
            logger.error(
                "Plan change rolled back",
                target_user_id=user_id,
                tenant_id=admin.tenant_id,
                plan=plan.value,
                exc_info=True,
            )
            raise

        logger.info(
            "Plan changed",
            target_user_id=user.id,
            tenant_id=tenant.id,
            plan=plan.value,
        )
        return user, tenant

    @staticmethod
    async def _set_user_plan(db: AsyncSession, user: User, plan: Plan) -> None:
        user.plan = plan.value
        await db.flush()

    @staticmethod
    async def _set_tenant_plan(db: AsyncSession, tenant: Tenant, plan: Plan) -> None:
        tenant.plan = plan.value
        await db.flush()
