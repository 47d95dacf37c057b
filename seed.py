"""
seed.py
-------
Create all database tables and seed the demo tenants.

Seeds two tenants, "acme" and "globex", each with an ADMIN on the PRO plan
and a MEMBER on the FREE plan. Every account's password is "password".
Tenants whose slug already exists are left untouched, so the script can be
re-run safely. For production schema changes use migrations instead.

Usage:
    python seed.py
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.core.logging import configure_logging, get_logger
from tenant_notes.core.security import hash_password
from tenant_notes.db.session import AsyncSessionLocal, engine
from tenant_notes.models import Base, Plan, Tenant, User, UserRole
from tenant_notes.services.tenant_service import TenantService

logger = get_logger(__name__)

DEMO_PASSWORD = "password"

SEED_TENANTS = [
    {"name": "Acme", "slug": "acme"},
    {"name": "Globex", "slug": "globex"},
]


async def seed_tenant(db: AsyncSession, name: str, slug: str) -> Tenant | None:
    """Insert one demo tenant with its admin and member; None if it exists."""
    if await TenantService.get_tenant_by_slug(db, slug) is not None:
        logger.info("Tenant already seeded", slug=slug)
        return None

    password_hash = hash_password(DEMO_PASSWORD)
    tenant = Tenant(name=name, slug=slug, plan=Plan.free.value)
    tenant.users = [
        User(
            email=f"admin@{slug}.test",
            hashed_password=password_hash,
            role=UserRole.admin.value,
            plan=Plan.pro.value,
        ),
        User(
            email=f"user@{slug}.test",
            hashed_password=password_hash,
            role=UserRole.member.value,
            plan=Plan.free.value,
        ),
    ]
    db.add(tenant)
    await db.flush()
    logger.info("Tenant seeded", slug=slug, tenant_id=tenant.id)
    return tenant


async def create_all_tables() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed() -> None:
    await create_all_tables()
    async with AsyncSessionLocal() as db:
        for entry in SEED_TENANTS:
            await seed_tenant(db, entry["name"], entry["slug"])
        await db.commit()
    await engine.dispose()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(seed())
