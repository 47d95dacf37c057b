"""
Shared pytest fixtures.

Fixture hierarchy (all function-scoped):
    database       creates every table in a throwaway SQLite file, drops them after
    └── db_session     AsyncSession on that database
        └── seeded         "acme" and "globex", each with an ADMIN (PRO) and MEMBER (FREE)
            └── client         httpx AsyncClient wired to the FastAPI app
"""

import os
import tempfile
from typing import AsyncGenerator

# Settings are read at import time, so the environment must be in place
# before anything from tenant_notes is imported.
_TEST_DIR = tempfile.mkdtemp(prefix="tenant_notes_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/test.db"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["BCRYPT_ROUNDS"] = "4"  # Minimum bcrypt cost keeps hashing fast
os.environ["APP_ENV"] = "test"
os.environ["DEBUG"] = "false"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from seed import DEMO_PASSWORD, seed_tenant  # noqa: E402
from tenant_notes.core.security import hash_password  # noqa: E402
from tenant_notes.db.session import AsyncSessionLocal, engine  # noqa: E402
from tenant_notes.models import Base, Plan, Tenant, User, UserRole  # noqa: E402
from tenant_notes.schemas.auth import Principal  # noqa: E402


def principal_for(user: User, tenant: Tenant) -> Principal:
    """Build the Principal a fresh login by `user` would produce."""
    return Principal(
        user_id=user.id,
        tenant_id=user.tenant_id,
        tenant_slug=tenant.slug,
        role=user.role,
        plan=user.plan,
    )


async def fetch(model, ident):
    """Read a row through a brand-new session, bypassing any identity map."""
    async with AsyncSessionLocal() as session:
        return await session.get(model, ident)


async def login_headers(client: AsyncClient, email: str) -> dict:
    response = await client.post(
        "/api/auth/login", json={"email": email, "password": DEMO_PASSWORD}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[None, None]:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # Pooled aiosqlite connections are bound to this test's event loop.
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(database) -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session


@pytest_asyncio.fixture
async def seeded(db_session: AsyncSession) -> dict:
    """
    Two tenants shaped like the demo data:

        seeded["acme"]["tenant" | "admin" | "member"]
        seeded["globex"]["tenant" | "admin" | "member"]
    """
    data = {}
    for name, slug in (("Acme", "acme"), ("Globex", "globex")):
        tenant = await seed_tenant(db_session, name, slug)
        admin, member = tenant.users
        data[slug] = {"tenant": tenant, "admin": admin, "member": member}
    await db_session.commit()
    return data


@pytest_asyncio.fixture
async def second_member(db_session: AsyncSession, seeded: dict) -> User:
    """Another FREE member of acme."""
    user = User(
        email="user2@acme.test",
        hashed_password=hash_password(DEMO_PASSWORD),
        role=UserRole.member.value,
        plan=Plan.free.value,
        tenant_id=seeded["acme"]["tenant"].id,
    )
    db_session.add(user)
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def client(seeded) -> AsyncGenerator[AsyncClient, None]:
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def acme_admin(seeded) -> Principal:
    return principal_for(seeded["acme"]["admin"], seeded["acme"]["tenant"])


@pytest.fixture
def acme_member(seeded) -> Principal:
    return principal_for(seeded["acme"]["member"], seeded["acme"]["tenant"])


@pytest.fixture
def globex_admin(seeded) -> Principal:
    return principal_for(seeded["globex"]["admin"], seeded["globex"]["tenant"])


@pytest.fixture
def globex_member(seeded) -> Principal:
    return principal_for(seeded["globex"]["member"], seeded["globex"]["tenant"])
