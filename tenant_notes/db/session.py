"""
db/session.py
-------------
Async SQLAlchemy engine and session factory.

Design decisions:
  - AsyncEngine with asyncpg driver for non-blocking I/O in production;
    aiosqlite for local runs and the test suite.
  - Server databases get a bounded pool:
      pool_size=10, max_overflow=20 → max 30 concurrent DB connections,
    with pool_pre_ping to survive DB restarts and idle timeouts.
    SQLite keeps the driver's default pool (it rejects sizing arguments).
  - expire_on_commit=False: avoids lazy-load errors after commit in async
    context (attributes are already loaded, no implicit SELECT needed).
    The plan transition service relies on this to return the committed
    rows without re-reading them.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tenant_notes.core.config import settings


def _engine_options(url: str) -> Dict[str, Any]:
    if url.startswith("sqlite"):
        return {}
    return {
        "pool_size": 10,
        "max_overflow": 20,
        "pool_pre_ping": True,
        "pool_recycle": 3600,  # Recycle connections every hour
    }


# ── Engine ────────────────────────────────────────────────────────────────────
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,  # Log SQL in development
    **_engine_options(settings.DATABASE_URL),
)

# ── Session Factory ───────────────────────────────────────────────────────────
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that yields a database session.
    The session is committed when the request finishes successfully,
    rolled back on exceptions, and always closed.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
