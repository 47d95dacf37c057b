"""
main.py
-------
FastAPI application factory and entry point.

Application lifecycle:
  1. App is created by create_application().
  2. lifespan context manager runs on startup / shutdown.
  3. Routers are registered with their URL prefixes.
  4. Exception handlers map domain errors to status codes and hide
     unexpected ones behind a generic 500.

Run with:
    uvicorn main:app --reload              # development
    uvicorn main:app --workers 4           # production (no --reload)
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tenant_notes.api.routes import auth, notes, tenants
from tenant_notes.core.config import settings
from tenant_notes.core.exceptions import TenantNotesError
from tenant_notes.core.logging import clear_request_identity, configure_logging, get_logger
from tenant_notes.db.session import engine

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Startup / shutdown lifecycle hook.

    Startup:
      - Configure structured logging
      - Warn when the development signing key is in use

    Shutdown:
      - Dispose the async engine (graceful connection pool drain)
    """
    configure_logging()
    logger.info(
        "Starting up",
        app=settings.APP_NAME,
        env=settings.APP_ENV,
        debug=settings.DEBUG,
    )
    if settings.uses_default_secret and settings.APP_ENV != "development":
        logger.warning("SECRET_KEY is the built-in default; set it in the environment")
    yield
    logger.info("Shutting down, disposing DB engine")
    await engine.dispose()


def create_application() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description=(
            "Multi-tenant notes backend with JWT auth, admin/member roles, "
            "FREE/PRO plans and full tenant data isolation."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── CORS ─────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def reset_log_context(request: Request, call_next):
        clear_request_identity()
        return await call_next(request)

    # ── Routers ───────────────────────────────────────────────────────────────
    app.include_router(auth.router)
    app.include_router(notes.router)
    app.include_router(tenants.router)

    # ── Exception Handlers ────────────────────────────────────────────────────

    @app.exception_handler(TenantNotesError)
    async def domain_exception_handler(
        request: Request, exc: TenantNotesError
    ) -> JSONResponse:
        logger.warning(
            "Request rejected",
            path=request.url.path,
            method=request.method,
            error=type(exc).__name__,
            status_code=exc.status_code,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    # ── Health Check ──────────────────────────────────────────────────────────

    @app.get("/health", tags=["Health"], summary="Service health check")
    async def health() -> dict:
        return {"status": "ok", "app": settings.APP_NAME, "env": settings.APP_ENV}

    return app


app = create_application()
