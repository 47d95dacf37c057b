"""
api/routes/auth.py
------------------
Authentication endpoints.

POST /api/auth/login — Exchange email + password (JSON body) for a JWT.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_notes.db.session import get_db
from tenant_notes.schemas.auth import LoginRequest, LoginResponse
from tenant_notes.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and receive a JWT access token",
)
async def login(
    body: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> LoginResponse:
    """
    Authenticate with email + password and receive a signed JWT valid for
    one hour. Send it back as `Authorization: Bearer <token>`.

    Unknown email and wrong password both return 401 with the same message.
    """
    return await AuthService.login(db, body.email, body.password)
