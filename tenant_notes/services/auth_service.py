"""
services/auth_service.py
------------------------
Credential verification and token issuance.

Unknown email and wrong password fail identically (same exception, same
message, comparable latency) so the login endpoint does not reveal which
emails are registered.
"""

from datetime import timedelta

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tenant_notes.core.config import settings
from tenant_notes.core.exceptions import InvalidCredentials
from tenant_notes.core.logging import get_logger
from tenant_notes.core.security import (
    create_access_token,
    dummy_verify_password,
    verify_password,
)
from tenant_notes.models.user import User
from tenant_notes.schemas.auth import LoginResponse

logger = get_logger(__name__)


class AuthService:

    @staticmethod
    async def authenticate(db: AsyncSession, email: str, password: str) -> User:
        """
        Verify credentials and return the User (with its tenant loaded).
        Email lookup is an exact match against the stored value.

        Raises:
            InvalidCredentials: unknown email or wrong password.
        """
        result = await db.execute(
            select(User).options(selectinload(User.tenant)).where(User.email == email)
        )
        user = result.scalar_one_or_none()
        if user is None:
            dummy_verify_password()
            logger.info("Login failed")
            raise InvalidCredentials()
        if not verify_password(password, user.hashed_password):
            logger.info("Login failed", user_id=user.id)
            raise InvalidCredentials()
        return user

    @staticmethod
    async def login(db: AsyncSession, email: str, password: str) -> LoginResponse:
        """
        Exchange credentials for a signed session token.

        The token embeds the user's id, tenant id and slug, role and the
        user's own plan, valid for ACCESS_TOKEN_EXPIRE_MINUTES.
        """
        user = await AuthService.authenticate(db, email, password)

        expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        token = create_access_token(
            subject=user.id,
            tenant_id=user.tenant_id,
            role=user.role,
            plan=user.plan,
            tenant_slug=user.tenant.slug,
            expires_delta=expires,
        )
        logger.info("User logged in", user_id=user.id, tenant_id=user.tenant_id)

        return LoginResponse(
            token=token,
            expires_in=int(expires.total_seconds()),
            role=user.role,
            tenant=user.tenant.slug,
            plan=user.plan,
        )
