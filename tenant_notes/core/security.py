"""
core/security.py
----------------
Password hashing and JWT token utilities.

Design decisions:
  - bcrypt with a configurable work factor (12 in production; the test
    suite lowers it through BCRYPT_ROUNDS).
  - The JWT carries sub (user_id), tenant_id, tenant_slug, role and plan so
    request authorisation needs no database round-trip. Claims are trusted
    as issued: a role or plan change becomes visible to the token holder only
    after the token expires and they log in again.
  - Tokens are signed with HS256 and expire after a fixed window; there is
    no revocation list.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt
from passlib.context import CryptContext

from tenant_notes.core.config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS
)


# ── Password Utilities ────────────────────────────────────────────────────────

def hash_password(plain: str) -> str:
    """Return a bcrypt hash of the plain-text password."""
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time comparison of plain password against stored hash."""
    return pwd_context.verify(plain, hashed)


def dummy_verify_password() -> None:
    """Spend one hash verification's worth of time when no user matched."""
    pwd_context.dummy_verify()


# ── JWT Utilities ─────────────────────────────────────────────────────────────

def create_access_token(
    subject: str,
    tenant_id: str,
    role: str,
    plan: str,
    tenant_slug: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Mint a JWT access token.

    Args:
        subject: User UUID (stored in 'sub' claim).
        tenant_id: Tenant UUID — embedded so every query can be scoped without DB.
        role: 'ADMIN' | 'MEMBER'
        plan: 'FREE' | 'PRO' — the user's own plan at login time.
        tenant_slug: Human-readable tenant key, echoed back to clients.
        expires_delta: Optional custom expiry; defaults to settings value.

    Returns:
        Signed JWT string.
    """
    now = datetime.now(timezone.utc)
    expire = now + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    payload: Dict[str, Any] = {
        "sub": subject,
        "tenant_id": tenant_id,
        "tenant_slug": tenant_slug,
        "role": role,
        "plan": plan,
        "exp": expire,
        "iat": now,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT access token.

    Raises:
        jose.JWTError: If the token is invalid, expired, or tampered with.

    Returns:
        Raw payload dict.
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])

