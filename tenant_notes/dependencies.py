"""
dependencies.py
---------------
FastAPI dependency injection functions for authentication and authorisation.

Flow:
  1. HTTPBearer extracts the token from an "Authorization: Bearer ..." header.
  2. decode_principal validates the JWT and builds a Principal from its
     claims (no DB round-trip).
  3. get_current_principal binds the identity into the logging context and
     hands the Principal to the route.
  4. get_current_admin layers a role check on top of get_current_principal.

The tenant_id carried by the Principal scopes every DB query, preventing
cross-tenant data access whatever the caller's role.
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from pydantic import ValidationError

from tenant_notes.core.exceptions import Forbidden, Unauthenticated
from tenant_notes.core.logging import bind_request_identity, get_logger
from tenant_notes.core.security import decode_access_token
from tenant_notes.models.tenant import Plan
from tenant_notes.schemas.auth import Principal

logger = get_logger(__name__)

# auto_error=False so a missing or non-Bearer header raises our own
# Unauthenticated (401) instead of FastAPI's default 403.
bearer_scheme = HTTPBearer(auto_error=False)

_REQUIRED_CLAIMS = ("sub", "tenant_id", "role")


def decode_principal(token: str) -> Principal:
    """
    Verify a bearer token and turn its claims into a Principal.

    Raises:
        Unauthenticated: bad signature, expired, or missing identity claims.
    """
    try:
        payload = decode_access_token(token)
    except JWTError as exc:
        raise Unauthenticated() from exc

    if any(not payload.get(claim) for claim in _REQUIRED_CLAIMS):
        raise Unauthenticated()

    try:
        return Principal(
            user_id=payload["sub"],
            tenant_id=payload["tenant_id"],
            tenant_slug=payload.get("tenant_slug"),
            role=payload["role"],
            plan=payload.get("plan") or Plan.free.value,
        )
    except ValidationError as exc:
        raise Unauthenticated() from exc


async def get_current_principal(
    credentials: Annotated[
        Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)
    ],
) -> Principal:
    """
    Decode the bearer token into a Principal.
    Raises 401 if the header is absent/malformed or the token is invalid.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()

    try:
        principal = decode_principal(credentials.credentials)
    except Unauthenticated:
        logger.warning("Bearer token rejected")
        raise

    bind_request_identity(
        user_id=principal.user_id,
        tenant_id=principal.tenant_id,
        role=principal.role.value,
    )
    return principal


async def get_current_admin(
    principal: Annotated[Principal, Depends(get_current_principal)],
) -> Principal:
    """
    Extends get_current_principal with an admin role check.
    Raises 403 if the authenticated user is not an admin.
    """
    if not principal.is_admin:
        raise Forbidden("Admin privileges required")
    return principal
