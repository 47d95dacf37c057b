"""
core/exceptions.py
------------------
Domain exception hierarchy.

Services raise these; the handler registered in main.py turns each one into
a JSON response with its status code. Routes never build error responses
themselves.

    TenantNotesError (base, 500)
    ├── InvalidCredentials   → 401
    ├── Unauthenticated      → 401 (+ WWW-Authenticate: Bearer)
    ├── Forbidden            → 403
    ├── QuotaExceeded        → 403
    └── NotFound             → 404

Cross-tenant lookups raise NotFound with the same message as a genuinely
missing row, so callers cannot probe for ids that exist in other tenants.
"""

from typing import Dict, Optional

from fastapi import status


class TenantNotesError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None


class InvalidCredentials(TenantNotesError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class Unauthenticated(TenantNotesError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Could not validate credentials"

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"WWW-Authenticate": "Bearer"}


class Forbidden(TenantNotesError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class QuotaExceeded(TenantNotesError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"FREE plan allows only {limit} notes")


class NotFound(TenantNotesError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str = "Resource") -> None:
        self.resource = resource
        super().__init__(f"{resource} not found")
