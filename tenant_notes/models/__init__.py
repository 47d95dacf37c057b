"""
models/__init__.py
------------------
Re-export all models so table creation (seed.py, tests) can import Base and
discover every table via a single import:

    from tenant_notes.models import Base
"""

from tenant_notes.db.base import Base
from tenant_notes.models.tenant import Plan, Tenant
from tenant_notes.models.user import User, UserRole
from tenant_notes.models.note import Note

__all__ = ["Base", "Plan", "Tenant", "User", "UserRole", "Note"]
