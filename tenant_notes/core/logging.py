"""
core/logging.py
---------------
Structured logging using structlog.
DEBUG=true  → human-readable console output
DEBUG=false → JSON, one event per line

Request-scoped identity (tenant_id, user_id, role) is bound through
structlog's contextvars once the bearer token has been decoded, so every
event logged while serving that request carries it without repeating it
at each call site.
"""

import logging
import sys

import structlog

from tenant_notes.core.config import settings


def configure_logging() -> None:
    log_level = logging.DEBUG if settings.DEBUG else logging.INFO

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    if not settings.DEBUG:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
        logging.getLogger("passlib").setLevel(logging.ERROR)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.DEBUG:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def bind_request_identity(user_id: str, tenant_id: str, role: str) -> None:
    """Attach the authenticated identity to all events of the current request."""
    structlog.contextvars.bind_contextvars(
        user_id=user_id, tenant_id=tenant_id, role=role
    )


def clear_request_identity() -> None:
    structlog.contextvars.clear_contextvars()


def get_logger(name: str = __name__):
    return structlog.get_logger(name)
