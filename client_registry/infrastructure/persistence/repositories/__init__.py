"""Concrete SQLAlchemy repository implementations.

Exports the SqlRepository classes and the get_client_repository() factory
for wiring at the application boundary.
"""

from __future__ import annotations

from client_registry.domain.models.search import FinderConfig
from client_registry.infrastructure.database import (
    Settings,
    create_engine,
    create_session_factory,
    get_settings,
)

from .base import SqlRepository, Validator
from .clients import SqlClientRepository


def get_client_repository(settings: Settings | None = None) -> SqlClientRepository:
    """Construct a SqlClientRepository bound to the configured database.

    Raises StoreConnectionError when DATABASE_URL is not configured.  The
    engine's connection pool is shared by every call the repository makes;
    each call still opens and releases its own session.
    """
    settings = settings or get_settings()
    session_factory = create_session_factory(create_engine(settings))
    return SqlClientRepository(
        session_factory,
        FinderConfig(page_size=settings.page_size, order_by="username"),
    )


__all__ = [
    "SqlRepository",
    "SqlClientRepository",
    "Validator",
    "get_client_repository",
]
