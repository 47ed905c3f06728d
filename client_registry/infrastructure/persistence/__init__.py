"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate and SQLAlchemy mapper configuration)
and exports the repository implementations and the wiring factory.
"""

from client_registry.infrastructure.persistence.models import *  # noqa: F401, F403
from client_registry.infrastructure.persistence.models import __all__ as _orm_all
from client_registry.infrastructure.persistence.repositories import (
    SqlClientRepository,
    SqlRepository,
    get_client_repository,
)

__all__ = _orm_all + [
    "SqlRepository",
    "SqlClientRepository",
    "get_client_repository",
]
