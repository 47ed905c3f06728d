"""ORM model registry: imports every mapper class so it is registered with
Base.metadata before Alembic or SQLAlchemy runs.
"""

from client_registry.infrastructure.persistence.models.clients import Client

__all__ = [
    "Client",
]
