"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .capabilities import Identifiable, SoftDeletable
from .clients import Client, ClientCriteria, NewClient
from .search import DEFAULT_PAGE_SIZE, FinderConfig, SearchResult

__all__ = [
    # capabilities
    "Identifiable",
    "SoftDeletable",
    # clients
    "Client",
    "ClientCriteria",
    "NewClient",
    # search
    "DEFAULT_PAGE_SIZE",
    "FinderConfig",
    "SearchResult",
]
