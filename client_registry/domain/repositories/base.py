"""Generic repository capability contracts.

Each contract is a narrow interface a storage-backed repository implements
for one entity type; Repository is their conjunction.  Concrete
implementations live in client_registry/infrastructure/persistence/.

Design notes:
  - All methods are async to accommodate async database drivers (aiosqlite /
    asyncpg through SQLAlchemy async).
  - ItemT is the domain model type (never an ORM row or DTO).
  - Updater, LogicalDeleter and PermanentlyDeleter target a row by the
    item's identifier and raise MissingIdentifierError before touching the
    store when it is absent.
  - Expected failures surface as RepositoryError subclasses; "not found" on
    search_by_id is None, not an error.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

from client_registry.domain.models.search import SearchResult

ItemT = TypeVar("ItemT")
IdT = TypeVar("IdT")
CriteriaT = TypeVar("CriteriaT", bound=BaseModel)


class Adder(ABC, Generic[ItemT]):
    @abstractmethod
    async def add(self, item: ItemT) -> None:
        """Insert item as a new row and write the assigned identifier back onto it."""


class Updater(ABC, Generic[ItemT]):
    @abstractmethod
    async def update(self, item: ItemT) -> None:
        """Overwrite every mutable column of the row matching item's identifier."""


class LogicalDeleter(ABC, Generic[ItemT]):
    @abstractmethod
    async def logically_delete(self, item: ItemT) -> None:
        """Flag the row matching item's identifier inactive; touch nothing else."""


class PermanentlyDeleter(ABC, Generic[ItemT]):
    @abstractmethod
    async def permanently_delete(self, item: ItemT) -> None:
        """Remove the row matching item's identifier."""


class Finder(ABC, Generic[ItemT, IdT, CriteriaT]):
    @abstractmethod
    async def search_by_id(self, id: IdT) -> ItemT | None:
        """Return the item with the given identifier, or None."""

    @abstractmethod
    async def search_by(
        self, criteria: CriteriaT, page_number: int
    ) -> SearchResult[CriteriaT]:
        """Return the 1-based page_number of items matching criteria."""


class Checker(ABC, Generic[ItemT]):
    @abstractmethod
    def item_is_valid(self, item: ItemT) -> None:
        """Pre-insert business-rule gate.  Raises ItemValidationError."""


class Repository(
    Adder[ItemT],
    Updater[ItemT],
    LogicalDeleter[ItemT],
    PermanentlyDeleter[ItemT],
    Finder[ItemT, IdT, CriteriaT],
    Checker[ItemT],
    Generic[ItemT, IdT, CriteriaT],
):
    """Every capability contract for one entity type.  Adds no behaviour."""
