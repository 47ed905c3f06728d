"""Generic SQLAlchemy repository.

SqlRepository implements every capability contract once, on top of a
session factory; an entity repository only declares its ORM model, how rows
map to and from domain items, and which columns its criteria filter on.

Every public operation runs in its own unit of work: a fresh session is
opened, committed on success, rolled back on failure and always closed.
Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import AsyncIterator, Callable, Sequence
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic_core import to_json
from sqlalchemy import ColumnElement, delete, func, inspect, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import InstrumentedAttribute

from client_registry.domain.exceptions import (
    InvalidPageError,
    ItemValidationError,
    MissingIdentifierError,
    StorageError,
    StoreConnectionError,
)
from client_registry.domain.models.search import FinderConfig, SearchResult
from client_registry.domain.repositories.base import Repository
from client_registry.infrastructure.database import Base

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=BaseModel)
IdT = TypeVar("IdT")
CriteriaT = TypeVar("CriteriaT", bound=BaseModel)
RowT = TypeVar("RowT", bound=Base)

# A validator returns a rejection reason, or None when the item passes.
Validator = Callable[[ItemT], str | None]


class SqlRepository(Repository[ItemT, IdT, CriteriaT], Generic[ItemT, IdT, CriteriaT, RowT]):
    """Repository over one table, one row per item.

    Subclasses set `model`, `entity_name` and `soft_delete_column` (the
    boolean column cleared by logically_delete) and implement the mapping
    hooks below.  Items must satisfy Identifiable and SoftDeletable.
    """

    model: type[RowT]
    entity_name: str
    soft_delete_column: str = "active"

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        config: FinderConfig,
        validators: Sequence[Validator[ItemT]] = (),
    ) -> None:
        self._session_factory = session_factory
        self._config = config
        self._validators = tuple(validators)
        columns = self.model.__table__.c
        if config.order_by not in columns:
            raise ValueError(
                f"{self.model.__tablename__} has no column {config.order_by!r} to order by"
            )
        self._order_column = columns[config.order_by]
        self._id_column = inspect(self.model).primary_key[0]

    @property
    def config(self) -> FinderConfig:
        return self._config

    # ------------------------------------------------------------------ #
    # Entity hooks                                                         #
    # ------------------------------------------------------------------ #

    @staticmethod
    @abstractmethod
    def _to_domain(row: RowT) -> ItemT:
        """Map ORM row → domain item."""

    @staticmethod
    @abstractmethod
    def _to_values(item: ItemT) -> dict[str, Any]:
        """Every mutable column value of item, keyed by column name."""

    @staticmethod
    @abstractmethod
    def _assign_id(item: ItemT, id: IdT) -> None:
        """Write the store-assigned identifier back onto item."""

    @staticmethod
    @abstractmethod
    def _filters(criteria: CriteriaT) -> list[tuple[InstrumentedAttribute[Any], Any]]:
        """(column, value) pairs for each filterable criteria field.

        A None value means the field is absent and adds no predicate.
        """

    # ------------------------------------------------------------------ #
    # Unit of work & query helpers                                         #
    # ------------------------------------------------------------------ #

    @asynccontextmanager
    async def _unit_of_work(self) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            try:
                await session.connection()
            except (SQLAlchemyError, OSError) as exc:
                logger.warning("Cannot connect to the store: %s", exc)
                raise StoreConnectionError(f"Cannot connect to the store: {exc}") from exc
            try:
                yield session
                await session.commit()
            except (SQLAlchemyError, OverflowError) as exc:
                # OverflowError: the driver cannot bind an int beyond the column's range
                await session.rollback()
                logger.warning("%s operation rejected by the store: %s", self.entity_name, exc)
                raise StorageError(str(exc)) from exc

    def _require_id(self, item: ItemT, operation: str) -> IdT:
        id = item.id
        if id is None:
            raise MissingIdentifierError(self.entity_name, operation)
        return id

    def _predicates(self, criteria: CriteriaT) -> list[ColumnElement[bool]]:
        return [column == value for column, value in self._filters(criteria) if value is not None]

    async def _count(self, session: AsyncSession, predicates: list[ColumnElement[bool]]) -> int:
        stmt = select(func.count()).select_from(self.model).where(*predicates)
        result = await session.execute(stmt)
        return result.scalar_one()

    @staticmethod
    def calculate_total_pages(total_count: int, page_size: int) -> int:
        """Ceiling of total_count / page_size; 0 when page_size is not positive."""
        if page_size <= 0:
            return 0
        return (total_count + page_size - 1) // page_size

    # ------------------------------------------------------------------ #
    # Capability contracts                                                 #
    # ------------------------------------------------------------------ #

    def item_is_valid(self, item: ItemT) -> None:
        for validator in self._validators:
            reason = validator(item)
            if reason is not None:
                raise ItemValidationError(self.entity_name, reason)

    async def add(self, item: ItemT) -> None:
        self.item_is_valid(item)
        async with self._unit_of_work() as session:
            row = self.model(**self._to_values(item))
            session.add(row)
            await session.flush()
            new_id = inspect(row).identity[0]
        self._assign_id(item, new_id)
        logger.debug("Added %s %s", self.entity_name, new_id)

    async def update(self, item: ItemT) -> None:
        id = self._require_id(item, "update")
        stmt = update(self.model).where(self._id_column == id).values(**self._to_values(item))
        async with self._unit_of_work() as session:
            result = await session.execute(stmt)
            matched = result.rowcount
        logger.debug("Updated %s %s (%d rows)", self.entity_name, id, matched)

    async def logically_delete(self, item: ItemT) -> None:
        id = self._require_id(item, "logically delete")
        stmt = (
            update(self.model)
            .where(self._id_column == id)
            .values({self.soft_delete_column: False})
        )
        async with self._unit_of_work() as session:
            result = await session.execute(stmt)
            matched = result.rowcount
        item.set_deleted(True)
        logger.debug("Logically deleted %s %s (%d rows)", self.entity_name, id, matched)

    async def permanently_delete(self, item: ItemT) -> None:
        id = self._require_id(item, "permanently delete")
        stmt = delete(self.model).where(self._id_column == id)
        async with self._unit_of_work() as session:
            await session.execute(stmt)
        logger.debug("Permanently deleted %s %s", self.entity_name, id)

    async def search_by_id(self, id: IdT) -> ItemT | None:
        stmt = select(self.model).where(self._id_column == id)
        async with self._unit_of_work() as session:
            try:
                result = await session.execute(stmt)
            except OverflowError:
                # no stored identifier lies outside the column's integer range
                return None
            row = result.scalar_one_or_none()
            return self._to_domain(row) if row else None

    async def search_by(self, criteria: CriteriaT, page_number: int) -> SearchResult[CriteriaT]:
        if page_number < 1:
            raise InvalidPageError(page_number)
        page_size = self._config.page_size
        offset = (page_number - 1) * page_size
        predicates = self._predicates(criteria)
        items: list[ItemT] = []
        async with self._unit_of_work() as session:
            total_count = await self._count(session, predicates)
            # pages past the last matching row are empty without asking the store
            if offset < total_count:
                stmt = (
                    select(self.model)
                    .where(*predicates)
                    .order_by(self._order_column.asc(), self._id_column.asc())
                    .limit(page_size)
                    .offset(offset)
                )
                result = await session.execute(stmt)
                items = [self._to_domain(row) for row in result.scalars()]
        logger.debug(
            "Searched %s page %d: %d of %d rows", self.entity_name, page_number, len(items), total_count
        )
        return SearchResult.new(
            page=page_number,
            total_pages=self.calculate_total_pages(total_count, page_size),
            criteria=criteria.model_copy(),
            result=to_json(items).decode(),
        )

    async def count(self, criteria: CriteriaT) -> int:
        """Number of rows matching criteria, ignoring paging."""
        async with self._unit_of_work() as session:
            return await self._count(session, self._predicates(criteria))
