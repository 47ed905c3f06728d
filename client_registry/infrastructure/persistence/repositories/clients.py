"""SQLAlchemy implementation of ClientRepository."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import InstrumentedAttribute

from client_registry.domain.models.clients import Client as DomainClient
from client_registry.domain.models.clients import ClientCriteria
from client_registry.domain.models.search import DEFAULT_PAGE_SIZE, FinderConfig
from client_registry.domain.repositories.clients import ClientRepository
from client_registry.infrastructure.persistence.models.clients import Client as OrmClient

from .base import SqlRepository, Validator


class SqlClientRepository(
    SqlRepository[DomainClient, int, ClientCriteria, OrmClient], ClientRepository
):
    model = OrmClient
    entity_name = "Client"
    soft_delete_column = "active"

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        config: FinderConfig | None = None,
        validators: Sequence[Validator[DomainClient]] = (),
    ) -> None:
        super().__init__(
            session_factory,
            config or FinderConfig(page_size=DEFAULT_PAGE_SIZE, order_by="username"),
            validators,
        )

    @staticmethod
    def _to_domain(row: OrmClient) -> DomainClient:
        return DomainClient(
            client_id=row.client_id,
            active=row.active,
            username=row.username,
            pwd=row.pwd,
            birth_date=row.birth_date,
        )

    @staticmethod
    def _to_values(item: DomainClient) -> dict[str, Any]:
        return {
            "active": item.active,
            "username": item.username,
            "pwd": item.pwd,
            "birth_date": item.birth_date,
        }

    @staticmethod
    def _assign_id(item: DomainClient, id: int) -> None:
        item.client_id = id

    @staticmethod
    def _filters(criteria: ClientCriteria) -> list[tuple[InstrumentedAttribute[Any], Any]]:
        return [
            (OrmClient.client_id, criteria.client_id),
            (OrmClient.active, criteria.active),
            (OrmClient.username, criteria.username),
            (OrmClient.pwd, criteria.pwd),
            (OrmClient.birth_date, criteria.birth_date),
        ]
