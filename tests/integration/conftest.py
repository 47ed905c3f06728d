"""Fixtures backing the repository with a real SQLite file through aiosqlite."""

import pytest

import client_registry.infrastructure.persistence  # noqa: F401 — registers all mappers
from client_registry.infrastructure.database import (
    Base,
    Settings,
    create_engine,
    create_session_factory,
)
from client_registry.infrastructure.persistence.repositories import SqlClientRepository


@pytest.fixture
async def engine(tmp_path):
    engine = create_engine(Settings(database_url=f"sqlite:///{tmp_path / 'clients.db'}"))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def repo(session_factory):
    return SqlClientRepository(session_factory)
