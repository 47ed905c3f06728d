"""Async SQLAlchemy engine and session factory provisioning."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from client_registry.domain.exceptions import StoreConnectionError
from client_registry.domain.models.search import DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str | None = None
    database_echo: bool = False  # log every SQL statement
    page_size: int = DEFAULT_PAGE_SIZE


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance; reads .env once."""
    return Settings()


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""


def to_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the async engine described by settings.

    Raises StoreConnectionError when DATABASE_URL is missing or unusable.
    No connection is opened here; the first session does that.
    """
    if not settings.database_url:
        raise StoreConnectionError("DATABASE_URL must be set")
    url = to_async_url(settings.database_url)
    try:
        engine = create_async_engine(url, echo=settings.database_echo, pool_pre_ping=True)
    except (SQLAlchemyError, ImportError) as exc:
        raise StoreConnectionError(f"Cannot create engine for {url}: {exc}") from exc
    logger.debug("Created engine for %s", engine.url.render_as_string(hide_password=True))
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
