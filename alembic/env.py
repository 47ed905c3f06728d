"""Migration runner for the clients schema.

The target database comes from DATABASE_URL (environment or .env) and falls
back to sqlalchemy.url in alembic.ini.  SQLite runs in batch mode so column
changes can be replayed by table copy.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Registers the clients mapper on Base.metadata for autogenerate.
from client_registry.infrastructure.database import Base, to_async_url, get_settings  # noqa: E402
import client_registry.infrastructure.persistence.models  # noqa: E402, F401

target_metadata = Base.metadata

DATABASE_URL = to_async_url(
    get_settings().database_url or config.get_main_option("sqlalchemy.url")
)


def run_migrations_offline() -> None:
    """Emit the migration SQL for DATABASE_URL without connecting."""
    context.configure(
        url=DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection):  # type: ignore[no-untyped-def]
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Apply migrations through a throwaway async engine."""
    engine = create_async_engine(DATABASE_URL, echo=False)

    async with engine.connect() as connection:
        await connection.run_sync(_run_with_connection)

    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
