"""Async engine and session factory."""

from pathlib import Path
from typing import Any

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from notesmate.config import DatabaseConfig

# Postgres pool sizing; SQLite always shares a single connection.
POOL_SIZE = 5
MAX_OVERFLOW = 10


def resolve_database_url(url: str) -> URL:
    """Parse ``url``; file-backed SQLite paths become absolute with their directory created."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite" or parsed.database in (None, "", ":memory:"):
        return parsed

    path = Path(parsed.database).expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    return parsed.set(database=str(path))


def _engine_options(url: URL, echo: bool) -> dict[str, Any]:
    if url.get_backend_name() == "sqlite":
        # aiosqlite runs the connection on a worker thread
        return {
            "echo": echo,
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    return {
        "echo": echo,
        "pool_pre_ping": True,
        "pool_size": POOL_SIZE,
        "max_overflow": MAX_OVERFLOW,
    }


def create_db_engine(config: DatabaseConfig) -> AsyncEngine:
    url = resolve_database_url(config.url)
    return create_async_engine(url, **_engine_options(url, config.echo))


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions keep loaded rows usable after commit and never flush implicitly."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
