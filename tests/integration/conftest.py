"""Fixtures for SQLite integration tests."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from notesmate.config import DatabaseConfig
from notesmate.infrastructure.persistence.database import create_db_engine, create_session_factory
from notesmate.infrastructure.persistence.seed import ensure_platform_tenant
from notesmate.infrastructure.persistence.tables import metadata


@pytest_asyncio.fixture
async def engine():
    """Per-test in-memory database with the schema and platform tenant in place."""
    engine = create_db_engine(DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    await ensure_platform_tenant(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine):
    factory = create_session_factory(engine)
    async with factory() as session:
        yield session
        await session.rollback()
