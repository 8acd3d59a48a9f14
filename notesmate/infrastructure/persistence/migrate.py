"""Alembic upgrades, run synchronously before the app starts serving."""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config as AlembicConfig

from notesmate.infrastructure.persistence.database import resolve_database_url

logger = logging.getLogger(__name__)

# alembic.ini and migrations/ sit at the repository root
REPO_ROOT = Path(__file__).resolve().parents[3]

# Async drivers and the sync drivers alembic uses in their place
SYNC_DRIVERS = {
    "sqlite+aiosqlite": "sqlite",
    "postgresql+asyncpg": "postgresql+psycopg2",
}


def to_sync_url(database_url: str) -> str:
    """``sqlite+aiosqlite:///~/x.db`` becomes ``sqlite:////home/me/x.db``."""
    url = resolve_database_url(database_url)
    drivername = SYNC_DRIVERS.get(url.drivername, url.drivername)
    return url.set(drivername=drivername).render_as_string(hide_password=False)


def alembic_config(database_url: str) -> AlembicConfig:
    config = AlembicConfig(str(REPO_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(REPO_ROOT / "migrations"))
    # configparser interpolation treats a bare % as a directive
    config.set_main_option("sqlalchemy.url", to_sync_url(database_url).replace("%", "%%"))
    return config


def run_migrations(database_url: str) -> None:
    command.upgrade(alembic_config(database_url), "head")
    logger.info("Database schema is at head")
