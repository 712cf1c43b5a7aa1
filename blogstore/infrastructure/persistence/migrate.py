"""Alembic migrations for the durable region.

Alembic drives a synchronous engine, so every entry point here takes the
async store url and derives the sync one. Call these outside the event loop.
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config as AlembicConfig
from alembic.runtime.migration import MigrationContext
from sqlalchemy import create_engine

logger = logging.getLogger(__name__)

# Project root where alembic.ini lives
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

_SQLITE_PREFIX = "sqlite:///"


def _sqlite_path(sync_url: str) -> Path | None:
    """File path of a SQLite url, or None for in-memory and non-SQLite urls."""
    if not sync_url.startswith(_SQLITE_PREFIX):
        return None
    path = sync_url[len(_SQLITE_PREFIX) :]
    if not path or path == ":memory:":
        return None
    return Path(path).expanduser()


def to_sync_url(database_url: str) -> str:
    """Swap the aiosqlite driver for the default sync one, expanding ``~``."""
    url = database_url.replace("+aiosqlite", "")
    path = _sqlite_path(url)
    if path is not None and url[len(_SQLITE_PREFIX) :].startswith("~"):
        url = f"{_SQLITE_PREFIX}{path}"
    return url


def get_alembic_config(database_url: str) -> AlembicConfig:
    config = AlembicConfig(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.set_main_option("sqlalchemy.url", to_sync_url(database_url))
    return config


def run_migrations(database_url: str) -> None:
    """Upgrade the store at ``database_url`` to the latest revision."""
    path = _sqlite_path(to_sync_url(database_url))
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)

    command.upgrade(get_alembic_config(database_url), "head")
    logger.info("Store schema at head: %s", database_url)


def current_revision(database_url: str) -> str | None:
    """Revision the store was last migrated to.

    None when migrations never ran, including stores whose tables were
    created on open by ``auto_migrate``.
    """
    path = _sqlite_path(to_sync_url(database_url))
    if path is not None and not path.exists():
        return None

    engine = create_engine(to_sync_url(database_url))
    try:
        with engine.connect() as conn:
            return MigrationContext.configure(conn).get_current_revision()
    finally:
        engine.dispose()
