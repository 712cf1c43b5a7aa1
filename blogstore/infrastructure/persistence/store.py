"""SQLAlchemyPostStore - the process-wide owner of the durable region."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from blogstore.config import DatabaseConfig
from blogstore.domain.post.port.store import PostStore, PostUnitOfWork
from blogstore.domain.shared.error import StorageUnavailableError
from blogstore.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    init_schema,
)
from blogstore.infrastructure.persistence.repository.allocator import SQLAlchemyIdAllocator
from blogstore.infrastructure.persistence.repository.post import SQLAlchemyPostRepository

logger = logging.getLogger(__name__)


class SQLAlchemyPostStore(PostStore):
    """Owns the engine, the session factory and the store-wide lock.

    Construct one per process (or per test) and pass it to the services.
    ``transaction()`` holds the lock from the first read to the commit, so a
    read-validate-write sequence never interleaves with another operation even
    though database calls await.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._session_factory: async_sessionmaker[AsyncSession] = create_session_factory(engine)
        self._lock = asyncio.Lock()

    @classmethod
    async def open(cls, config: DatabaseConfig) -> "SQLAlchemyPostStore":
        """Open (or recover) the store at ``config.url``."""
        engine = create_db_engine(config)
        if config.auto_migrate:
            try:
                await init_schema(engine)
            except OperationalError as e:
                await engine.dispose()
                raise StorageUnavailableError(f"Cannot open store at {engine.url}: {e.orig}") from e
        logger.info("Post store opened: %s", engine.url)
        return cls(engine)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[PostUnitOfWork]:
        async with self._lock:
            async with self._session_factory() as session:
                async with session.begin():
                    yield PostUnitOfWork(
                        posts=SQLAlchemyPostRepository(session),
                        ids=SQLAlchemyIdAllocator(session),
                    )

    async def close(self) -> None:
        await self._engine.dispose()
        logger.info("Post store closed")
