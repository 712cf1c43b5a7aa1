import pytest_asyncio

from blogstore.config import DatabaseConfig
from blogstore.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    init_schema,
)


@pytest_asyncio.fixture
async def session():
    """A session on a fresh in-memory database, rolled back after the test."""
    engine = create_db_engine(DatabaseConfig(url="sqlite+aiosqlite://"))
    await init_schema(engine)
    factory = create_session_factory(engine)
    async with factory() as session:
        yield session
        await session.rollback()
    await engine.dispose()
