"""Fixtures for post domain tests: a real store on in-memory SQLite."""

from datetime import UTC, datetime, timedelta
from itertools import count

import pytest
import pytest_asyncio

from blogstore.config import DatabaseConfig
from blogstore.domain.auth.model.identity import Principal
from blogstore.domain.post.service.ledger import LikeLedger
from blogstore.domain.post.service.post import PostService
from blogstore.infrastructure.persistence.store import SQLAlchemyPostStore

T0 = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


class StepClock:
    """Returns T0, T0+1s, T0+2s, ... on successive calls."""

    def __init__(self) -> None:
        self._ticks = count()

    def __call__(self) -> datetime:
        return T0 + timedelta(seconds=next(self._ticks))


@pytest_asyncio.fixture
async def store():
    store = await SQLAlchemyPostStore.open(DatabaseConfig(url="sqlite+aiosqlite://"))
    yield store
    await store.close()


@pytest.fixture
def post_service(store: SQLAlchemyPostStore) -> PostService:
    return PostService(store=store, clock=StepClock())


@pytest.fixture
def like_ledger(store: SQLAlchemyPostStore) -> LikeLedger:
    return LikeLedger(store=store)


@pytest.fixture
def alice() -> Principal:
    return Principal("alice")


@pytest.fixture
def bob() -> Principal:
    return Principal("bob")


@pytest.fixture
def carol() -> Principal:
    return Principal("carol")


@pytest.fixture
def t0() -> datetime:
    return T0
