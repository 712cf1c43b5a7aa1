from typing import AsyncIterable

from dishka import Provider, from_context, provide

from blogstore.config import Config
from blogstore.domain.post.port.store import PostStore
from blogstore.infrastructure.persistence.store import SQLAlchemyPostStore
from blogstore.util.di.scope import Scope


class PersistenceProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)

    # APP-scoped: one store (engine + lock) for the whole process
    @provide(scope=Scope.APP)
    async def get_store(self, config: Config) -> AsyncIterable[PostStore]:
        store = await SQLAlchemyPostStore.open(config.database)
        yield store
        await store.close()
