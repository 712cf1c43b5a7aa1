from sqlalchemy.ext.asyncio import AsyncSession

from blogstore.domain.post.model.aggregate import Post
from blogstore.domain.post.port.repository import PostRepository
from blogstore.infrastructure.persistence.durable import DurableMap
from blogstore.infrastructure.persistence.tables import posts_table


class SQLAlchemyPostRepository(PostRepository):
    """PostRepository backed by the ``posts`` durable map."""

    def __init__(self, session: AsyncSession) -> None:
        self._map: DurableMap[Post] = DurableMap(session, posts_table, Post)

    async def get(self, post_id: int) -> Post | None:
        return await self._map.get(post_id)

    async def insert(self, post: Post) -> Post | None:
        return await self._map.insert(post.id, post)

    async def remove(self, post_id: int) -> Post | None:
        return await self._map.remove(post_id)

    async def count(self) -> int:
        return await self._map.count()

    async def ids(self) -> list[int]:
        return await self._map.keys()
