"""PostRepository port - the durable id -> post map."""

from abc import abstractmethod
from typing import Protocol

from blogstore.domain.post.model.aggregate import Post
from blogstore.domain.shared.port import Port


class PostRepository(Port, Protocol):
    @abstractmethod
    async def get(self, post_id: int) -> Post | None: ...

    @abstractmethod
    async def insert(self, post: Post) -> Post | None:
        """Upsert ``post`` under ``post.id``; return the value it replaced."""
        ...

    @abstractmethod
    async def remove(self, post_id: int) -> Post | None: ...

    @abstractmethod
    async def count(self) -> int: ...

    @abstractmethod
    async def ids(self) -> list[int]:
        """All stored ids, ascending."""
        ...
