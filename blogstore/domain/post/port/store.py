"""PostStore port - owner of the durable region and its transactions."""

from abc import abstractmethod
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Protocol

from blogstore.domain.post.port.allocator import IdAllocator
from blogstore.domain.post.port.repository import PostRepository
from blogstore.domain.shared.port import Port


@dataclass(frozen=True)
class PostUnitOfWork:
    posts: PostRepository
    ids: IdAllocator


class PostStore(Port, Protocol):
    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[PostUnitOfWork]:
        """Open an exclusive read-modify-write scope.

        Nothing else runs against the store until the scope exits. The scope
        commits on normal exit and rolls back if an exception escapes it.
        """
        ...
