"""PostService - create, read, update and delete posts."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from blogstore.domain.auth.model.identity import Principal
from blogstore.domain.post.model.aggregate import Post
from blogstore.domain.post.model.validation import (
    check_encoded_size,
    raise_for,
    require_valid,
)
from blogstore.domain.post.model.value import PostContent
from blogstore.domain.post.port.store import PostStore
from blogstore.domain.shared.authorization.resource import author, require_principal
from blogstore.domain.shared.error import NotFoundError
from blogstore.domain.shared.service import Service

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class PostService(Service):
    """The only component that allocates post ids.

    Every operation runs inside a single store transaction, so the read of the
    current post and the write of its next state cannot interleave with other
    calls.
    """

    store: PostStore
    clock: Callable[[], datetime] = utc_now

    async def get(self, post_id: int) -> Post:
        async with self.store.transaction() as uow:
            post = await uow.posts.get(post_id)
        if post is None:
            raise NotFoundError(f"Post not found: {post_id}")
        return post

    async def create(self, content: PostContent, caller: Principal) -> Post:
        # Caller and field rules are checked before an id is allocated, so a
        # rejected request never consumes one.
        require_principal(caller)
        require_valid(content)

        async with self.store.transaction() as uow:
            post_id = await uow.ids.next()
            post = Post.new(post_id, content, author=caller, created_at=self.clock())
            oversize = check_encoded_size(post)
            if oversize is not None:
                raise_for([oversize])
            await uow.posts.insert(post)

        logger.info("Post created: id=%s author=%s", post.id, caller)
        return post

    async def update(self, post_id: int, content: PostContent, caller: Principal) -> Post:
        async with self.store.transaction() as uow:
            post = await uow.posts.get(post_id)
            if post is None:
                raise NotFoundError(f"Post not found: {post_id}. Cannot update.")
            author().evaluate(caller, post)
            require_valid(content)

            post.revise(content, at=self.clock())
            oversize = check_encoded_size(post)
            if oversize is not None:
                raise_for([oversize])
            await uow.posts.insert(post)

        logger.info("Post updated: id=%s", post_id)
        return post

    async def delete(self, post_id: int, caller: Principal) -> Post:
        async with self.store.transaction() as uow:
            post = await uow.posts.get(post_id)
            if post is None:
                raise NotFoundError(f"Post not found: {post_id}. Cannot delete.")
            author().evaluate(caller, post)
            post.ensure_deletable()
            await uow.posts.remove(post_id)

        logger.info("Post deleted: id=%s", post_id)
        return post

    async def stats(self) -> tuple[int, int, list[int]]:
        """Return (live post count, next id to be issued, live ids ascending)."""
        async with self.store.transaction() as uow:
            return await uow.posts.count(), await uow.ids.peek(), await uow.posts.ids()
