"""LikeLedger - one like per principal per post."""

import logging

from blogstore.domain.auth.model.identity import Principal
from blogstore.domain.post.model.aggregate import Post
from blogstore.domain.post.port.store import PostStore
from blogstore.domain.shared.authorization.resource import require_principal
from blogstore.domain.shared.error import NotFoundError
from blogstore.domain.shared.service import Service

logger = logging.getLogger(__name__)


class LikeLedger(Service):
    store: PostStore

    async def like(self, post_id: int, caller: Principal) -> Post:
        require_principal(caller)
        async with self.store.transaction() as uow:
            post = await uow.posts.get(post_id)
            if post is None:
                raise NotFoundError(f"Post not found: {post_id}. Cannot like.")
            post.add_like(caller)
            await uow.posts.insert(post)

        logger.debug("Post liked: id=%s by=%s likes=%s", post_id, caller, post.likes)
        return post

    async def dislike(self, post_id: int, caller: Principal) -> Post:
        require_principal(caller)
        async with self.store.transaction() as uow:
            post = await uow.posts.get(post_id)
            if post is None:
                raise NotFoundError(f"Post not found: {post_id}. Cannot dislike.")
            post.remove_like(caller)
            await uow.posts.insert(post)

        logger.debug("Post disliked: id=%s by=%s likes=%s", post_id, caller, post.likes)
        return post
