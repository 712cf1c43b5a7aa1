import logfire

from blogstore.domain.auth.model.identity import Identity
from blogstore.domain.post.model.value import PostId
from blogstore.domain.post.query.get_post import PostDetail
from blogstore.domain.post.service.post import PostService
from blogstore.domain.shared.authorization.gate import authenticated
from blogstore.domain.shared.command import Command, CommandHandler


class DeletePost(Command):
    id: PostId


class DeletePostHandler(CommandHandler[DeletePost, PostDetail]):
    """Deletes a post and returns it as it was just before removal."""

    __auth__ = authenticated()
    identity: Identity
    post_service: PostService

    async def run(self, cmd: DeletePost) -> PostDetail:
        with logfire.span("DeletePost"):
            post = await self.post_service.delete(cmd.id, caller=self.identity)  # type: ignore[arg-type]
            logfire.info("Post deleted", post_id=cmd.id)
            return PostDetail.from_post(post)
