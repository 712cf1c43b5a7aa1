import logfire

from blogstore.domain.auth.model.identity import Identity
from blogstore.domain.post.model.value import PostId
from blogstore.domain.post.query.get_post import PostDetail
from blogstore.domain.post.service.ledger import LikeLedger
from blogstore.domain.shared.authorization.gate import authenticated
from blogstore.domain.shared.command import Command, CommandHandler


class DislikePost(Command):
    id: PostId


class DislikePostHandler(CommandHandler[DislikePost, PostDetail]):
    """Withdraws the caller's like."""

    __auth__ = authenticated()
    identity: Identity
    like_ledger: LikeLedger

    async def run(self, cmd: DislikePost) -> PostDetail:
        with logfire.span("DislikePost"):
            post = await self.like_ledger.dislike(cmd.id, caller=self.identity)  # type: ignore[arg-type]
            return PostDetail.from_post(post)
