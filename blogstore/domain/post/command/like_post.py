import logfire

from blogstore.domain.auth.model.identity import Identity
from blogstore.domain.post.model.value import PostId
from blogstore.domain.post.query.get_post import PostDetail
from blogstore.domain.post.service.ledger import LikeLedger
from blogstore.domain.shared.authorization.gate import authenticated
from blogstore.domain.shared.command import Command, CommandHandler


class LikePost(Command):
    id: PostId


class LikePostHandler(CommandHandler[LikePost, PostDetail]):
    __auth__ = authenticated()
    identity: Identity
    like_ledger: LikeLedger

    async def run(self, cmd: LikePost) -> PostDetail:
        with logfire.span("LikePost"):
            post = await self.like_ledger.like(cmd.id, caller=self.identity)  # type: ignore[arg-type]
            return PostDetail.from_post(post)
