import logfire

from blogstore.domain.auth.model.identity import Identity
from blogstore.domain.post.model.value import PostContent, PostId
from blogstore.domain.post.query.get_post import PostDetail
from blogstore.domain.post.service.post import PostService
from blogstore.domain.shared.authorization.gate import authenticated
from blogstore.domain.shared.command import Command, CommandHandler


class UpdatePost(Command):
    id: PostId
    title: str
    content: str
    categories: list[str] = []


class UpdatePostHandler(CommandHandler[UpdatePost, PostDetail]):
    __auth__ = authenticated()
    identity: Identity
    post_service: PostService

    async def run(self, cmd: UpdatePost) -> PostDetail:
        with logfire.span("UpdatePost"):
            post = await self.post_service.update(
                cmd.id,
                PostContent(title=cmd.title, content=cmd.content, categories=cmd.categories),
                caller=self.identity,  # type: ignore[arg-type]
            )
            return PostDetail.from_post(post)
