import logfire

from blogstore.domain.auth.model.identity import Identity
from blogstore.domain.post.model.value import PostContent
from blogstore.domain.post.query.get_post import PostDetail
from blogstore.domain.post.service.post import PostService
from blogstore.domain.shared.authorization.gate import authenticated
from blogstore.domain.shared.command import Command, CommandHandler


class CreatePost(Command):
    title: str
    content: str
    categories: list[str] = []


class CreatePostHandler(CommandHandler[CreatePost, PostDetail]):
    __auth__ = authenticated()
    identity: Identity
    post_service: PostService

    async def run(self, cmd: CreatePost) -> PostDetail:
        with logfire.span("CreatePost"):
            post = await self.post_service.create(
                PostContent(title=cmd.title, content=cmd.content, categories=cmd.categories),
                caller=self.identity,  # type: ignore[arg-type]  # narrowed by the gate
            )
            logfire.info("Post created", post_id=post.id)
            return PostDetail.from_post(post)
