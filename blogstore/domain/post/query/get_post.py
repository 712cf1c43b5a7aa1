"""GetPost query handler - public read access to posts."""

from datetime import datetime

from blogstore.domain.post.model.aggregate import Post
from blogstore.domain.post.model.value import PostId
from blogstore.domain.post.service.post import PostService
from blogstore.domain.shared.authorization.gate import public
from blogstore.domain.shared.query import Query, QueryHandler, Result


class GetPost(Query):
    id: PostId


class PostDetail(Result):
    id: int
    title: str
    content: str
    author: str
    created_at: datetime
    updated_at: datetime | None
    likes: int
    categories: list[str]
    liked_by: list[str]

    @classmethod
    def from_post(cls, post: Post) -> "PostDetail":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author=str(post.author),
            created_at=post.created_at,
            updated_at=post.updated_at,
            likes=post.likes,
            categories=list(post.categories),
            liked_by=[str(p) for p in post.liked_by],
        )


class GetPostHandler(QueryHandler[GetPost, PostDetail]):
    __auth__ = public()
    post_service: PostService

    async def run(self, query: GetPost) -> PostDetail:
        post = await self.post_service.get(query.id)
        return PostDetail.from_post(post)
