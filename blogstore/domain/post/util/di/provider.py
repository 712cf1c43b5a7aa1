from dishka import Provider, from_context, provide

from blogstore.domain.auth.model.identity import Identity
from blogstore.domain.post.command.create_post import CreatePostHandler
from blogstore.domain.post.command.delete_post import DeletePostHandler
from blogstore.domain.post.command.dislike_post import DislikePostHandler
from blogstore.domain.post.command.like_post import LikePostHandler
from blogstore.domain.post.command.update_post import UpdatePostHandler
from blogstore.domain.post.port.store import PostStore
from blogstore.domain.post.query.get_post import GetPostHandler
from blogstore.domain.post.service.ledger import LikeLedger
from blogstore.domain.post.service.post import PostService
from blogstore.util.di.scope import Scope


class PostProvider(Provider):
    # The caller of the current operation, supplied when the UOW scope opens
    identity = from_context(provides=Identity, scope=Scope.UOW)

    @provide(scope=Scope.APP)
    def get_post_service(self, store: PostStore) -> PostService:
        return PostService(store=store)

    @provide(scope=Scope.APP)
    def get_like_ledger(self, store: PostStore) -> LikeLedger:
        return LikeLedger(store=store)

    # Handlers
    get_post_handler = provide(GetPostHandler, scope=Scope.UOW)
    create_post_handler = provide(CreatePostHandler, scope=Scope.UOW)
    update_post_handler = provide(UpdatePostHandler, scope=Scope.UOW)
    delete_post_handler = provide(DeletePostHandler, scope=Scope.UOW)
    like_post_handler = provide(LikePostHandler, scope=Scope.UOW)
    dislike_post_handler = provide(DislikePostHandler, scope=Scope.UOW)
