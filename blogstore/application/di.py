from dishka import AsyncContainer, make_async_container

from blogstore.config import Config
from blogstore.domain.post.util.di import PostProvider
from blogstore.infrastructure.persistence import PersistenceProvider
from blogstore.util.di.scope import Scope


def create_container(config: Config | None = None) -> AsyncContainer:
    """Build the APP container.

    Open a UOW scope per operation with the caller's identity:
        async with container(context={Identity: principal}) as uow:
            handler = await uow.get(CreatePostHandler)
    """
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        PersistenceProvider(),
        PostProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
