"""End-to-end through the dishka container, as the CLI wires it."""

from pathlib import Path

import pytest

from blogstore.application.di import create_container
from blogstore.config import Config
from blogstore.domain.auth.model.identity import Anonymous, Identity, Principal
from blogstore.domain.post.command.create_post import CreatePost, CreatePostHandler
from blogstore.domain.post.command.delete_post import DeletePost, DeletePostHandler
from blogstore.domain.post.command.like_post import LikePost, LikePostHandler
from blogstore.domain.post.query.get_post import GetPost, GetPostHandler
from blogstore.domain.post.service.post import PostService
from blogstore.domain.shared.error import AuthorizationError

pytestmark = pytest.mark.integration


@pytest.fixture
def config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Config:
    monkeypatch.setenv("BLOGSTORE_DATABASE__URL", f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}")
    monkeypatch.delenv("BLOGSTORE_CONFIG_FILE", raising=False)
    return Config()  # type: ignore[call-arg]


class TestContainer:
    @pytest.mark.asyncio
    async def test_handlers_share_one_store(self, config: Config):
        container = create_container(config)
        try:
            async with container(context={Identity: Principal("alice")}) as uow:
                handler = await uow.get(CreatePostHandler)
                created = await handler.run(CreatePost(title="Hi", content="Hello world"))

            async with container(context={Identity: Principal("bob")}) as uow:
                handler = await uow.get(LikePostHandler)
                await handler.run(LikePost(id=created.id))

            async with container(context={Identity: Anonymous()}) as uow:
                handler = await uow.get(GetPostHandler)
                detail = await handler.run(GetPost(id=created.id))

            assert detail.author == "alice"
            assert detail.likes == 1
            assert detail.liked_by == ["bob"]
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_anonymous_cannot_mutate(self, config: Config):
        container = create_container(config)
        try:
            async with container(context={Identity: Anonymous()}) as uow:
                handler = await uow.get(DeletePostHandler)
                with pytest.raises(AuthorizationError) as exc_info:
                    await handler.run(DeletePost(id=0))

            assert exc_info.value.code == "missing_token"
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_service_is_process_wide(self, config: Config):
        container = create_container(config)
        try:
            first = await container.get(PostService)
            second = await container.get(PostService)
            assert first is second
        finally:
            await container.close()
