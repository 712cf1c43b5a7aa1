"""Tests for the db and show CLI commands against a temporary database."""

import asyncio
from pathlib import Path

import pytest

from blogstore.cli.commands import db, show
from blogstore.config import DatabaseConfig
from blogstore.domain.auth.model.identity import Principal
from blogstore.domain.post.model.value import PostContent
from blogstore.domain.post.service.post import PostService
from blogstore.infrastructure.persistence.store import SQLAlchemyPostStore


@pytest.fixture
def database_url(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setenv("BLOGSTORE_DATABASE__URL", url)
    monkeypatch.delenv("BLOGSTORE_CONFIG_FILE", raising=False)
    return url


def _seed(url: str) -> None:
    async def seed() -> None:
        store = await SQLAlchemyPostStore.open(DatabaseConfig(url=url))
        try:
            service = PostService(store=store)
            await service.create(
                PostContent(title="First light", content="Hello world", categories=["news"]),
                caller=Principal("alice"),
            )
        finally:
            await store.close()

    asyncio.run(seed())


class TestStatsCommand:
    def test_empty_store(self, database_url: str, capsys: pytest.CaptureFixture[str]):
        db.stats()

        out = capsys.readouterr().out
        assert "Posts: 0" in out
        assert "Schema revision: unmigrated" in out
        assert "No posts stored" in out

    def test_reports_counts(self, database_url: str, capsys: pytest.CaptureFixture[str]):
        _seed(database_url)

        db.stats()

        out = capsys.readouterr().out
        assert "Posts: 1" in out
        assert "Next id: 1" in out


class TestShowCommand:
    def test_prints_post(self, database_url: str, capsys: pytest.CaptureFixture[str]):
        _seed(database_url)

        show.show(0)

        out = capsys.readouterr().out
        assert "First light" in out
        assert "alice" in out

    def test_missing_post_exits_nonzero(
        self, database_url: str, capsys: pytest.CaptureFixture[str]
    ):
        with pytest.raises(SystemExit) as exc_info:
            show.show(42)

        assert exc_info.value.code == 1
        assert "Post not found: 42" in capsys.readouterr().err


class TestMigrateCommand:
    def test_creates_schema(self, database_url: str, tmp_path: Path):
        db.migrate()

        assert (tmp_path / "cli.db").exists()


class TestShowArguments:
    def test_negative_id_exits_nonzero(
        self, database_url: str, capsys: pytest.CaptureFixture[str]
    ):
        with pytest.raises(SystemExit) as exc_info:
            show.show(-1)

        assert exc_info.value.code == 1
        assert "Invalid post id: -1" in capsys.readouterr().err


class TestMigrateThenStats:
    def test_stats_reports_head_revision(
        self, database_url: str, capsys: pytest.CaptureFixture[str]
    ):
        db.migrate()
        capsys.readouterr()

        db.stats()

        assert "Schema revision: 3f1c2a7d9b10" in capsys.readouterr().out
