"""Tests for settings resolution: defaults, env overrides and the YAML file."""

from pathlib import Path

import pytest

from blogstore.config import Config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    for name in (
        "BLOGSTORE_DATABASE__URL",
        "BLOGSTORE_DATABASE__ECHO",
        "BLOGSTORE_LOGGING__LEVEL",
        "BLOGSTORE_CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("BLOGSTORE_DATA_DIR", str(tmp_path / "data"))
    # Keep a stray .env in the working directory out of the picture
    monkeypatch.chdir(tmp_path)


class TestConfig:
    def test_database_url_derived_from_data_dir(self, tmp_path: Path):
        config = Config()  # type: ignore[call-arg]

        assert config.database.url == f"sqlite+aiosqlite:///{tmp_path / 'data' / 'blogstore.db'}"
        assert config.database.auto_migrate is True

    def test_env_overrides_nested_fields(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BLOGSTORE_DATABASE__URL", "sqlite+aiosqlite:///elsewhere.db")
        monkeypatch.setenv("BLOGSTORE_LOGGING__LEVEL", "DEBUG")

        config = Config()  # type: ignore[call-arg]

        assert config.database.url == "sqlite+aiosqlite:///elsewhere.db"
        assert config.logging.level == "DEBUG"

    def test_yaml_file_supplies_settings(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("database:\n  url: sqlite+aiosqlite:///from-yaml.db\n  echo: true\n")
        monkeypatch.setenv("BLOGSTORE_CONFIG_FILE", str(config_file))

        config = Config()  # type: ignore[call-arg]

        assert config.database.url == "sqlite+aiosqlite:///from-yaml.db"
        assert config.database.echo is True

    def test_env_beats_yaml(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  level: WARNING\n")
        monkeypatch.setenv("BLOGSTORE_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("BLOGSTORE_LOGGING__LEVEL", "ERROR")

        assert Config().logging.level == "ERROR"  # type: ignore[call-arg]

    def test_missing_yaml_file_ignored(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv("BLOGSTORE_CONFIG_FILE", str(tmp_path / "absent.yaml"))

        assert Config().logging.level == "INFO"  # type: ignore[call-arg]
