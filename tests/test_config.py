"""Tests for configuration and logging setup."""

import pytest
from pydantic import ValidationError

from git_history.config import AppConfig, Config, RepositoryConfig
from git_history.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GIT_HISTORY_REPO_PATH", "LOG_LEVEL", "LOG_FORMAT", "DEFAULT_MAX_COUNT", "ENHANCE_COMMITS"):
        monkeypatch.delenv(name, raising=False)


class TestConfig:
    """Test settings loading."""

    def test_defaults(self):
        config = Config.load()

        assert config.repository.repo_path == "."
        assert config.app.log_level == "INFO"
        assert config.app.log_format == "console"
        assert config.app.default_max_count == 50
        assert config.app.enhance_commits is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("GIT_HISTORY_REPO_PATH", "/srv/repo")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "JSON")
        monkeypatch.setenv("DEFAULT_MAX_COUNT", "5")
        monkeypatch.setenv("ENHANCE_COMMITS", "true")

        config = Config.load()

        assert config.repository.repo_path == "/srv/repo"
        assert config.app.log_level == "DEBUG"
        assert config.app.log_format == "json"
        assert config.app.default_max_count == 5
        assert config.app.enhance_commits is True

    @pytest.mark.parametrize(
        "name, value",
        [("LOG_LEVEL", "verbose"), ("LOG_FORMAT", "xml"), ("DEFAULT_MAX_COUNT", "0")],
    )
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)

        with pytest.raises(ValidationError):
            AppConfig()

    def test_explicit_sections(self):
        config = Config(repository=RepositoryConfig(repo_path="/tmp/repo"))

        assert config.repository.repo_path == "/tmp/repo"
        assert isinstance(config.app, AppConfig)


class TestLogging:
    """Test structlog configuration."""

    @pytest.mark.parametrize("log_format", ["json", "console"])
    def test_configure_logging(self, log_format):
        logger = configure_logging(AppConfig(log_format=log_format))

        assert logger is not None
        assert get_logger("git_history.tests") is not None
