"""
Tests for Configuration.

Requires Python 3.11+.
"""

from pathlib import Path

import pytest

from utils.config import get_settings
from utils.errors import ConfigurationError


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, monkeypatch):
        """Test default values."""
        for name in ("WATCHER_POLL_INTERVAL_MS", "WATCHER_DIRECTORY", "LOG_FORMAT", "RANDOM_SEED"):
            monkeypatch.delenv(name, raising=False)

        settings = get_settings()

        assert settings.app_name == "PollWatch"
        assert settings.watcher.poll_interval_ms == 500
        assert settings.watcher.directory is None
        assert settings.sinks.text_path == Path("log.txt")
        assert settings.sinks.json_path == Path("log.json")
        assert settings.random.seed is None

    def test_cached(self):
        """Test that settings are cached."""
        assert get_settings() is get_settings()

    def test_environment_overrides(self, monkeypatch, tmp_path: Path):
        """Test reading values from the environment."""
        monkeypatch.setenv("WATCHER_POLL_INTERVAL_MS", "125")
        monkeypatch.setenv("WATCHER_DIRECTORY", str(tmp_path))
        monkeypatch.setenv("SINK_JSON_PATH", str(tmp_path / "out.json"))
        monkeypatch.setenv("LOG_FORMAT", "Console")

        settings = get_settings()

        assert settings.watcher.poll_interval_ms == 125
        assert settings.watcher.directory == tmp_path
        assert settings.sinks.json_path == tmp_path / "out.json"
        assert settings.logging.format == "console"

    @pytest.mark.parametrize(
        "name, value",
        [
            ("WATCHER_POLL_INTERVAL_MS", "0"),
            ("WATCHER_POLL_INTERVAL_MS", "soon"),
            ("LOG_FORMAT", "xml"),
        ],
    )
    def test_invalid_values(self, monkeypatch, name: str, value: str):
        """Test that invalid settings raise ConfigurationError."""
        monkeypatch.setenv(name, value)

        with pytest.raises(ConfigurationError):
            get_settings()


class TestUtilsPackage:
    """Test cases for the utils package exports."""

    def test_exports_resolve(self):
        """Test that every exported name exists and nothing unused is exported."""
        import utils

        for name in utils.__all__:
            assert hasattr(utils, name)
        assert "logger" not in utils.__all__
        assert not hasattr(utils.logger, "logger")
        assert not hasattr(get_settings(), "is_development")
