"""
PollWatch Configuration Module.

Centralizes all configuration settings using Pydantic Settings.
Requires Python 3.11+.
"""

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.errors import ConfigurationError

# Load .env file into os.environ at module import time
# This ensures nested BaseSettings classes can read the values
_env_file = Path(__file__).parent.parent / ".env"
if _env_file.exists():
    load_dotenv(_env_file)
else:
    # Try current working directory
    load_dotenv()


class WatcherSettings(BaseSettings):
    """Directory watcher configuration settings."""

    model_config = SettingsConfigDict(env_prefix="WATCHER_")

    poll_interval_ms: int = Field(default=500, gt=0, description="Milliseconds between polls")
    directory: Path | None = Field(default=None, description="Default directory to watch")


class SinkSettings(BaseSettings):
    """Message log sink settings."""

    model_config = SettingsConfigDict(env_prefix="SINK_")

    text_path: Path = Field(default=Path("log.txt"))
    json_path: Path = Field(default=Path("log.json"))


class RandomSettings(BaseSettings):
    """Shared random number source settings."""

    model_config = SettingsConfigDict(env_prefix="RANDOM_")

    seed: int | None = Field(default=None, description="Seed for the shared generator")


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = Field(default="INFO")
    format: str = Field(default="json")  # "json" or "console"
    file_path: Path | None = Field(default=None)

    @field_validator("format")
    @classmethod
    def check_format(cls, v: str) -> str:
        """Only the json and console renderers are supported."""
        v = v.lower()
        if v not in ("json", "console"):
            raise ValueError(f"unsupported log format: {v}")
        return v


class Settings(BaseSettings):
    """Main application settings aggregating all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="PollWatch")
    app_version: str = Field(default="0.1.0")
    environment: str = Field(default="development")

    # Sub-settings
    watcher: WatcherSettings = Field(default_factory=WatcherSettings)
    sinks: SinkSettings = Field(default_factory=SinkSettings)
    random: RandomSettings = Field(default_factory=RandomSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns singleton instance of Settings for performance.

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
