"""
PollWatch Utilities Package.

Common utilities shared across all modules.
Requires Python 3.11+.
"""

from utils.config import Settings, get_settings
from utils.errors import (
    ConfigurationError,
    DirectoryAccessError,
    ObserverNotificationError,
    PollWatchError,
    SinkClosedError,
)
from utils.logger import configure_logging, get_logger, LoggerMixin

__all__ = [
    "Settings",
    "get_settings",
    "ConfigurationError",
    "DirectoryAccessError",
    "ObserverNotificationError",
    "PollWatchError",
    "SinkClosedError",
    "configure_logging",
    "get_logger",
    "LoggerMixin",
]
