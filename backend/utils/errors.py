"""
PollWatch Error Types.

Exception taxonomy shared by the watcher, sinks and configuration.
Requires Python 3.11+.
"""

from pathlib import Path
from typing import Any


class PollWatchError(Exception):
    """Base class for all PollWatch errors."""


class ConfigurationError(PollWatchError, ValueError):
    """Invalid configuration detected at construction time."""


class DirectoryAccessError(PollWatchError):
    """
    A watched directory could not be listed.

    Raised when the path is missing, is not a directory, or is unreadable.
    """

    def __init__(self, directory: str | Path, reason: str) -> None:
        self.directory = str(directory)
        self.reason = reason
        super().__init__(f"Cannot read directory {self.directory}: {reason}")


class ObserverNotificationError(PollWatchError):
    """An observer raised while being notified of a changed path."""

    def __init__(self, observer: Any, path: str, cause: BaseException) -> None:
        self.observer = observer
        self.path = path
        self.cause = cause
        super().__init__(f"Observer {observer!r} failed for {path}: {cause!r}")


class SinkClosedError(PollWatchError):
    """A message was written to a sink that has already been closed."""
