"""
PollWatch Test Configuration.

Pytest fixtures and configuration.
Requires Python 3.11+.
"""

import threading
import time
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from randomizer import reset_random
from utils.config import get_settings


class RecordingObserver:
    """Observer that remembers every path it was notified about."""

    def __init__(self, name: str = "recorder") -> None:
        self.name = name
        self.paths: list[str] = []
        self.notified = threading.Event()
        self._lock = threading.Lock()

    def on_file_changed(self, path: str) -> None:
        with self._lock:
            self.paths.append(path)
        self.notified.set()

    def __repr__(self) -> str:
        return f"RecordingObserver({self.name!r})"


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Re-read settings from the environment for every test."""
    get_settings.cache_clear()
    reset_random()
    yield
    get_settings.cache_clear()
    reset_random()


@pytest.fixture
def watched_dir(tmp_path: Path) -> Path:
    """Create a directory holding a.txt and b.txt."""
    directory = tmp_path / "watched"
    directory.mkdir()
    (directory / "a.txt").write_text("a")
    (directory / "b.txt").write_text("b")
    return directory


@pytest.fixture
def make_recorder() -> Callable[[str], RecordingObserver]:
    """Factory for recording observers."""
    return RecordingObserver


@pytest.fixture
def recorder() -> RecordingObserver:
    """A single recording observer."""
    return RecordingObserver()


def _wait_for(predicate: Callable[[], bool], timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


@pytest.fixture
def wait_for() -> Callable[..., bool]:
    """Poll a predicate until it holds or a timeout expires."""
    return _wait_for
