"""
PollWatch File Watcher.

Polling directory watcher that notifies observers of added and removed files.
Requires Python 3.11+.
"""

from pathlib import Path
from typing import Any

from utils.config import get_settings
from utils.logger import LoggerMixin
from watcher.change_detector import ChangeDetector, ChangeSet
from watcher.registry import Observer, ObserverRegistry
from watcher.scheduler import CaptureFn, ErrorCallback, PollingScheduler
from watcher.snapshot import DirectorySnapshot, capture


class FileWatcher(LoggerMixin):
    """
    Watches a single directory for files being added or removed.

    Polls the directory on a fixed interval and calls every observer with
    each changed path. Construction does not start polling; call start()
    or use the watcher as a context manager.
    """

    def __init__(
        self,
        directory: str | Path,
        poll_interval_ms: int | float | None = None,
        *,
        on_error: ErrorCallback | None = None,
        capture_fn: CaptureFn = capture,
    ) -> None:
        """
        Initialize the file watcher.

        Args:
            directory: Directory to watch (not recursive)
            poll_interval_ms: Milliseconds between polls; defaults to the
                configured watcher interval
            on_error: Called with directory access and observer errors
            capture_fn: Snapshot function, replaceable for testing

        Raises:
            ConfigurationError: If the poll interval is not a finite positive
                number no larger than MAX_POLL_INTERVAL_MS
        """
        if poll_interval_ms is None:
            poll_interval_ms = get_settings().watcher.poll_interval_ms

        self._registry = ObserverRegistry()
        self._scheduler = PollingScheduler(
            Path(directory).expanduser().absolute(),
            self._registry,
            poll_interval_ms=poll_interval_ms,
            detector=ChangeDetector(),
            capture_fn=capture_fn,
            on_error=on_error,
        )

    def add_observer(self, observer: Observer) -> None:
        """Register an observer; it is called with every changed path."""
        self._registry.add(observer)
        self.log.debug("observer_added", observer=repr(observer), count=len(self._registry))

    def remove_observer(self, observer: Observer) -> None:
        """Unregister an observer. Unknown observers are ignored."""
        self._registry.remove(observer)
        self.log.debug("observer_removed", observer=repr(observer), count=len(self._registry))

    def start(self) -> None:
        """
        Start watching for file changes.

        Raises:
            DirectoryAccessError: If the directory cannot be read
        """
        self._scheduler.start()

    def stop(self) -> None:
        """Stop watching for file changes."""
        self._scheduler.stop()

    def poll(self) -> ChangeSet | None:
        """Immediately run one poll cycle on the calling thread."""
        return self._scheduler.tick()

    @property
    def is_running(self) -> bool:
        """Check if the watcher is running."""
        return self._scheduler.is_running

    @property
    def directory(self) -> Path:
        """Get the watched directory."""
        return self._scheduler.directory

    @property
    def poll_interval_ms(self) -> float:
        """Get the poll interval in milliseconds."""
        return self._scheduler.poll_interval_ms

    @property
    def observer_count(self) -> int:
        """Get number of registered observers."""
        return len(self._registry)

    @property
    def snapshot(self) -> DirectorySnapshot | None:
        """Get the most recent successful snapshot."""
        return self._scheduler.previous_snapshot

    def __enter__(self) -> "FileWatcher":
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.stop()
