"""
PollWatch Polling Scheduler.

Runs the snapshot, diff and notify cycle on a fixed interval.
Requires Python 3.11+.
"""

import math
import threading
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from utils.errors import ConfigurationError, DirectoryAccessError
from utils.logger import LoggerMixin
from watcher.change_detector import ChangeDetector, ChangeSet
from watcher.registry import ObserverRegistry
from watcher.snapshot import DirectorySnapshot, capture

DEFAULT_POLL_INTERVAL_MS = 500
# Longest wait threading.Event accepts
MAX_POLL_INTERVAL_MS = threading.TIMEOUT_MAX * 1000

ErrorCallback = Callable[[Exception], object]
CaptureFn = Callable[[str | Path], DirectorySnapshot]


class SchedulerState(str, Enum):
    """Lifecycle states of a polling scheduler."""

    STOPPED = "stopped"
    RUNNING = "running"


def validate_poll_interval(poll_interval_ms: object) -> float:
    """
    Check that a poll interval is a positive number of milliseconds.

    Raises:
        ConfigurationError: If the interval is not a finite positive number
            no larger than MAX_POLL_INTERVAL_MS
    """
    if isinstance(poll_interval_ms, bool) or not isinstance(poll_interval_ms, (int, float)):
        raise ConfigurationError(f"poll interval must be a number, got {poll_interval_ms!r}")
    try:
        value = float(poll_interval_ms)
    except OverflowError as e:
        raise ConfigurationError(f"poll interval is too large: {poll_interval_ms}") from e
    if not math.isfinite(value):
        raise ConfigurationError(f"poll interval must be finite, got {poll_interval_ms}")
    if value <= 0:
        raise ConfigurationError(f"poll interval must be positive, got {poll_interval_ms}")
    if value > MAX_POLL_INTERVAL_MS:
        raise ConfigurationError(
            f"poll interval must be at most {MAX_POLL_INTERVAL_MS} ms, got {poll_interval_ms}"
        )
    return value


class PollingScheduler(LoggerMixin):
    """
    Polls one directory and pushes changed paths through a registry.

    A single daemon thread fires a tick every poll interval, waiting the
    full interval after each tick finishes, so ticks never overlap. Only
    the tick handler replaces the previous snapshot, and it does so under
    the tick lock once all notifications for the tick have been sent.
    """

    def __init__(
        self,
        directory: str | Path,
        registry: ObserverRegistry,
        *,
        poll_interval_ms: int | float = DEFAULT_POLL_INTERVAL_MS,
        detector: ChangeDetector | None = None,
        capture_fn: CaptureFn = capture,
        on_error: ErrorCallback | None = None,
    ) -> None:
        """
        Initialize the scheduler in the stopped state.

        Args:
            directory: Directory to poll
            registry: Observers to notify of changed paths
            poll_interval_ms: Milliseconds between ticks
            detector: Snapshot comparer (a new ChangeDetector by default)
            capture_fn: Function producing a snapshot of the directory
            on_error: Called with every error a tick reports

        Raises:
            ConfigurationError: If poll_interval_ms is not a finite positive
                number no larger than MAX_POLL_INTERVAL_MS
        """
        self._poll_interval_ms = validate_poll_interval(poll_interval_ms)
        self._directory = Path(directory)
        self._registry = registry
        self._detector = detector or ChangeDetector()
        self._capture = capture_fn
        self._on_error = on_error

        self._state = SchedulerState.STOPPED
        self._previous: DirectorySnapshot | None = None
        self._state_lock = threading.Lock()
        self._tick_lock = threading.RLock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._tick_owner: int | None = None

        self._tick_count = 0
        self._failed_tick_count = 0

    def start(self) -> None:
        """
        Take the baseline snapshot and begin ticking.

        Does nothing if already running.

        Raises:
            DirectoryAccessError: If the baseline snapshot cannot be taken;
                the scheduler then stays stopped
        """
        # Lock order is tick lock, then state lock: observers running inside
        # a tick may call stop() or start()
        with self._tick_lock, self._state_lock:
            if self._state is SchedulerState.RUNNING:
                return

            baseline = self._capture(self._directory)
            self._previous = baseline

            self._stop_event = threading.Event()
            self._state = SchedulerState.RUNNING
            self._thread = threading.Thread(
                target=self._run,
                args=(self._stop_event,),
                name=f"PollingScheduler({self._directory.name})",
                daemon=True,
            )
            self._thread.start()

        self.log.info(
            "scheduler_started",
            directory=str(self._directory),
            poll_interval_ms=self._poll_interval_ms,
            file_count=len(baseline),
        )

    def stop(self) -> None:
        """
        Stop ticking.

        Waits for an in-flight tick to finish unless called from inside
        that tick. Safe to call more than once.
        """
        with self._state_lock:
            if self._state is SchedulerState.STOPPED:
                return

            self._state = SchedulerState.STOPPED
            self._stop_event.set()
            thread = self._thread
            self._thread = None

        # Joining from inside a tick would wait on ourselves
        in_tick = self._tick_owner == threading.get_ident()
        if thread is not None and thread is not threading.current_thread() and not in_tick:
            thread.join()

        self.log.info(
            "scheduler_stopped",
            directory=str(self._directory),
            ticks=self._tick_count,
            failed_ticks=self._failed_tick_count,
        )

    def tick(self) -> ChangeSet | None:
        """
        Run one poll cycle synchronously.

        Returns:
            The changes found, or None if the scheduler is not running or
            the directory could not be read
        """
        with self._tick_lock:
            outer_owner = self._tick_owner
            self._tick_owner = threading.get_ident()
            try:
                changes = self._poll()
            finally:
                self._tick_owner = outer_owner

        if changes is not None and changes.has_changes:
            self.log.info(
                "directory_changed",
                directory=str(self._directory),
                added=len(changes.added),
                removed=len(changes.removed),
            )

        return changes

    def _poll(self) -> ChangeSet | None:
        """Snapshot, diff and notify. Caller holds the tick lock."""
        if self._state is not SchedulerState.RUNNING or self._previous is None:
            return None

        try:
            current = self._capture(self._directory)
        except DirectoryAccessError as e:
            self._failed_tick_count += 1
            self.log.warning(
                "snapshot_capture_failed",
                directory=e.directory,
                reason=e.reason,
            )
            self._report(e)
            return None

        changes = self._detector.diff(self._previous, current)
        for path in changes.ordered_paths():
            for failure in self._registry.notify_all(path):
                self._report(failure)

        self._previous = current
        self._tick_count += 1
        return changes

    def _run(self, stop_event: threading.Event) -> None:
        """Worker loop: wait one interval, tick, repeat until stopped."""
        interval = min(self._poll_interval_ms / 1000.0, threading.TIMEOUT_MAX)
        try:
            while not stop_event.wait(interval):
                try:
                    self.tick()
                except Exception as e:
                    self.log.exception("tick_failed", directory=str(self._directory))
                    self._report(e)
        except Exception as e:
            self.log.exception("worker_died", directory=str(self._directory))
            with self._state_lock:
                if self._stop_event is stop_event:
                    self._state = SchedulerState.STOPPED
                    self._thread = None
            self._report(e)

    def _report(self, error: Exception) -> None:
        """Hand an error to the error callback, if one is set."""
        if self._on_error is None:
            return
        try:
            self._on_error(error)
        except Exception as e:
            self.log.error("error_callback_failed", error=str(e))

    @property
    def state(self) -> SchedulerState:
        """Get the current lifecycle state."""
        return self._state

    @property
    def is_running(self) -> bool:
        """Check if the scheduler is running."""
        return self._state is SchedulerState.RUNNING

    @property
    def previous_snapshot(self) -> DirectorySnapshot | None:
        """Get the snapshot from the last completed tick (or the baseline)."""
        return self._previous

    @property
    def directory(self) -> Path:
        """Get the polled directory."""
        return self._directory

    @property
    def poll_interval_ms(self) -> float:
        """Get the interval between ticks in milliseconds."""
        return self._poll_interval_ms

    @property
    def tick_count(self) -> int:
        """Get the number of ticks completed."""
        return self._tick_count

    @property
    def failed_tick_count(self) -> int:
        """Get the number of ticks skipped because the directory was unreadable."""
        return self._failed_tick_count
