"""
PollWatch Observer Registry.

Ordered collection of change observers with isolated dispatch.
Requires Python 3.11+.
"""

import threading
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from utils.errors import ObserverNotificationError
from utils.logger import LoggerMixin


@runtime_checkable
class FileObserver(Protocol):
    """Anything that wants to hear about changed paths."""

    def on_file_changed(self, path: str) -> None: ...


Observer = FileObserver | Callable[[str], object]


class ObserverRegistry(LoggerMixin):
    """
    Holds observers in registration order and notifies them.

    The list is guarded by a lock. Each notification pass iterates over a
    copy taken when the pass starts, so observers added or removed during
    a pass are only seen by the next one.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._observers: list[Observer] = []
        self._lock = threading.Lock()

    def add(self, observer: Observer) -> None:
        """
        Register an observer.

        The same observer may be added more than once; it is then
        notified once per registration.
        """
        with self._lock:
            self._observers.append(observer)

    def remove(self, observer: Observer) -> None:
        """Remove the first registration of this exact observer, if any."""
        with self._lock:
            for index, registered in enumerate(self._observers):
                if registered is observer:
                    del self._observers[index]
                    return

    def clear(self) -> None:
        """Remove every observer."""
        with self._lock:
            self._observers.clear()

    def notify_all(self, path: str) -> list[ObserverNotificationError]:
        """
        Notify every registered observer of a changed path.

        A failing observer does not stop the pass; its error is logged and
        returned alongside any others.

        Args:
            path: The path that was added or removed

        Returns:
            One ObserverNotificationError per observer that raised
        """
        with self._lock:
            observers = list(self._observers)

        failures: list[ObserverNotificationError] = []
        for observer in observers:
            try:
                _dispatch(observer, path)
            except Exception as e:
                failure = ObserverNotificationError(observer, path, e)
                failures.append(failure)
                self.log.error(
                    "observer_notification_failed",
                    observer=repr(observer),
                    path=path,
                    error=str(e),
                )

        return failures

    @property
    def observers(self) -> tuple[Observer, ...]:
        """Get a copy of the registered observers in order."""
        with self._lock:
            return tuple(self._observers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)

    def __contains__(self, observer: object) -> bool:
        with self._lock:
            return any(registered is observer for registered in self._observers)


def _dispatch(observer: Observer, path: str) -> None:
    """Call the observer's on_file_changed, or the observer itself."""
    handler = getattr(observer, "on_file_changed", None)
    if handler is not None:
        handler(path)
    else:
        observer(path)
