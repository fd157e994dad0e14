"""
PollWatch File Watcher Package.

Polling directory monitoring with observer dispatch.
Requires Python 3.11+.
"""

from watcher.change_detector import ChangeDetector, ChangeSet
from watcher.file_watcher import FileWatcher
from watcher.registry import FileObserver, ObserverRegistry
from watcher.scheduler import PollingScheduler, SchedulerState
from watcher.snapshot import DirectorySnapshot, capture

__all__ = [
    "ChangeDetector",
    "ChangeSet",
    "DirectorySnapshot",
    "FileObserver",
    "FileWatcher",
    "ObserverRegistry",
    "PollingScheduler",
    "SchedulerState",
    "capture",
]
