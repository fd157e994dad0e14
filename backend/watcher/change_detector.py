"""
PollWatch Change Detector.

Detects file additions and removals by comparing two snapshots.
Requires Python 3.11+.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from utils.logger import LoggerMixin
from watcher.snapshot import DirectorySnapshot


@dataclass(frozen=True)
class ChangeSet:
    """Represents the files added and removed between two snapshots."""

    added: frozenset[str] = field(default_factory=frozenset)
    removed: frozenset[str] = field(default_factory=frozenset)

    @property
    def has_changes(self) -> bool:
        """Check if there are any changes."""
        return bool(self.added or self.removed)

    @property
    def total_changes(self) -> int:
        """Get total number of changes."""
        return len(self.added) + len(self.removed)

    def ordered_paths(self) -> Iterator[str]:
        """Yield added paths, then removed paths, each sorted by path."""
        yield from sorted(self.added)
        yield from sorted(self.removed)


class ChangeDetector(LoggerMixin):
    """
    Computes the difference between two directory snapshots.

    Stateless: the previous snapshot is owned by the caller.
    """

    def diff(
        self,
        previous: DirectorySnapshot | Iterable[str],
        current: DirectorySnapshot | Iterable[str],
    ) -> ChangeSet:
        """
        Compare two snapshots.

        Args:
            previous: Snapshot (or path collection) from the earlier poll
            current: Snapshot (or path collection) from the latest poll

        Returns:
            ChangeSet with paths only in current as added and paths only
            in previous as removed
        """
        old_paths = _as_paths(previous)
        new_paths = _as_paths(current)

        changes = ChangeSet(
            added=new_paths - old_paths,
            removed=old_paths - new_paths,
        )

        if changes.has_changes:
            self.log.debug(
                "changes_detected",
                added=len(changes.added),
                removed=len(changes.removed),
            )

        return changes


def _as_paths(snapshot: DirectorySnapshot | Iterable[str]) -> frozenset[str]:
    if isinstance(snapshot, DirectorySnapshot):
        return snapshot.paths
    return frozenset(snapshot)
