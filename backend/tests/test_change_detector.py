"""
Tests for Change Detector.

Requires Python 3.11+.
"""

import pytest

from watcher.change_detector import ChangeDetector, ChangeSet
from watcher.snapshot import DirectorySnapshot


def _snapshot(*names: str) -> DirectorySnapshot:
    return DirectorySnapshot(directory="/w", paths=frozenset(f"/w/{n}" for n in names))


class TestChangeDetector:
    """Test cases for ChangeDetector."""

    @pytest.fixture
    def detector(self) -> ChangeDetector:
        """Create a change detector instance."""
        return ChangeDetector()

    def test_added_and_removed(self, detector: ChangeDetector):
        """Test that new paths are added and missing paths are removed."""
        changes = detector.diff(_snapshot("a", "b"), _snapshot("b", "c"))

        assert changes.added == {"/w/c"}
        assert changes.removed == {"/w/a"}
        assert changes.has_changes
        assert changes.total_changes == 2

    def test_same_snapshot_has_no_changes(self, detector: ChangeDetector):
        """Test that diffing a snapshot with itself yields nothing."""
        snapshot = _snapshot("a", "b")
        changes = detector.diff(snapshot, snapshot)

        assert changes.added == frozenset()
        assert changes.removed == frozenset()
        assert not changes.has_changes

    @pytest.mark.parametrize(
        "before, after",
        [
            ((), ("a",)),
            (("a",), ()),
            (("a", "b", "c"), ("c", "d", "e")),
            (("x", "y"), ("x", "y")),
        ],
    )
    def test_partitions_symmetric_difference(self, detector: ChangeDetector, before, after):
        """Test that added and removed split the symmetric difference exactly."""
        old, new = _snapshot(*before), _snapshot(*after)
        changes = detector.diff(old, new)

        assert changes.added | changes.removed == old.paths ^ new.paths
        assert not changes.added & changes.removed
        assert changes.added <= new.paths
        assert changes.removed <= old.paths

    def test_accepts_plain_sets(self, detector: ChangeDetector):
        """Test diffing plain path collections."""
        changes = detector.diff({"/w/a"}, ["/w/a", "/w/b"])
        assert changes.added == {"/w/b"}
        assert changes.removed == frozenset()


class TestChangeSet:
    """Test cases for ChangeSet."""

    def test_ordered_paths(self):
        """Test that added paths come first, each group sorted."""
        changes = ChangeSet(
            added=frozenset({"/w/z", "/w/b"}),
            removed=frozenset({"/w/y", "/w/a"}),
        )

        assert list(changes.ordered_paths()) == ["/w/b", "/w/z", "/w/a", "/w/y"]

    def test_empty(self):
        """Test an empty change set."""
        changes = ChangeSet()
        assert not changes.has_changes
        assert changes.total_changes == 0
        assert list(changes.ordered_paths()) == []
