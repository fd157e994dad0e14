"""
Tests for Directory Snapshot.

Requires Python 3.11+.
"""

import dataclasses
from pathlib import Path

import pytest

from utils.errors import DirectoryAccessError
from watcher.snapshot import DirectorySnapshot, capture


class TestCapture:
    """Test cases for capture()."""

    def test_lists_files(self, watched_dir: Path):
        """Test that every file is captured with its absolute path."""
        snapshot = capture(watched_dir)

        assert snapshot.paths == {
            str(watched_dir / "a.txt"),
            str(watched_dir / "b.txt"),
        }
        assert snapshot.directory == str(watched_dir)
        assert len(snapshot) == 2

    def test_skips_subdirectories(self, watched_dir: Path):
        """Test that directories and their contents are not included."""
        nested = watched_dir / "nested"
        nested.mkdir()
        (nested / "deep.txt").write_text("deep")

        snapshot = capture(watched_dir)

        assert str(nested) not in snapshot
        assert str(nested / "deep.txt") not in snapshot
        assert len(snapshot) == 2

    def test_empty_directory(self, tmp_path: Path):
        """Test capturing a directory with no files."""
        snapshot = capture(tmp_path)
        assert len(snapshot) == 0
        assert list(snapshot) == []

    def test_relative_path_is_made_absolute(self, watched_dir: Path, monkeypatch):
        """Test that relative directories produce absolute paths."""
        monkeypatch.chdir(watched_dir.parent)

        snapshot = capture(watched_dir.name)

        assert str(watched_dir / "a.txt") in snapshot

    def test_missing_directory(self, tmp_path: Path):
        """Test that a missing directory raises DirectoryAccessError."""
        missing = tmp_path / "missing"

        with pytest.raises(DirectoryAccessError) as exc_info:
            capture(missing)

        assert exc_info.value.directory == str(missing)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_file_instead_of_directory(self, watched_dir: Path):
        """Test that a regular file path raises DirectoryAccessError."""
        with pytest.raises(DirectoryAccessError):
            capture(watched_dir / "a.txt")


class TestDirectorySnapshot:
    """Test cases for DirectorySnapshot."""

    def test_is_immutable(self, watched_dir: Path):
        """Test that snapshots cannot be modified."""
        snapshot = capture(watched_dir)

        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.paths = frozenset()  # type: ignore[misc]

    def test_fresh_snapshot_per_capture(self, watched_dir: Path):
        """Test that later captures do not affect earlier snapshots."""
        first = capture(watched_dir)
        (watched_dir / "c.txt").write_text("c")
        second = capture(watched_dir)

        assert len(first) == 2
        assert len(second) == 3

    def test_membership(self):
        """Test container behaviour."""
        snapshot = DirectorySnapshot(directory="/d", paths=frozenset({"/d/x"}))

        assert "/d/x" in snapshot
        assert "/d/y" not in snapshot
        assert snapshot.captured_at > 0
