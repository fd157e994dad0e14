"""
PollWatch Directory Snapshot.

Captures the set of regular files present in one directory.
Requires Python 3.11+.
"""

import os
import time
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from utils.errors import DirectoryAccessError


@dataclass(frozen=True)
class DirectorySnapshot:
    """The absolute paths of the files found in a directory at one instant."""

    directory: str
    paths: frozenset[str] = field(default_factory=frozenset)
    captured_at: float = field(default_factory=time.time)

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __contains__(self, path: object) -> bool:
        return path in self.paths


def capture(directory: str | Path) -> DirectorySnapshot:
    """
    List the regular files directly inside a directory.

    Subdirectories are not descended into. Entries that disappear while
    the directory is being listed are skipped.

    Args:
        directory: Directory to list

    Returns:
        Snapshot holding the absolute path of every file found

    Raises:
        DirectoryAccessError: If the directory is missing, is not a
            directory, or cannot be read
    """
    root = os.path.abspath(os.fspath(directory))
    paths: set[str] = set()

    try:
        with os.scandir(root) as entries:
            for entry in entries:
                try:
                    if entry.is_file():
                        paths.add(os.path.join(root, entry.name))
                except OSError:
                    continue
    except FileNotFoundError as e:
        raise DirectoryAccessError(root, "directory does not exist") from e
    except NotADirectoryError as e:
        raise DirectoryAccessError(root, "path is not a directory") from e
    except PermissionError as e:
        raise DirectoryAccessError(root, "permission denied") from e
    except OSError as e:
        raise DirectoryAccessError(root, e.strerror or str(e)) from e

    return DirectorySnapshot(directory=root, paths=frozenset(paths))
