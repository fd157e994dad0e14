"""
PollWatch Observers.

Ready-made observers for printing and logging changed paths.
Requires Python 3.11+.
"""

import sys
from typing import TextIO

from logsinks.message_logger import MessageLogger


class ConsoleObserver:
    """Prints every changed path to a stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def on_file_changed(self, path: str) -> None:
        stream = self._stream or sys.stdout
        print(f"File changed: {path}", file=stream, flush=True)


class SinkObserver:
    """Records every changed path through a message logger."""

    def __init__(self, message_logger: MessageLogger, prefix: str = "File changed: ") -> None:
        self._logger = message_logger
        self._prefix = prefix

    def on_file_changed(self, path: str) -> None:
        self._logger.log(f"{self._prefix}{path}")
