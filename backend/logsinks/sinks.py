"""
PollWatch Log Sinks.

Destinations that durably record text messages.
Requires Python 3.11+.
"""

import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from utils.errors import SinkClosedError
from utils.logger import LoggerMixin


@runtime_checkable
class LogSink(Protocol):
    """Accepts text messages and records them somewhere durable."""

    def write(self, message: str) -> None: ...

    def save(self) -> None: ...

    def close(self) -> None: ...


class LogDocument(BaseModel):
    """On-disk layout of a JSON log file."""

    model_config = ConfigDict(populate_by_name=True)

    logs: list[str] = Field(default_factory=list, alias="Logs")


class _BaseSink(LoggerMixin):
    """Shared open/closed bookkeeping and context manager support."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()
        self._closed = False

    @property
    def path(self) -> Path:
        """Get the file this sink writes to."""
        return self._path

    @property
    def closed(self) -> bool:
        """Check if the sink has been closed."""
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise SinkClosedError(f"{self.__class__.__name__} for {self._path} is closed")

    def save(self) -> None:
        """Flush buffered messages. Nothing is buffered by default."""

    def close(self) -> None:
        """Close the sink; further writes raise SinkClosedError."""
        self._closed = True

    def __enter__(self) -> "_BaseSink":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class TextFileSink(_BaseSink):
    """Appends each message as one line of a UTF-8 text file."""

    def write(self, message: str) -> None:
        """
        Append a message to the file.

        Raises:
            SinkClosedError: If the sink has been closed
        """
        with self._lock:
            self._check_open()
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(message + "\n")


class JsonFileSink(_BaseSink):
    """
    Buffers messages and writes them as a JSON document.

    The file holds ``{"Logs": [...]}`` and is rewritten in full on every
    save, through a temporary file so readers never see a partial document.
    Closing the sink saves it one last time.
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__(path)
        self._entries: list[str] = []

    @property
    def entries(self) -> list[str]:
        """Get a copy of the buffered messages."""
        with self._lock:
            return list(self._entries)

    def write(self, message: str) -> None:
        """
        Buffer a message until the next save.

        Raises:
            SinkClosedError: If the sink has been closed
        """
        with self._lock:
            self._check_open()
            self._entries.append(message)

    def save(self) -> None:
        """Write all buffered messages to the JSON file."""
        with self._lock:
            self._check_open()
            self._dump()

    def close(self) -> None:
        """Save and close. Closing twice is a no-op."""
        with self._lock:
            if self._closed:
                return
            self._dump()
            self._closed = True

    def _dump(self) -> None:
        document = LogDocument(logs=self._entries)
        payload = document.model_dump_json(by_alias=True, indent=2)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        self.log.debug("json_log_saved", path=str(self._path), entries=len(self._entries))
