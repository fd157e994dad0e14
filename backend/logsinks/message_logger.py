"""
PollWatch Message Logger.

Writes messages through a log sink and saves after each one.
Requires Python 3.11+.
"""

from logsinks.sinks import LogSink


class MessageLogger:
    """Records messages through a single sink."""

    def __init__(self, sink: LogSink) -> None:
        self._sink = sink

    @property
    def sink(self) -> LogSink:
        return self._sink

    def log(self, message: str) -> None:
        """Write the message and save the sink straight away."""
        self._sink.write(message)
        self._sink.save()
