"""
PollWatch Log Sinks Package.

Text and JSON message persistence.
Requires Python 3.11+.
"""

from logsinks.message_logger import MessageLogger
from logsinks.sinks import JsonFileSink, LogDocument, LogSink, TextFileSink

__all__ = [
    "JsonFileSink",
    "LogDocument",
    "LogSink",
    "MessageLogger",
    "TextFileSink",
]
