#!/usr/bin/env python3
"""
PollWatch Directory Watch Script.

Watches a directory for a while, printing and logging every added or
removed file, then draws two numbers from the shared random source.
Requires Python 3.11+.

Usage:
    python scripts/watch_directory.py /path/to/directory --duration 30
"""

import argparse
import sys
import time
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from logsinks import JsonFileSink, MessageLogger, TextFileSink
from randomizer import get_random, next_number
from utils.config import get_settings
from utils.errors import PollWatchError
from utils.logger import configure_logging, get_logger
from watcher import FileWatcher
from watcher.observers import ConsoleObserver, SinkObserver


configure_logging()
logger = get_logger("watch_directory")


def watch(
    directory: Path,
    duration: float,
    poll_interval_ms: int | None,
    text_log: Path,
    json_log: Path,
) -> int:
    """
    Watch a directory for a fixed duration.

    Args:
        directory: Directory to watch
        duration: Seconds to watch for
        poll_interval_ms: Poll interval override
        text_log: Text file receiving one line per change
        json_log: JSON file receiving every change on close

    Returns:
        Number of errors reported while watching
    """
    errors: list[Exception] = []

    def on_error(error: Exception) -> None:
        errors.append(error)
        logger.warning("watch_error", error=str(error))

    watcher = FileWatcher(directory, poll_interval_ms, on_error=on_error)
    watcher.add_observer(ConsoleObserver())

    with TextFileSink(text_log) as text_sink, JsonFileSink(json_log) as json_sink:
        watcher.add_observer(SinkObserver(MessageLogger(text_sink)))
        watcher.add_observer(SinkObserver(MessageLogger(json_sink)))

        logger.info(
            "watching_directory",
            path=str(watcher.directory),
            duration=duration,
            poll_interval_ms=watcher.poll_interval_ms,
        )
        with watcher:
            try:
                time.sleep(duration)
            except KeyboardInterrupt:
                logger.info("watch_interrupted")

    return len(errors)


def main() -> int:
    """Main entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Watch a directory for added and removed files"
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=settings.watcher.directory,
        help="Directory to watch (default: WATCHER_DIRECTORY)",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=10.0,
        help="Seconds to watch for",
    )
    parser.add_argument(
        "--interval-ms",
        type=int,
        default=None,
        help="Poll interval in milliseconds (default: WATCHER_POLL_INTERVAL_MS)",
    )
    parser.add_argument(
        "--text-log",
        type=Path,
        default=settings.sinks.text_path,
        help="Text log file",
    )
    parser.add_argument(
        "--json-log",
        type=Path,
        default=settings.sinks.json_path,
        help="JSON log file",
    )

    args = parser.parse_args()

    if args.directory is None:
        parser.error("a directory is required (argument or WATCHER_DIRECTORY)")

    try:
        error_count = watch(
            directory=args.directory,
            duration=args.duration,
            poll_interval_ms=args.interval_ms,
            text_log=args.text_log,
            json_log=args.json_log,
        )
    except PollWatchError as e:
        logger.error("watch_failed", error=str(e))
        return 1

    first = get_random()
    second = get_random()
    print(next_number())
    print(next_number())
    print(first is second)

    return 1 if error_count else 0


if __name__ == "__main__":
    sys.exit(main())
