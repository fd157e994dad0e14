"""
PollWatch Shared Random Source.

One process-wide pseudo-random generator, created lazily on first use.
Requires Python 3.11+.
"""

import random
import threading

from utils.config import get_settings
from utils.logger import get_logger

LOWEST = 1
HIGHEST = 100

log = get_logger("randomizer")

_random: random.Random | None = None
_lock = threading.Lock()


def get_random() -> random.Random:
    """
    Get the shared generator, creating it on first call.

    Every caller in the process receives the same instance. It is seeded
    from RANDOM_SEED when that is set.
    """
    global _random

    generator = _random
    if generator is None:
        with _lock:
            generator = _random
            if generator is None:
                seed = get_settings().random.seed
                generator = _random = random.Random(seed)
                log.debug("random_source_created", seeded=seed is not None)
    return generator


def next_number() -> int:
    """Return an integer between 1 and 100 inclusive from the shared generator."""
    generator = get_random()
    with _lock:
        return generator.randint(LOWEST, HIGHEST)


def reset_random() -> None:
    """Drop the shared generator so the next call creates a fresh one."""
    global _random

    with _lock:
        _random = None
