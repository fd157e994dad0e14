"""
PollWatch Randomizer Package.

Process-wide random number source.
Requires Python 3.11+.
"""

from randomizer.source import HIGHEST, LOWEST, get_random, next_number, reset_random

__all__ = ["HIGHEST", "LOWEST", "get_random", "next_number", "reset_random"]
