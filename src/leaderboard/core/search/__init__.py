"\"\"\"Search strategy implementations for the leaderboard.\"\"\""

from .binary import BinarySearch
from .linear import LinearSearch

SEARCHERS = {
    "linear": LinearSearch,
    "binary": BinarySearch,
}

__all__ = ["BinarySearch", "LinearSearch", "SEARCHERS"]
