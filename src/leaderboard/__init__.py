"\"\"\"In-memory ranked leaderboard engine with pluggable strategies.\"\"\""

from __future__ import annotations

__version__ = "0.1.0"

from .core import Leaderboard
from .errors import (
    DuplicateNameError,
    InvalidRangeError,
    LeaderboardError,
    NotFoundError,
    PreconditionViolation,
)
from .schemas import Player

__all__ = [
    "__version__",
    "Leaderboard",
    "Player",
    "LeaderboardError",
    "DuplicateNameError",
    "NotFoundError",
    "InvalidRangeError",
    "PreconditionViolation",
]
