"\"\"\"Error taxonomy for leaderboard operations.\"\"\""

from __future__ import annotations

from typing import Sequence


class LeaderboardError(Exception):
    """Base class for all leaderboard failures."""


class DuplicateNameError(LeaderboardError):
    """Raised when adding a player whose name is already registered."""

    def __init__(self, name: str):
        super().__init__(f"Player already exists: {name!r}")
        self.name = name


class NotFoundError(LeaderboardError):
    """Raised when a mutation or rank query targets an unknown player."""

    def __init__(self, name: str, suggestions: Sequence[str] | None = None):
        super().__init__(f"Player not found: {name!r}")
        self.name = name
        self.suggestions = list(suggestions or [])


class InvalidRangeError(LeaderboardError):
    """Raised for score range queries where ``low > high``."""

    def __init__(self, low: int, high: int):
        super().__init__(f"Invalid score range: low={low} is greater than high={high}")
        self.low = low
        self.high = high


class PreconditionViolation(LeaderboardError):
    """Raised when a strategy receives input that breaks its contract.

    This signals a wiring bug (e.g. binary search over an unsorted sequence),
    not a recoverable runtime condition.
    """


__all__ = [
    "LeaderboardError",
    "DuplicateNameError",
    "NotFoundError",
    "InvalidRangeError",
    "PreconditionViolation",
]
