"\"\"\"Core leaderboard engine components.\"\"\""

from __future__ import annotations

from typing import Iterable, Mapping, Protocol, Sequence, runtime_checkable

from ..schemas import Player

# NOTE: keep imports explicit for export clarity.
from .leaderboard import Leaderboard
from .ordering import ranking_key
from .search import SEARCHERS, BinarySearch, LinearSearch
from .sorters import SORTERS, BuiltinSort, MergeSort, QuickSort


@runtime_checkable
class Sorter(Protocol):
    """Sorter contract producing the ranked order of a player sequence."""

    name: str

    def sort(self, players: Sequence[Player]) -> list[Player]:
        """Return a new list in ranking order without mutating ``players``."""


@runtime_checkable
class SearchStrategy(Protocol):
    """Search contract for name lookups and inclusive score ranges."""

    name: str

    def find_by_name(
        self,
        players: Iterable[Player],
        index: Mapping[str, Player],
        name: str,
    ) -> Player | None:
        """Return the player with exactly ``name``, or None."""

    def find_in_range(self, ranked: Sequence[Player], low: int, high: int) -> list[Player]:
        """Return players with ``low <= score <= high`` from a score-descending sequence."""


__all__ = [
    "Leaderboard",
    "Sorter",
    "SearchStrategy",
    "MergeSort",
    "QuickSort",
    "BuiltinSort",
    "LinearSearch",
    "BinarySearch",
    "SORTERS",
    "SEARCHERS",
    "ranking_key",
]
