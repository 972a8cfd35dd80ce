"\"\"\"Ranked collection of players with lazily cached ordering.\"\"\""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from ..errors import DuplicateNameError, InvalidRangeError, NotFoundError
from ..metrics import PerformanceMetrics
from ..schemas import Player

if TYPE_CHECKING:
    from . import SearchStrategy, Sorter


class Leaderboard:
    """Mutable set of uniquely named players, queryable in rank order.

    Ranking is score descending with ties broken by name ascending, so every
    player holds a distinct 1-based rank regardless of insertion order or the
    configured sorter.

    The sorter and search strategy are fixed at construction. Mutations only
    mark the cached order dirty; the next rank-dependent read re-sorts once
    and caches the result until the following mutation.

    Thread safety: there is no internal locking. Callers must guarantee a
    single writer, or wrap every mutating and rank-dependent call in their own
    exclusion mechanism. Concurrent unsynchronized use is undefined behaviour.
    """

    def __init__(self, sorter: Sorter, searcher: SearchStrategy) -> None:
        if sorter is None or searcher is None:
            raise ValueError("Leaderboard requires both a sorter and a search strategy.")
        self._sorter = sorter
        self._searcher = searcher
        # insertion-ordered; doubles as the name index
        self._players: dict[str, Player] = {}
        # None while dirty, otherwise the ranked order of the current players
        self._ranked: tuple[Player, ...] | None = ()
        self._ranks: dict[str, int] = {}
        self._sort_count = 0
        self._logger = structlog.get_logger(__name__)

    @property
    def sorter(self) -> Sorter:
        return self._sorter

    @property
    def searcher(self) -> SearchStrategy:
        return self._searcher

    @property
    def sort_count(self) -> int:
        """Number of re-sorts performed so far."""
        return self._sort_count

    @property
    def is_sorted(self) -> bool:
        return self._ranked is not None

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, name: object) -> bool:
        return name in self._players

    # -- mutations -------------------------------------------------------

    def add(self, name: str, score: int) -> Player:
        if name in self._players:
            raise DuplicateNameError(name)
        player = Player(name=name, score=score)
        self._players[name] = player
        self._invalidate()
        return player

    def update_score(self, name: str, score: int) -> Player:
        if name not in self._players:
            raise NotFoundError(name)
        player = self._players[name].with_score(score)
        self._players[name] = player
        self._invalidate()
        return player

    def remove(self, name: str) -> Player:
        try:
            player = self._players.pop(name)
        except KeyError as exc:
            raise NotFoundError(name) from exc
        self._invalidate()
        return player

    # -- queries ---------------------------------------------------------

    def top_n(self, n: int) -> list[Player]:
        if n <= 0:
            return []
        return list(self._ranked_players()[:n])

    def rank(self, name: str) -> int:
        if name not in self._players:
            raise NotFoundError(name)
        self._ranked_players()
        return self._ranks[name]

    def player_at_rank(self, rank: int) -> Player | None:
        ranked = self._ranked_players()
        if 1 <= rank <= len(ranked):
            return ranked[rank - 1]
        return None

    def find_by_name(self, name: str) -> Player | None:
        return self._searcher.find_by_name(self._players.values(), self._players, name)

    def find_in_score_range(self, low: int, high: int) -> list[Player]:
        if low > high:
            raise InvalidRangeError(low, high)
        return list(self._searcher.find_in_range(self._ranked_players(), low, high))

    def snapshot(self) -> list[Player]:
        """Materialize the full ranking."""
        return list(self._ranked_players())

    def names(self) -> list[str]:
        """Player names in insertion order."""
        return list(self._players)

    # -- ordering state --------------------------------------------------

    def _invalidate(self) -> None:
        self._ranked = None

    def _ranked_players(self) -> tuple[Player, ...]:
        if self._ranked is not None:
            return self._ranked

        metrics = PerformanceMetrics()
        with metrics:
            ranked = tuple(self._sorter.sort(list(self._players.values())))
        self._ranked = ranked
        self._ranks = {player.name: position for position, player in enumerate(ranked, start=1)}
        self._sort_count += 1
        self._logger.debug(
            "leaderboard.resorted",
            sorter=self._sorter.name,
            size=len(ranked),
            elapsed_ms=metrics.elapsed_ms(),
        )
        return ranked
