"\"\"\"Binary search over score-descending sequences.\"\"\""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from ...errors import PreconditionViolation
from ...schemas import Player


class BinarySearch:
    """O(log n + k) range queries over a ranked sequence.

    Name lookups go through the name index. Range queries require the input to
    be sorted by score descending. The ordering is spot-checked on the
    endpoints, every probed midpoint, and the returned slice with its two
    neighbours; a violation raises :class:`PreconditionViolation` instead of
    silently falling back to a scan. Disorder outside those positions is not
    detected, which keeps the check within the query's own cost.
    """

    name = "Binary Search"

    def find_by_name(
        self,
        players: Iterable[Player],
        index: Mapping[str, Player],
        name: str,
    ) -> Player | None:
        return index.get(name)

    def find_in_range(self, ranked: Sequence[Player], low: int, high: int) -> list[Player]:
        size = len(ranked)
        if size == 0:
            return []
        top, bottom = ranked[0].score, ranked[size - 1].score
        if top < bottom:
            self._unsorted()

        start = self._first_at_most(ranked, high, top, bottom)
        end = self._first_below(ranked, low, top, bottom)
        if start >= end:
            return []

        window = [ranked[idx] for idx in range(max(start - 1, 0), min(end + 1, size))]
        for previous, current in zip(window, window[1:]):
            if previous.score < current.score:
                self._unsorted()
        offset = 1 if start > 0 else 0
        return window[offset:offset + end - start]

    def _first_at_most(self, ranked: Sequence[Player], bound: int, top: int, bottom: int) -> int:
        """Index of the first player with ``score <= bound``."""
        lo, hi = 0, len(ranked)
        while lo < hi:
            mid = (lo + hi) // 2
            score = self._probe(ranked, mid, top, bottom)
            if score > bound:
                lo = mid + 1
            else:
                hi = mid
        return lo

    def _first_below(self, ranked: Sequence[Player], bound: int, top: int, bottom: int) -> int:
        """Index of the first player with ``score < bound``."""
        lo, hi = 0, len(ranked)
        while lo < hi:
            mid = (lo + hi) // 2
            score = self._probe(ranked, mid, top, bottom)
            if score >= bound:
                lo = mid + 1
            else:
                hi = mid
        return lo

    def _probe(self, ranked: Sequence[Player], idx: int, top: int, bottom: int) -> int:
        score = ranked[idx].score
        if not bottom <= score <= top:
            self._unsorted()
        return score

    @staticmethod
    def _unsorted() -> None:
        raise PreconditionViolation(
            "BinarySearch.find_in_range requires players sorted by score descending"
        )
