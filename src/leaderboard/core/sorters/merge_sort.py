"\"\"\"Stable top-down merge sort.\"\"\""

from __future__ import annotations

from typing import Sequence

from ...schemas import Player
from ..ordering import ranks_before


class MergeSort:
    """Stable O(n log n) merge sort using O(n) auxiliary space."""

    name = "Merge Sort"

    def sort(self, players: Sequence[Player]) -> list[Player]:
        return self._merge_sort(list(players))

    def _merge_sort(self, players: list[Player]) -> list[Player]:
        if len(players) <= 1:
            return players
        middle = len(players) // 2
        left = self._merge_sort(players[:middle])
        right = self._merge_sort(players[middle:])
        return self._merge(left, right)

    @staticmethod
    def _merge(left: list[Player], right: list[Player]) -> list[Player]:
        merged: list[Player] = []
        i = j = 0
        while i < len(left) and j < len(right):
            # take from the right only when strictly smaller to stay stable
            if ranks_before(right[j], left[i]):
                merged.append(right[j])
                j += 1
            else:
                merged.append(left[i])
                i += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged
