"\"\"\"In-place quicksort over a private copy.\"\"\""

from __future__ import annotations

from typing import Sequence

from ...schemas import Player
from ..ordering import ranking_key, ranks_before


class QuickSort:
    """Quicksort with a median-of-three pivot and Lomuto partitioning.

    Average cost is O(n log n). The worst case remains O(n^2): median-of-three
    makes it unlikely on already ranked or reversed input, but crafted inputs
    can still drive every partition to size n - 1. The sort is not stable;
    because the ranking key is a total order over unique names, the output
    is nonetheless identical to any stable sort.

    The caller's sequence is copied first and never modified. Recursion is
    applied to the smaller partition only, bounding stack depth to O(log n).
    """

    name = "Quick Sort"

    def sort(self, players: Sequence[Player]) -> list[Player]:
        items = list(players)
        self._quick_sort(items, 0, len(items) - 1)
        return items

    def _quick_sort(self, items: list[Player], low: int, high: int) -> None:
        while low < high:
            pivot_index = self._partition(items, low, high)
            if pivot_index - low < high - pivot_index:
                self._quick_sort(items, low, pivot_index - 1)
                low = pivot_index + 1
            else:
                self._quick_sort(items, pivot_index + 1, high)
                high = pivot_index - 1

    def _partition(self, items: list[Player], low: int, high: int) -> int:
        self._move_median_to_end(items, low, high)
        pivot = items[high]
        store = low
        for idx in range(low, high):
            if ranks_before(items[idx], pivot):
                items[store], items[idx] = items[idx], items[store]
                store += 1
        items[store], items[high] = items[high], items[store]
        return store

    @staticmethod
    def _move_median_to_end(items: list[Player], low: int, high: int) -> None:
        middle = (low + high) // 2
        candidates = sorted((low, middle, high), key=lambda idx: ranking_key(items[idx]))
        median = candidates[1]
        items[median], items[high] = items[high], items[median]
