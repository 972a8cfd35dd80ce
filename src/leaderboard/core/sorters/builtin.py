"\"\"\"Baseline sorter backed by Python's built-in TimSort.\"\"\""

from __future__ import annotations

from typing import Sequence

from ...schemas import Player
from ..ordering import ranking_key


class BuiltinSort:
    """Stable TimSort via :func:`sorted`, used as the reference baseline."""

    name = "TimSort (built-in)"

    def sort(self, players: Sequence[Player]) -> list[Player]:
        return sorted(players, key=ranking_key)
