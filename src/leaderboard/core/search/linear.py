"\"\"\"Linear scan search.\"\"\""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from ...schemas import Player


class LinearSearch:
    """O(n) scans for both name lookup and range queries."""

    name = "Linear Search"

    def find_by_name(
        self,
        players: Iterable[Player],
        index: Mapping[str, Player],
        name: str,
    ) -> Player | None:
        for player in players:
            if player.name == name:
                return player
        return None

    def find_in_range(self, ranked: Sequence[Player], low: int, high: int) -> list[Player]:
        return [player for player in ranked if low <= player.score <= high]
