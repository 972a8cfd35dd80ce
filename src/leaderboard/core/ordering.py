"\"\"\"Ranking order shared by every sorter and search strategy.\"\"\""

from __future__ import annotations

from ..schemas import Player


def ranking_key(player: Player) -> tuple[int, str]:
    """Sort key for score descending, then name ascending."""
    return (-player.score, player.name)


def ranks_before(left: Player, right: Player) -> bool:
    """Return True when ``left`` sits strictly above ``right`` in the ranking."""
    return ranking_key(left) < ranking_key(right)

