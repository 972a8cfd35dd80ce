"\"\"\"Pydantic schema definitions for leaderboard data.\"\"\""

from __future__ import annotations

from .config import AppConfig, load_config
from .player import Player

__all__ = ["AppConfig", "Player", "load_config"]
