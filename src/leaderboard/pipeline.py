"\"\"\"Player loading and leaderboard report output.\"\"\""

from __future__ import annotations

import json
from pathlib import Path

import pendulum
from pydantic import ValidationError

from .core import Leaderboard
from .schemas import Player
from . import __version__


class PlayerLoadError(ValueError):
    """Raised when player loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[Player]):
        super().__init__("Player loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Player loading failed: {self.errors}"


class PlayerLoader:
    """Load ``{"name": ..., "score": ...}`` records from JSON lines."""

    def load(self, path: Path) -> list[Player]:
        players: list[Player] = []
        seen: set[str] = set()
        errors: list[str] = []
        with path.open("rb") as handle:
            for idx, line in enumerate(handle, start=1):
                try:
                    raw = line.decode("utf-8").strip()
                except UnicodeDecodeError as exc:
                    errors.append(f"line {idx}: invalid UTF-8 ({exc.reason})")
                    continue
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                try:
                    player = Player.model_validate(record)
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc.errors()[0]['msg']}")
                    continue
                if player.name in seen:
                    errors.append(f"line {idx}: duplicate player '{player.name}'")
                    continue
                seen.add(player.name)
                players.append(player)
        if errors:
            raise PlayerLoadError(errors, players)
        return players


def populate(leaderboard: Leaderboard, players: list[Player]) -> Leaderboard:
    """Add players to ``leaderboard``; stops at the first duplicate."""
    for player in players:
        leaderboard.add(player.name, player.score)
    return leaderboard


def ranked_rows(players: list[Player]) -> list[dict]:
    return [
        {"rank": position, "name": player.name, "score": player.score}
        for position, player in enumerate(players, start=1)
    ]


class OutputWriter:
    """Persist leaderboard reports."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


def build_report(results: list[dict], **metadata) -> dict:
    """Wrap result rows with a timestamped metadata block."""
    return {
        "metadata": {
            **metadata,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        },
        "results": results,
    }
