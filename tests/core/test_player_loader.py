from __future__ import annotations

import json
from pathlib import Path

import pytest

from leaderboard import DuplicateNameError, Leaderboard, Player
from leaderboard.core import LinearSearch, MergeSort
from leaderboard.pipeline import PlayerLoadError, PlayerLoader, populate


def write_lines(path: Path, lines: list[str]) -> Path:
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def test_player_loader_reads_records(tmp_path: Path):
    path = write_lines(
        tmp_path / "players.jsonl",
        [
            json.dumps({"name": "Alice", "score": 1500}),
            "",
            json.dumps({"name": "Bob", "score": -3}),
        ],
    )

    players = PlayerLoader().load(path)

    assert [(player.name, player.score) for player in players] == [("Alice", 1500), ("Bob", -3)]


def test_player_loader_raises_on_invalid_json(tmp_path: Path):
    path = write_lines(tmp_path / "players.jsonl", ['{"name": "Alice", "score": 1}', "{invalid"])

    with pytest.raises(PlayerLoadError) as exc:
        PlayerLoader().load(path)
    assert "invalid JSON" in str(exc.value)
    assert len(exc.value.partial) == 1


def test_player_loader_reports_duplicates_and_bad_records(tmp_path: Path):
    path = write_lines(
        tmp_path / "players.jsonl",
        [
            json.dumps({"name": "Alice", "score": 1}),
            json.dumps({"name": "Alice", "score": 2}),
            json.dumps({"name": "", "score": 2}),
            json.dumps({"name": "Carol"}),
        ],
    )

    with pytest.raises(PlayerLoadError) as exc:
        PlayerLoader().load(path)
    error = exc.value
    assert len(error.errors) == 3
    assert error.errors[0] == "line 2: duplicate player 'Alice'"
    assert error.errors[1].startswith("line 3:")
    assert error.errors[2].startswith("line 4:")
    assert [player.name for player in error.partial] == ["Alice"]


def test_populate_stops_on_duplicate():
    board = Leaderboard(MergeSort(), LinearSearch())
    board.add("Alice", 1)
    players = [Player(name="Bob", score=5), Player(name="Alice", score=2), Player(name="Carol", score=3)]

    with pytest.raises(DuplicateNameError):
        populate(board, players)

    assert board.names() == ["Alice", "Bob"]
    assert board.find_by_name("Alice").score == 1


def test_player_loader_rejects_non_integer_scores(tmp_path: Path):
    path = write_lines(
        tmp_path / "players.jsonl",
        [
            json.dumps({"name": "Alice", "score": True}),
            json.dumps({"name": "Bob", "score": "1500"}),
            json.dumps({"name": "Carol", "score": 3}),
        ],
    )

    with pytest.raises(PlayerLoadError) as exc:
        PlayerLoader().load(path)
    assert [error.split(":")[0] for error in exc.value.errors] == ["line 1", "line 2"]
    assert [player.name for player in exc.value.partial] == ["Carol"]


def test_player_loader_reports_invalid_utf8_per_line(tmp_path: Path):
    path = tmp_path / "players.jsonl"
    path.write_bytes(
        b'{"name": "Alice", "score": 1}\n'
        b'{"name": "B\xffb", "score": 2}\n'
        b'{"name": "Carol", "score": 3}\n'
    )

    with pytest.raises(PlayerLoadError) as exc:
        PlayerLoader().load(path)
    assert len(exc.value.errors) == 1
    assert exc.value.errors[0].startswith("line 2: invalid UTF-8")
    assert [player.name for player in exc.value.partial] == ["Alice", "Carol"]
