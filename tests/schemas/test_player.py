from __future__ import annotations

import pytest
from pydantic import ValidationError

from leaderboard import Leaderboard
from leaderboard.core import LinearSearch, MergeSort
from leaderboard.schemas import Player


def test_player_is_frozen():
    player = Player(name="Alice", score=1500)

    with pytest.raises(ValidationError):
        player.score = 10  # type: ignore[misc]


def test_with_score_returns_replacement():
    player = Player(name="Alice", score=1500)

    updated = player.with_score(1900)

    assert updated == Player(name="Alice", score=1900)
    assert player.score == 1500


def test_player_rejects_empty_name_and_extra_fields():
    with pytest.raises(ValidationError):
        Player(name="", score=1)
    with pytest.raises(ValidationError):
        Player(name="Alice", score=1, level=3)


def test_player_allows_zero_and_negative_scores():
    assert Player(name="a", score=0).score == 0
    assert Player(name="b", score=-25).score == -25


def test_player_str():
    assert str(Player(name="Bob", score=1800)) == "Bob(1800)"


@pytest.mark.parametrize("score", ["1500", True, 7.0, 7.5, None])
def test_player_rejects_non_integer_scores(score):
    with pytest.raises(ValidationError):
        Player(name="Alice", score=score)


def test_leaderboard_add_rejects_coercible_score():
    board = Leaderboard(MergeSort(), LinearSearch())

    with pytest.raises(ValidationError):
        board.add("Alice", "1500")  # type: ignore[arg-type]
    assert len(board) == 0

    board.add("Alice", 10)
    with pytest.raises(ValidationError):
        board.update_score("Alice", 20.0)  # type: ignore[arg-type]
    assert board.find_by_name("Alice").score == 10
