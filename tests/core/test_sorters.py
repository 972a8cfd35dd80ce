from __future__ import annotations

import random

import pytest

from leaderboard.core import BuiltinSort, MergeSort, QuickSort, Sorter, ranking_key
from leaderboard.schemas import Player

SORTERS = [MergeSort, QuickSort, BuiltinSort]


def make_players(pairs: list[tuple[str, int]]) -> list[Player]:
    return [Player(name=name, score=score) for name, score in pairs]


@pytest.mark.parametrize("sorter_cls", SORTERS)
def test_sorter_satisfies_protocol(sorter_cls):
    sorter = sorter_cls()

    assert isinstance(sorter, Sorter)
    assert sorter.name


@pytest.mark.parametrize("sorter_cls", SORTERS)
def test_equal_scores_ordered_by_name(sorter_cls):
    players = make_players([("Diana", 1800), ("Charlie", 1200), ("Bob", 1800), ("Alice", 1500)])

    result = sorter_cls().sort(players)

    assert [player.name for player in result] == ["Bob", "Diana", "Alice", "Charlie"]


@pytest.mark.parametrize("sorter_cls", SORTERS)
def test_sort_does_not_mutate_input(sorter_cls):
    players = make_players([("c", 1), ("a", 3), ("b", 2)])
    original = list(players)

    result = sorter_cls().sort(players)

    assert players == original
    assert result is not players


@pytest.mark.parametrize("sorter_cls", SORTERS)
@pytest.mark.parametrize("size", [0, 1, 2])
def test_trivial_inputs(sorter_cls, size: int):
    players = make_players([(f"p{idx}", idx) for idx in range(size)])

    result = sorter_cls().sort(players)

    assert result == sorted(players, key=ranking_key)


@pytest.mark.parametrize("seed", range(5))
def test_sorters_produce_identical_output(seed: int):
    rng = random.Random(seed)
    players = make_players(
        [(f"player-{rng.randrange(10_000):05d}-{idx}", rng.randint(-50, 50)) for idx in range(300)]
    )

    outputs = [sorter_cls().sort(players) for sorter_cls in SORTERS]

    assert outputs[0] == outputs[1] == outputs[2]
    assert outputs[0] == sorted(players, key=ranking_key)


@pytest.mark.parametrize(
    "scores",
    [
        list(range(500)),
        list(range(500, 0, -1)),
        [7] * 500,
    ],
    ids=["ascending", "descending", "all-equal"],
)
def test_quick_sort_handles_adversarial_shapes(scores: list[int]):
    players = make_players([(f"p{idx:04d}", score) for idx, score in enumerate(scores)])

    result = QuickSort().sort(players)

    assert result == sorted(players, key=ranking_key)


def test_merge_sort_is_stable_for_equal_keys():
    # distinct objects with identical keys keep their relative order
    first = Player(name="same", score=1)
    second = Player(name="same", score=1)

    result = MergeSort().sort([first, second])

    assert result[0] is first
    assert result[1] is second
