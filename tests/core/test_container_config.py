from __future__ import annotations

import pytest
from pydantic import ValidationError

from leaderboard.container import create_container
from leaderboard.core import BinarySearch, LinearSearch, MergeSort, QuickSort
from leaderboard.schemas.config import AppConfig, load_config


def test_create_container_defaults():
    container = create_container()

    board = container.leaderboard()

    assert isinstance(board.sorter, MergeSort)
    assert isinstance(board.searcher, LinearSearch)
    assert container.benchmark_config().sizes == (1000,)


def test_create_container_with_overrides():
    container = create_container(
        settings={
            "engine": {"sorter": "quick", "searcher": "binary"},
            "benchmark": {"sizes": [10, 20], "top_n": 3, "seed": 7, "sorters": ["merge"]},
        }
    )

    board = container.leaderboard()
    bench = container.benchmark_config()

    assert isinstance(board.sorter, QuickSort)
    assert isinstance(board.searcher, BinarySearch)
    assert bench.sizes == (10, 20)
    assert bench.top_n == 3
    assert bench.seed == 7
    assert bench.sorters == ("merge",)
    assert bench.searchers == ("linear", "binary")


def test_leaderboards_do_not_share_state():
    container = create_container()

    first = container.leaderboard()
    second = container.leaderboard()
    first.add("Alice", 1)

    assert len(second) == 0
    assert first.sorter is not second.sorter


def test_partial_engine_override_keeps_other_default():
    container = create_container(settings={"engine": {"searcher": "binary"}})

    board = container.leaderboard()

    assert isinstance(board.sorter, MergeSort)
    assert isinstance(board.searcher, BinarySearch)


def test_unknown_strategy_rejected():
    with pytest.raises(ValidationError):
        create_container(settings={"engine": {"sorter": "bogo"}})


def test_load_config_validation():
    data = {
        "engine": {"sorter": "builtin"},
        "benchmark": {"top_n": 5},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings == {"engine": {"sorter": "builtin"}, "benchmark": {"top_n": 5}}


def test_load_config_requires_mapping():
    with pytest.raises(ValidationError):
        load_config(["not", "a", "mapping"])
    assert load_config(None).to_settings() == {}
