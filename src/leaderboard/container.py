"\"\"\"Dependency injection container for the leaderboard engine.\"\"\""

from __future__ import annotations

from dependency_injector import containers, providers

from .benchmark import BenchmarkConfig
from .core import (
    BinarySearch,
    BuiltinSort,
    Leaderboard,
    LinearSearch,
    MergeSort,
    QuickSort,
)
from .pipeline import OutputWriter, PlayerLoader
from .schemas.config import load_config

DEFAULT_SETTINGS: dict = {
    "engine": {"sorter": "merge", "searcher": "linear"},
}


class LeaderboardContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    sorter = providers.Selector(
        config.engine.sorter,
        merge=providers.Factory(MergeSort),
        quick=providers.Factory(QuickSort),
        builtin=providers.Factory(BuiltinSort),
    )

    searcher = providers.Selector(
        config.engine.searcher,
        linear=providers.Factory(LinearSearch),
        binary=providers.Factory(BinarySearch),
    )

    leaderboard = providers.Factory(
        Leaderboard,
        sorter=sorter,
        searcher=searcher,
    )

    player_loader = providers.Singleton(PlayerLoader)
    output_writer = providers.Singleton(OutputWriter)

    benchmark_config = providers.Factory(BenchmarkConfig)


def create_container(*, settings: dict | None = None) -> LeaderboardContainer:
    """Instantiate container with optional overrides.

    ``settings`` follows the YAML config layout and is validated first, so
    unknown strategy names fail before anything is wired.
    """

    container = LeaderboardContainer()
    container.config.from_dict(DEFAULT_SETTINGS)

    if not settings:
        return container

    validated = load_config(settings).to_settings()

    engine_settings = validated.get("engine", {})
    if engine_settings:
        container.config.from_dict({"engine": engine_settings})

    benchmark_settings = validated.get("benchmark", {})
    if benchmark_settings:
        overrides = {
            key: tuple(value) if isinstance(value, list) else value
            for key, value in benchmark_settings.items()
        }
        container.benchmark_config.override(
            providers.Factory(BenchmarkConfig, **overrides)
        )

    return container
