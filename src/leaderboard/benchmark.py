"\"\"\"Side-by-side timing of sorter and search strategy combinations.\"\"\""

from __future__ import annotations

import random
import tracemalloc
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

import structlog

from .core import Leaderboard
from .metrics import PerformanceMetrics


@dataclass
class BenchmarkConfig:
    """Workload parameters for a benchmark run."""

    sizes: tuple[int, ...] = (1000,)
    top_n: int = 10
    score_ceiling: int = 10_000
    seed: int = 42
    sorters: tuple[str, ...] = ("merge", "quick", "builtin")
    searchers: tuple[str, ...] = ("linear", "binary")


@dataclass(slots=True)
class BenchmarkResult:
    """Timings in milliseconds for one strategy pairing at one size."""

    sorter: str
    searcher: str
    size: int
    add_ms: float
    top_n_ms: float
    range_ms: float
    lookup_ms: float
    range_hits: int
    peak_kib: float = 0.0


def run_benchmark(
    sorters: Sequence[Callable[[], object]],
    searchers: Sequence[Callable[[], object]],
    *,
    config: BenchmarkConfig | None = None,
) -> list[BenchmarkResult]:
    """Time every sorter x searcher pairing on identical random workloads.

    ``sorters`` and ``searchers`` are factories so each run gets fresh
    strategy instances.
    """
    config = config or BenchmarkConfig()
    logger = structlog.get_logger(__name__)
    results: list[BenchmarkResult] = []

    for size in config.sizes:
        workload = _workload(size, config.score_ceiling, config.seed)
        low, high = _middle_band(config.score_ceiling)
        probe = workload[len(workload) // 2][0] if workload else ""

        for make_sorter in sorters:
            for make_searcher in searchers:
                result = _run_once(
                    Leaderboard(make_sorter(), make_searcher()),
                    workload,
                    top_n=config.top_n,
                    low=low,
                    high=high,
                    probe=probe,
                )
                # untimed pass under tracemalloc
                result.peak_kib = _peak_memory_kib(
                    Leaderboard(make_sorter(), make_searcher()),
                    workload,
                    top_n=config.top_n,
                )
                logger.info(
                    "benchmark.result",
                    sorter=result.sorter,
                    searcher=result.searcher,
                    size=result.size,
                    add_ms=result.add_ms,
                    top_n_ms=result.top_n_ms,
                    range_ms=result.range_ms,
                    lookup_ms=result.lookup_ms,
                    peak_kib=result.peak_kib,
                )
                results.append(result)
    return results


def _run_once(
    leaderboard: Leaderboard,
    workload: Iterable[tuple[str, int]],
    *,
    top_n: int,
    low: int,
    high: int,
    probe: str,
) -> BenchmarkResult:
    metrics = PerformanceMetrics()

    metrics.start()
    for name, score in workload:
        leaderboard.add(name, score)
    metrics.stop()
    add_ms = metrics.elapsed_ms()

    # includes the lazy re-sort triggered by the first ranked read
    metrics.start()
    leaderboard.top_n(top_n)
    metrics.stop()
    top_n_ms = metrics.elapsed_ms()

    metrics.start()
    hits = leaderboard.find_in_score_range(low, high)
    metrics.stop()
    range_ms = metrics.elapsed_ms()

    metrics.start()
    leaderboard.find_by_name(probe)
    metrics.stop()
    lookup_ms = metrics.elapsed_ms()

    return BenchmarkResult(
        sorter=leaderboard.sorter.name,
        searcher=leaderboard.searcher.name,
        size=len(leaderboard),
        add_ms=add_ms,
        top_n_ms=top_n_ms,
        range_ms=range_ms,
        lookup_ms=lookup_ms,
        range_hits=len(hits),
    )


def _workload(size: int, score_ceiling: int, seed: int) -> list[tuple[str, int]]:
    rng = random.Random(seed)
    return [(f"Player{idx}", rng.randrange(score_ceiling)) for idx in range(size)]


def _middle_band(score_ceiling: int) -> tuple[int, int]:
    quarter = score_ceiling // 4
    return quarter, score_ceiling - quarter


def _peak_memory_kib(
    leaderboard: Leaderboard,
    workload: Iterable[tuple[str, int]],
    *,
    top_n: int,
) -> float:
    """Peak traced allocation, in KiB, for loading and ranking ``workload``."""
    already_tracing = tracemalloc.is_tracing()
    if not already_tracing:
        tracemalloc.start()
    tracemalloc.reset_peak()
    baseline, _peak = tracemalloc.get_traced_memory()
    try:
        for name, score in workload:
            leaderboard.add(name, score)
        leaderboard.top_n(top_n)
        _current, peak = tracemalloc.get_traced_memory()
    finally:
        if not already_tracing:
            tracemalloc.stop()
    return max(peak - baseline, 0) / 1024
