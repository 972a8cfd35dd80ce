"\"\"\"Typer CLI entrypoint for the leaderboard engine.\"\"\""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

import typer
from rapidfuzz import process

from .benchmark import run_benchmark
from .config import load_yaml
from .container import LeaderboardContainer, create_container
from .core import SEARCHERS, SORTERS, Leaderboard
from .errors import LeaderboardError, NotFoundError
from .logging import configure_logging
from .pipeline import PlayerLoadError, build_report, populate, ranked_rows

app = typer.Typer(help="Ranked leaderboard CLI.")


def _container(config: Optional[Path], sorter: Optional[str], searcher: Optional[str]) -> LeaderboardContainer:
    settings: dict[str, Any] = {}
    if config:
        try:
            settings = load_yaml(config)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--config") from exc
    engine = dict(settings.get("engine") or {})
    if sorter:
        engine["sorter"] = sorter
    if searcher:
        engine["searcher"] = searcher
    if engine:
        settings["engine"] = engine
    try:
        return create_container(settings=settings)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _load_leaderboard(container: LeaderboardContainer, players: Path) -> Leaderboard:
    try:
        loaded = container.player_loader().load(players)
    except PlayerLoadError as exc:
        for error in exc.errors:
            typer.echo(f"error: {error}", err=True)
        raise typer.Exit(code=2) from exc
    return populate(container.leaderboard(), loaded)


def suggest_names(name: str, candidates: list[str], *, limit: int = 3, cutoff: float = 60.0) -> list[str]:
    """Return known names that fuzzily resemble ``name``."""
    matches = process.extract(name, candidates, limit=limit, score_cutoff=cutoff)
    return [match for match, _score, _idx in matches]


def _echo_rows(rows: list[dict]) -> None:
    for row in rows:
        typer.echo(f"{row['rank']:>4}  {row['name']:<24} {row['score']:>10}")


@app.command()
def show(
    players: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Players JSONL path."),
    top: Optional[int] = typer.Option(None, help="Only show the top N players."),
    sorter: Optional[str] = typer.Option(None, help=f"Sorter: {', '.join(SORTERS)}."),
    searcher: Optional[str] = typer.Option(None, help=f"Search strategy: {', '.join(SEARCHERS)}."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, help="Write the ranking as JSON."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Print the ranked leaderboard."""
    configure_logging(log_level)
    container = _container(config, sorter, searcher)
    leaderboard = _load_leaderboard(container, players)

    ranked = leaderboard.top_n(top) if top is not None else leaderboard.snapshot()
    rows = ranked_rows(ranked)
    _echo_rows(rows)

    if output:
        container.output_writer().write(
            output,
            build_report(
                rows,
                sorter=leaderboard.sorter.name,
                searcher=leaderboard.searcher.name,
                player_count=len(leaderboard),
            ),
        )


@app.command()
def rank(
    name: str = typer.Argument(..., help="Player name."),
    players: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Players JSONL path."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Print the 1-based rank of a player."""
    configure_logging(log_level)
    leaderboard = _load_leaderboard(_container(config, None, None), players)
    try:
        position = leaderboard.rank(name)
    except NotFoundError as exc:
        exc.suggestions = suggest_names(name, leaderboard.names())
        message = str(exc)
        if exc.suggestions:
            message += f" (did you mean: {', '.join(exc.suggestions)}?)"
        typer.echo(message, err=True)
        raise typer.Exit(code=1) from exc
    player = leaderboard.find_by_name(name)
    typer.echo(f"{name} is ranked #{position} with {player.score} points")


@app.command(name="range")
def score_range(
    low: int = typer.Argument(..., help="Lowest score (inclusive)."),
    high: int = typer.Argument(..., help="Highest score (inclusive)."),
    players: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Players JSONL path."),
    searcher: Optional[str] = typer.Option(None, help=f"Search strategy: {', '.join(SEARCHERS)}."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Print players whose score falls within [LOW, HIGH]."""
    configure_logging(log_level)
    leaderboard = _load_leaderboard(_container(config, None, searcher), players)
    try:
        matches = leaderboard.find_in_score_range(low, high)
    except LeaderboardError as exc:
        raise typer.BadParameter(str(exc), param_hint="LOW") from exc
    _echo_rows(
        [
            {"rank": leaderboard.rank(player.name), "name": player.name, "score": player.score}
            for player in matches
        ]
    )


@app.command()
def benchmark(
    output: Optional[Path] = typer.Option(None, dir_okay=False, help="Write timings as JSON."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Compare every sorter and search strategy pairing."""
    configure_logging(log_level)
    container = _container(config, None, None)
    bench_config = container.benchmark_config()

    results = run_benchmark(
        [SORTERS[name] for name in bench_config.sorters],
        [SEARCHERS[name] for name in bench_config.searchers],
        config=bench_config,
    )
    for result in results:
        typer.echo(
            f"{result.sorter} + {result.searcher} (n={result.size}): "
            f"add {result.add_ms:.2f} ms, top {bench_config.top_n} {result.top_n_ms:.2f} ms, "
            f"range {result.range_ms:.2f} ms, lookup {result.lookup_ms:.3f} ms, "
            f"peak {result.peak_kib:.1f} KiB"
        )

    if output:
        container.output_writer().write(
            output,
            build_report([asdict(result) for result in results], **asdict(bench_config)),
        )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
