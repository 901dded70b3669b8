"""Typer entry-point wiring for the Guiñote CLI."""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from loguru import logger
from rich import box
from rich.console import Console
from rich.table import Table

from .. import benchmark
from ..rules import Side
from ..scoreboard import MatchHistory
from ..state import GameConfig
from .textual import run_textual_app

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


def configure_logging(log_file: Path | None, level: str, *, to_stderr: bool = False) -> None:
    """Route loguru output away from the terminal the UI is drawing on."""

    logger.remove()
    if log_file is not None:
        logger.add(log_file, level=level.upper(), format=LOG_FORMAT, encoding="utf-8")
    if to_stderr:
        logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)


def _build_config(
    *,
    threshold: int,
    hand_size: int,
    min_width: int = 35,
    min_height: int = 140,
    arrastre: bool = True,
) -> GameConfig:
    try:
        return GameConfig(
            hand_size=hand_size,
            win_threshold=threshold,
            min_width=min_width,
            min_height=min_height,
            enforce_arrastre=arrastre,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _render_match_summary(history: MatchHistory) -> Table:
    """Return the aggregated match summary table."""

    table = Table(title="Match Summary", box=box.SIMPLE_HEAVY)
    table.add_column("Round", justify="right")
    table.add_column("Winner", justify="center")
    table.add_column("You", justify="right")
    table.add_column("Opponent", justify="right")

    for summary in history.rounds:
        winner = "[bold green]You[/bold green]" if summary.winner is Side.PLAYER else "[bold red]Opponent[/bold red]"
        table.add_row(
            str(summary.round_number),
            winner,
            str(summary.player_points),
            str(summary.opponent_points),
        )

    player, opponent = history.totals()
    table.add_section()
    table.add_row("Total", f"{player.wins} - {opponent.wins}", str(player.points), str(opponent.points))
    return table


@app.command()
def play(
    seed: int | None = typer.Option(None, help="Random seed for reproducible deals (omit for randomness)."),
    threshold: int = typer.Option(101, min=1, help="Points needed to win a round."),
    hand_size: int = typer.Option(6, min=1, max=19, help="Cards dealt to each side."),
    min_width: int = typer.Option(35, min=0, help="Minimum terminal width."),
    min_height: int = typer.Option(140, min=0, help="Minimum terminal height."),
    arrastre: bool = typer.Option(
        True,
        "--arrastre/--no-arrastre",
        help="Enforce follow-suit rules once the stock is exhausted.",
    ),
    log_file: Path | None = typer.Option(None, help="Write the game log to this file."),
    log_level: str = typer.Option("INFO", help="Log level for --log-file."),
) -> None:
    """Play Guiñote against a random opponent."""

    configure_logging(log_file, log_level)
    config = _build_config(
        threshold=threshold,
        hand_size=hand_size,
        min_width=min_width,
        min_height=min_height,
        arrastre=arrastre,
    )
    run_textual_app(config=config, seed=seed)


@app.command()
def simulate(
    rounds: int = typer.Option(10, min=1, help="Number of rounds to play."),
    seed: int = typer.Option(123, help="Random seed for the simulation."),
    threshold: int = typer.Option(101, min=1, help="Points needed to win a round."),
    hand_size: int = typer.Option(6, min=1, max=19, help="Cards dealt to each side."),
    verbose: bool = typer.Option(False, "--verbose", help="Log every trick to stderr."),
) -> None:
    """Play random-vs-random rounds headlessly and print the results."""

    configure_logging(None, "DEBUG" if verbose else "INFO", to_stderr=verbose)
    config = _build_config(threshold=threshold, hand_size=hand_size)
    logger.info("Simulating {} round(s) with seed {}", rounds, seed)
    report = benchmark.run_self_play(rounds, seed=seed, config=config)
    console.print(_render_match_summary(report.history))
    console.print(f"[cyan]{len(report.history.rounds)} round(s) simulated.[/cyan]")


def main() -> None:
    """Entry-point for ``python -m guinote.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
