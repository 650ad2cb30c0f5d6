"""Typer entry-point wiring for the cardroom CLI."""

from __future__ import annotations

import logging
import random
import time
from enum import Enum
from typing import Final, List

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .. import benchmark, rules, scoreboard, war
from ..cards import Card, Deck, Rank, Suit
from .render import format_deck, format_hand, render_score

HAND_SIZE: Final[int] = 6
MIN_HAND_SIZE: Final[int] = 4
MAX_HAND_SIZE: Final[int] = 6

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@app.callback()
def configure(
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING,
        "--log-level",
        case_sensitive=False,
        help="Logging threshold for library messages.",
    ),
) -> None:
    """Count cribbage-style hands or watch a game of War."""

    logging.basicConfig(
        level=log_level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
        force=True,
    )


def _parse_hand(codes: List[str]) -> list[Card]:
    if not MIN_HAND_SIZE <= len(codes) <= MAX_HAND_SIZE:
        raise typer.BadParameter(
            f"expected {MIN_HAND_SIZE} to {MAX_HAND_SIZE} cards, got {len(codes)}"
        )
    try:
        hand = [Card.from_code(code) for code in codes]
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    # Card equality ignores suit, so physical identity is checked on (rank, suit)
    seen: set[tuple[Rank, Suit]] = set()
    for card in hand:
        key = (card.rank, card.suit)
        if key in seen:
            raise typer.BadParameter(f"duplicate card {card.label()}")
        seen.add(key)
    return hand


def _prompt_guess() -> int:
    """Ask for a points guess until the reply parses as an integer."""

    while True:
        reply = console.input("Enter points: ")
        try:
            return int(reply.strip())
        except ValueError:
            console.print("[red]not a number[/red]")


def _render_practice_summary(summary: scoreboard.PracticeSummary) -> Table:
    """Return the aggregated practice session table."""

    table = Table(title="Session Summary", box=box.SIMPLE_HEAVY)
    table.add_column("Hands", justify="right")
    table.add_column("Exact", justify="right")
    table.add_column("Mean deviation", justify="right")
    table.add_column("Max deviation", justify="right")
    table.add_column("Mean seconds", justify="right")
    table.add_row(
        str(summary.hands),
        str(summary.exact),
        f"{summary.mean_deviation:.2f}",
        str(summary.max_deviation),
        f"{summary.mean_seconds:.1f}",
    )
    return table


@app.command()
def count(
    hand_size: int = typer.Option(
        HAND_SIZE, min=MIN_HAND_SIZE, max=MAX_HAND_SIZE, help="Cards dealt per hand."
    ),
    hands: int | None = typer.Option(None, min=1, help="Stop after this many hands (omit to keep going)."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible deals (omit for randomness)."),
) -> None:
    """Practice counting: guess each hand's score, then compare."""

    rng = random.Random(seed)
    history = scoreboard.PracticeHistory()
    dealt = 0
    try:
        while hands is None or dealt < hands:
            hand = Deck(rng=rng).deal_many(hand_size)
            console.print(f"hand={format_hand(hand)}")

            start = time.monotonic()
            guess = _prompt_guess()
            elapsed = time.monotonic() - start

            results = rules.score_breakdown(hand)
            total = sum(result.points for result in results)
            console.print(render_score(hand, results))

            practice_round = scoreboard.PracticeRound(
                hand=tuple(hand), score=total, guess=guess, seconds=elapsed
            )
            history.record(practice_round)
            console.print(
                f"score={total}  You took {int(elapsed)} seconds, deviation = {practice_round.deviation}"
            )
            dealt += 1
    except (EOFError, KeyboardInterrupt):
        console.print()

    console.print(_render_practice_summary(history.summary()))


@app.command()
def score(
    cards: List[str] = typer.Argument(..., help="Card codes such as 5H JC 10D (4 to 6 cards)."),
) -> None:
    """Score an explicit hand and show the per-rule breakdown."""

    hand = _parse_hand(cards)
    console.print(render_score(hand, rules.score_breakdown(hand)))


@app.command("war")
def war_cli(
    seed: int | None = typer.Option(None, help="Random seed for a reproducible game (omit for randomness)."),
    facedown: int = typer.Option(war.NUM_FACEDOWN, min=0, help="Face-down cards each player adds to a war."),
    max_rounds: int | None = typer.Option(
        None, min=1, help="Round limit before the larger pile is declared winner (omit for no limit)."
    ),
    log_battles: bool = typer.Option(False, "--log-battles", help="Log every battle, not just wars."),
    show_decks: bool = typer.Option(False, "--show-decks", help="Print both decks before every round."),
) -> None:
    """Play a single game of War between two simulated players."""

    # war announcements are INFO; keep them visible unless a lower level was asked for
    war_logger = logging.getLogger(war.__name__)
    previous_level = war_logger.level
    war_logger.setLevel(min(logging.getLogger().level, logging.INFO))
    try:
        _play_war_game(seed, facedown, max_rounds, log_battles, show_decks)
    finally:
        war_logger.setLevel(previous_level)


def _play_war_game(
    seed: int | None,
    facedown: int,
    max_rounds: int | None,
    log_battles: bool,
    show_decks: bool,
) -> None:
    config = war.WarConfig(num_facedown=facedown, log_battles=log_battles, max_rounds=max_rounds)
    rng = random.Random(seed)
    first, second = war.new_game(rng)

    def _show_round(round_number: int, first_deck: Deck, second_deck: Deck) -> None:
        console.print(f"Round {round_number} : ")
        console.print(format_deck("first", first_deck))
        console.print(format_deck("second", second_deck))

    result = war.play_war(first, second, rng, config, on_round=_show_round if show_decks else None)

    if result.winner is None:
        console.print(f"[yellow]No winner after {result.rounds} round(s).[/yellow]")
    else:
        console.print(f"[bold green]Player {int(result.winner)} wins![/bold green]")
    console.print(
        f"[cyan]{result.rounds} round(s), {result.wars} war(s); "
        f"first={result.first_cards} second={result.second_cards}[/cyan]"
    )


@app.command("war-stats")
def war_stats_cli(
    games: int = typer.Option(100, min=1, help="Number of independent games."),
    seed: int = typer.Option(123, help="Random seed for the series."),
    facedown: int = typer.Option(war.NUM_FACEDOWN, min=0, help="Face-down cards each player adds to a war."),
    max_rounds: int = typer.Option(10_000, min=1, help="Round limit per game."),
) -> None:
    """Simulate many War games and report aggregate statistics."""

    config = war.WarConfig(num_facedown=facedown, max_rounds=max_rounds)
    report = benchmark.run_war_series(games, seed=seed, config=config)

    table = Table(title="War Series", box=box.SIMPLE_HEAVY)
    table.add_column("Metric", justify="left")
    table.add_column("Value", justify="right")
    table.add_row("Games", str(report.games))
    table.add_row("First wins", str(report.first_wins))
    table.add_row("Second wins", str(report.second_wins))
    table.add_row("Undecided", str(report.undecided))
    table.add_row("Round limited", str(report.round_limited))
    table.add_row("Mean rounds", f"{report.mean_rounds:.1f}")
    table.add_row("Median rounds", f"{report.median_rounds:.1f}")
    table.add_row("Max rounds", str(report.max_rounds))
    table.add_row("Total wars", str(report.total_wars))

    console.print(table)


def main() -> None:
    """Entry-point for ``python -m cardroom.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
