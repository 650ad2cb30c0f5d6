"""Composable view primitives for the cardroom CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from rich import box
from rich.console import Group, RenderableType
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..cards import Card
from ..rules import RuleResult


@dataclass(slots=True)
class ScoreBreakdownView:
    """Renderable listing the hand and each rule's contribution."""

    hand: Sequence[Card]
    results: Sequence[RuleResult]
    card_formatter: Callable[[Card], str]

    def _rule_rows(self) -> list[tuple[str, str, str]]:
        rows: list[tuple[str, str, str]] = []
        for result in self.results:
            name, _, detail = result.description.partition(":")
            rows.append((name.strip().capitalize(), escape(detail.strip()) or "—", str(result.points)))
        return rows

    def render(self) -> RenderableType:
        hand_line = Text.from_markup(
            "Hand: " + " ".join(self.card_formatter(card) for card in self.hand)
        )

        table = Table(box=box.ROUNDED, expand=True)
        table.add_column("Rule", justify="left", style="bold")
        table.add_column("Details", justify="left")
        table.add_column("Points", justify="right")
        for name, detail, points in self._rule_rows():
            table.add_row(name, detail, points)

        total = sum(result.points for result in self.results)
        table.add_row("[bold]Total[/bold]", "", f"[bold]{total}[/bold]")
        return Group(hand_line, table)
