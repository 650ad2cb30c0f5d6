"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Iterable, Sequence

from rich.console import RenderableType
from rich.panel import Panel

from ..cards import Card, Deck, Suit
from ..rules import RuleResult
from .views import ScoreBreakdownView

_SUIT_COLORS = {
    Suit.HEART: "red",
    Suit.SPADE: "cyan",
    Suit.CLUB: "green",
    Suit.DIAMOND: "magenta",
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    color = _SUIT_COLORS.get(card.suit, "white")
    return f"[{color}]{card.rank.label}{card.suit.symbol}[/{color}]"


def format_hand(cards: Iterable[Card]) -> str:
    return " ".join(format_card(card) for card in cards)


def format_deck(label: str, deck: Deck) -> str:
    """Return the per-round deck listing shown by ``war --show-decks``."""

    return f"{label}= [{deck.card_count}]    {format_hand(deck.cards)}"


def render_score(
    hand: Sequence[Card],
    results: Sequence[RuleResult],
    *,
    title: str = "Hand Count",
) -> RenderableType:
    """Return a Rich panel describing how ``hand`` scored."""

    view = ScoreBreakdownView(hand=hand, results=results, card_formatter=format_card)
    return Panel(view.render(), title=title, padding=(0, 1), border_style="cyan")
