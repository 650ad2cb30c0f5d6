"""Card abstractions and deck helpers shared by the counter and War."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Iterable, Iterator, List, Sequence

__all__ = ["Suit", "Rank", "Card", "Deck", "EmptyDeck", "full_deck", "format_cards"]


class Suit(Enum):
    """Enumeration of the four suits in their canonical order."""

    HEART = ("H", "♥")
    SPADE = ("S", "♠")
    CLUB = ("C", "♣")
    DIAMOND = ("D", "♦")

    def __init__(self, label: str, symbol: str) -> None:
        self.label = label
        self.symbol = symbol

    @classmethod
    def from_label(cls, text: str) -> "Suit":
        """Return the suit matching a letter (any case) or a suit symbol."""

        for suit in cls:
            if text.upper() == suit.label or text == suit.symbol:
                return suit
        raise ValueError(f"invalid suit '{text}'")


class Rank(Enum):
    """Enumeration of ranks, Ace low, carrying display label and point value."""

    ACE = ("A", 1)
    TWO = ("2", 2)
    THREE = ("3", 3)
    FOUR = ("4", 4)
    FIVE = ("5", 5)
    SIX = ("6", 6)
    SEVEN = ("7", 7)
    EIGHT = ("8", 8)
    NINE = ("9", 9)
    TEN = ("10", 10)
    JACK = ("J", 10)
    QUEEN = ("Q", 10)
    KING = ("K", 10)

    def __init__(self, label: str, points: int) -> None:
        self.label = label
        self.points = points

    @property
    def ordinal(self) -> int:
        """Position in rule order; adjacent ordinals form runs."""

        return _RANK_ORDINALS[self]

    @classmethod
    def from_label(cls, text: str) -> "Rank":
        for rank in cls:
            if text.upper() == rank.label:
                return rank
        raise ValueError(f"invalid rank '{text}'")


_RANK_ORDINALS = {rank: idx for idx, rank in enumerate(Rank)}


@total_ordering
@dataclass(frozen=True, eq=False, slots=True)
class Card:
    """Value object describing a single playing card.

    Equality, hashing and ordering only look at the rank: a five of hearts
    and a five of spades compare equal.
    """

    rank: Rank
    suit: Suit

    def label(self) -> str:
        """Create a display label such as ``10H``."""

        return f"{self.rank.label}{self.suit.label}"

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse a label produced by :meth:`label` (case-insensitive)."""

        text = code.strip()
        if len(text) < 2:
            raise ValueError(f"invalid card code '{code}'")
        try:
            rank = Rank.from_label(text[:-1])
            suit = Suit.from_label(text[-1])
        except ValueError as exc:
            raise ValueError(f"invalid card code '{code}'") from exc
        return cls(rank=rank, suit=suit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank is other.rank

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank.ordinal < other.rank.ordinal

    def __hash__(self) -> int:
        return hash(self.rank)

    def __str__(self) -> str:
        return self.label()

    def __repr__(self) -> str:
        return self.label()


class EmptyDeck(RuntimeError):
    """Raised when a card is required from a deck that has none left."""


def full_deck(ranks: Iterable[Rank] = tuple(Rank)) -> Iterator[Card]:
    """Yield an unshuffled deck in suit-major order.

    Restricting ``ranks`` builds reduced decks (e.g. 48 cards without Kings).
    """

    ranks = tuple(ranks)
    for suit in Suit:
        for rank in ranks:
            yield Card(rank=rank, suit=suit)


def format_cards(cards: Sequence[Card]) -> str:
    return "[" + ", ".join(card.label() for card in cards) + "]"


class Deck:
    """Ordered pile of cards; the first card in ``cards`` is the top.

    Without ``cards`` a fresh full deck is built and shuffled. Given cards are
    used in the supplied order, which should already be shuffled.
    """

    __slots__ = ("cards", "rng")

    def __init__(
        self,
        cards: Iterable[Card] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        if cards is None:
            self.cards: List[Card] = list(full_deck())
            self.shuffle()
        else:
            self.cards = list(cards)

    def __repr__(self) -> str:
        return f"Deck([{self.describe()}])"

    def shuffle(self) -> None:
        self.rng.shuffle(self.cards)

    @property
    def card_count(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def describe(self) -> str:
        """Return a comma-separated listing of the deck from the top."""

        return ", ".join(card.label() for card in self.cards)

    def deal(self) -> Card | None:
        """Deal the top card, or ``None`` when the deck is empty."""

        if not self.cards:
            return None
        return self.cards.pop(0)

    def deal_required(self) -> Card:
        """Deal the top card, raising :class:`EmptyDeck` when none is left."""

        card = self.deal()
        if card is None:
            raise EmptyDeck("deck has no cards left")
        return card

    def deal_many(self, count: int) -> list[Card]:
        """Deal up to ``count`` cards; fewer are returned if the deck runs short."""

        if count < 0:
            raise ValueError("count must be non-negative")
        dealt = self.cards[:count]
        del self.cards[:count]
        return dealt

    def split(self) -> tuple["Deck", "Deck"]:
        """Move the top half into a new deck and return ``(new_deck, self)``."""

        top_half = Deck(self.deal_many(len(self.cards) // 2), self.rng)
        return top_half, self

    def add_to_bottom(self, *cards: Card) -> None:
        self.cards.extend(cards)

    def add_all_to_bottom(self, cards: Iterable[Card]) -> None:
        self.cards.extend(cards)
