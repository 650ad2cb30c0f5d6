"""Vector encodings of a hand used by the counting rules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Iterable

import numpy as np

from .cards import Card, Rank, Suit

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from numpy.typing import NDArray

    CountArray = NDArray[np.int64]

RANK_COUNT: Final[int] = len(Rank)
SUIT_COUNT: Final[int] = len(Suit)
SUITS: Final[tuple[Suit, ...]] = tuple(Suit)
POINTS: Final["np.ndarray"] = np.array([rank.points for rank in Rank], dtype=np.int64)
_SUIT_TO_IDX: Final[dict[Suit, int]] = {suit: idx for idx, suit in enumerate(SUITS)}


def rank_indices(cards: Iterable[Card]) -> "CountArray":
    """Return the rank ordinal of each card as an integer vector."""

    return np.fromiter((card.rank.ordinal for card in cards), dtype=np.int64)


def rank_histogram(cards: Iterable[Card]) -> "CountArray":
    """Return card counts per rank, indexed by rank ordinal."""

    return np.bincount(rank_indices(cards), minlength=RANK_COUNT)


def suit_histogram(cards: Iterable[Card]) -> "CountArray":
    """Return card counts per suit in suit enumeration order."""

    indices = np.fromiter((_SUIT_TO_IDX[card.suit] for card in cards), dtype=np.int64)
    return np.bincount(indices, minlength=SUIT_COUNT)


def hand_points(cards: Iterable[Card]) -> int:
    """Return the summed point value of ``cards`` (Ace=1, faces=10)."""

    return int(POINTS[rank_indices(cards)].sum())
