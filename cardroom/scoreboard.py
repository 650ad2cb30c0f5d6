"""Helpers for tracking a hand-counting practice session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .cards import Card

__all__ = ["PracticeRound", "PracticeSummary", "PracticeHistory"]


@dataclass(frozen=True, slots=True)
class PracticeRound:
    """A single counted hand: the real score, the guess and the time taken."""

    hand: Sequence[Card]
    score: int
    guess: int
    seconds: float

    @property
    def deviation(self) -> int:
        return abs(self.score - self.guess)


@dataclass(frozen=True, slots=True)
class PracticeSummary:
    """Aggregate statistics across every recorded practice round."""

    hands: int
    exact: int
    mean_deviation: float
    max_deviation: int
    mean_seconds: float


@dataclass(slots=True)
class PracticeHistory:
    """Mutable tracker that accumulates practice rounds."""

    rounds: list[PracticeRound] = field(default_factory=list)

    def record(self, practice_round: PracticeRound) -> None:
        """Record ``practice_round``."""

        if practice_round.seconds < 0:
            raise ValueError("seconds must be non-negative")
        self.rounds.append(practice_round)

    def summary(self) -> PracticeSummary:
        """Return the session totals; an empty session reports zeros."""

        if not self.rounds:
            return PracticeSummary(hands=0, exact=0, mean_deviation=0.0, max_deviation=0, mean_seconds=0.0)
        deviations = np.array([entry.deviation for entry in self.rounds], dtype=np.int64)
        seconds = np.array([entry.seconds for entry in self.rounds], dtype=np.float64)
        return PracticeSummary(
            hands=len(self.rounds),
            exact=int(np.count_nonzero(deviations == 0)),
            mean_deviation=float(deviations.mean()),
            max_deviation=int(deviations.max()),
            mean_seconds=float(seconds.mean()),
        )
