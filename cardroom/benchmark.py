"""Batch harness for collecting War game statistics."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

import numpy as np

from . import war

__all__ = ["WarSeriesReport", "run_war_series"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WarSeriesReport:
    """Summary of a series of independent War games."""

    games: int
    first_wins: int
    second_wins: int
    undecided: int
    round_limited: int
    mean_rounds: float
    median_rounds: float
    max_rounds: int
    total_wars: int


def run_war_series(
    games: int,
    *,
    seed: int = 123,
    config: war.WarConfig = war.DEFAULT_WAR_CONFIG,
) -> WarSeriesReport:
    """Play ``games`` War games from a single seeded generator."""

    if games <= 0:
        raise ValueError("games must be positive")

    rng = random.Random(seed)
    results: list[war.WarResult] = []
    for game_number in range(1, games + 1):
        first, second = war.new_game(rng)
        result = war.play_war(first, second, rng, config)
        logger.debug(
            "game %d: winner=%s rounds=%d wars=%d",
            game_number,
            result.winner,
            result.rounds,
            result.wars,
        )
        results.append(result)

    rounds = np.array([result.rounds for result in results], dtype=np.int64)
    return WarSeriesReport(
        games=games,
        first_wins=sum(1 for result in results if result.winner is war.Player.FIRST),
        second_wins=sum(1 for result in results if result.winner is war.Player.SECOND),
        undecided=sum(1 for result in results if result.winner is None),
        round_limited=sum(1 for result in results if result.hit_round_limit),
        mean_rounds=float(rounds.mean()),
        median_rounds=float(np.median(rounds)),
        max_rounds=int(rounds.max()),
        total_wars=sum(result.wars for result in results),
    )
