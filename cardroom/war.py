"""Two-player War simulation with recursive tie-breaking wars."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Final

from .cards import Card, Deck, Rank

__all__ = [
    "NUM_FACEDOWN",
    "Player",
    "WarConfig",
    "DEFAULT_WAR_CONFIG",
    "BattleReport",
    "WarResult",
    "war_strength",
    "battle",
    "play_war",
    "new_game",
]

logger = logging.getLogger(__name__)

NUM_FACEDOWN: Final[int] = 3


class Player(IntEnum):
    FIRST = 1
    SECOND = 2

    @property
    def label(self) -> str:
        return "First" if self is Player.FIRST else "Second"


@dataclass(frozen=True, slots=True)
class WarConfig:
    """Tunable parameters for a War game."""

    num_facedown: int = NUM_FACEDOWN
    log_battles: bool = False
    max_rounds: int | None = 10_000

    def __post_init__(self) -> None:
        if self.num_facedown < 0:
            raise ValueError("num_facedown must be non-negative")
        if self.max_rounds is not None and self.max_rounds <= 0:
            raise ValueError("max_rounds must be positive")


DEFAULT_WAR_CONFIG: Final[WarConfig] = WarConfig()


@dataclass(frozen=True, slots=True)
class BattleReport:
    """Outcome of a single battle including any chained wars."""

    round_winner: Player | None
    wars: int
    cards_won: int
    game_winner: Player | None = None


@dataclass(frozen=True, slots=True)
class WarResult:
    """Summary of a finished (or round-limited) game."""

    winner: Player | None
    rounds: int
    wars: int
    first_cards: int
    second_cards: int
    hit_round_limit: bool = False


def war_strength(card: Card) -> int:
    """Return the War comparison value; Aces rank above Kings."""

    if card.rank is Rank.ACE:
        return len(Rank)
    return card.rank.ordinal


def _battle_log(config: WarConfig, message: str, *args: object) -> None:
    level = logging.INFO if config.log_battles else logging.DEBUG
    logger.log(level, message, *args)


def _handle_winnings(
    winner: Player,
    deck: Deck,
    winnings: list[Card],
    rng: random.Random,
) -> int:
    if len(winnings) > 2:
        logger.info("%s wins the war winnings=%s", winner.label, winnings)
    rng.shuffle(winnings)
    deck.add_all_to_bottom(winnings)
    won = len(winnings)
    winnings.clear()
    return won


def battle(
    first: Deck,
    second: Deck,
    rng: random.Random,
    config: WarConfig = DEFAULT_WAR_CONFIG,
    winnings: list[Card] | None = None,
    *,
    wars: int = 0,
) -> BattleReport:
    """Play one battle, recursing into further battles whenever a war breaks out.

    ``winnings`` accumulates every card at stake across chained wars and is
    moved to the bottom of the winner's deck once the battle resolves.
    """

    if winnings is None:
        winnings = []

    if not first.cards:
        return BattleReport(None, wars, 0, game_winner=Player.SECOND)
    if not second.cards:
        return BattleReport(None, wars, 0, game_winner=Player.FIRST)
    first_card = first.deal_required()
    second_card = second.deal_required()

    _battle_log(config, "%s vs %s", first_card, second_card)
    winnings.extend((first_card, second_card))

    first_value = war_strength(first_card)
    second_value = war_strength(second_card)
    if first_value != second_value:
        winner = Player.FIRST if first_value > second_value else Player.SECOND
        _battle_log(config, "%s wins the battle", winner.label.lower())
        deck = first if winner is Player.FIRST else second
        won = _handle_winnings(winner, deck, winnings, rng)
        return BattleReport(winner, wars, won)

    if wars == 0:
        logger.info("war!  (%s vs %s)", first_card, second_card)
    else:
        logger.info("multi war!!  (%s vs %s)", first_card, second_card)

    for _ in range(config.num_facedown):
        facedown = first.deal()
        if facedown is None:
            return BattleReport(None, wars + 1, 0, game_winner=Player.SECOND)
        winnings.append(facedown)

        facedown = second.deal()
        if facedown is None:
            return BattleReport(None, wars + 1, 0, game_winner=Player.FIRST)
        winnings.append(facedown)

    return battle(first, second, rng, config, winnings, wars=wars + 1)


def play_war(
    first: Deck,
    second: Deck,
    rng: random.Random,
    config: WarConfig = DEFAULT_WAR_CONFIG,
    on_round: Callable[[int, Deck, Deck], None] | None = None,
) -> WarResult:
    """Run battles until a player runs out of cards or ``max_rounds`` is hit.

    ``on_round`` is called with the round number and both decks before each
    battle.

    At the round limit the player holding more cards is declared the winner;
    equal piles leave the game without a winner.
    """

    rounds = 0
    wars = 0
    while config.max_rounds is None or rounds < config.max_rounds:
        rounds += 1
        if on_round is not None:
            on_round(rounds, first, second)
        _battle_log(config, "Round %d: first=[%d] second=[%d]", rounds, len(first), len(second))
        report = battle(first, second, rng, config)
        wars += report.wars
        if report.game_winner is not None:
            logger.debug("player %d wins after %d round(s)", int(report.game_winner), rounds)
            return WarResult(
                winner=report.game_winner,
                rounds=rounds,
                wars=wars,
                first_cards=len(first),
                second_cards=len(second),
            )

    if len(first) > len(second):
        winner: Player | None = Player.FIRST
    elif len(second) > len(first):
        winner = Player.SECOND
    else:
        winner = None
    logger.warning("round limit %s reached; declaring winner by card count", config.max_rounds)
    return WarResult(
        winner=winner,
        rounds=rounds,
        wars=wars,
        first_cards=len(first),
        second_cards=len(second),
        hit_round_limit=True,
    )


def new_game(rng: random.Random) -> tuple[Deck, Deck]:
    """Shuffle a full deck with ``rng`` and split it between two players."""

    deck = Deck(rng=rng)
    return deck.split()
