"""Hand counting rules: pairs, fifteens, runs and flushes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Final, Sequence

from . import combos, encoding
from .cards import Card, Rank, format_cards

__all__ = [
    "RuleResult",
    "Rule",
    "PAIR_POINTS",
    "FIFTEEN",
    "MIN_RUN_LENGTH",
    "count_pairs",
    "count_fifteens",
    "count_runs",
    "check_flush",
    "is_run",
    "RULES",
    "score_breakdown",
    "check_rules",
]

# matching cards -> (points, multiplicity word); k cards make C(k, 2) pairs
PAIR_POINTS: Final[dict[int, tuple[int, str]]] = {
    2: (2, "two"),
    3: (6, "three"),
    4: (12, "four"),
}
FIFTEEN: Final[int] = 15
FIFTEEN_POINTS: Final[int] = 2
MIN_RUN_LENGTH: Final[int] = 3
FLUSH_NAMES: Final[dict[int, str]] = {4: "four card", 5: "five card"}


@dataclass(frozen=True, slots=True)
class RuleResult:
    """Points awarded by a rule together with a readable explanation."""

    points: int
    description: str


Rule = Callable[[Sequence[Card]], RuleResult]


def count_pairs(cards: Sequence[Card]) -> RuleResult:
    """Score 2, 6 or 12 points for each rank held two, three or four times."""

    counts = encoding.rank_histogram(cards)
    points = 0
    tokens: list[str] = []
    for rank in Rank:
        found = PAIR_POINTS.get(int(counts[rank.ordinal]))
        if found is None:
            continue
        rank_points, word = found
        points += rank_points
        tokens.append(f"{word} {rank.label}")
    return RuleResult(points, "pairs: " + " ".join(tokens))


def count_fifteens(cards: Sequence[Card]) -> RuleResult:
    """Score 2 points for every subset of the hand totalling fifteen."""

    found = [
        subset
        for subset in combos.subsets(cards, 1)
        if encoding.hand_points(subset) == FIFTEEN
    ]
    description = "15s: " + " ".join(format_cards(subset) for subset in found)
    return RuleResult(FIFTEEN_POINTS * len(found), description)


def is_run(cards: Sequence[Card]) -> bool:
    """Return ``True`` when rank ordinals step up by exactly one.

    ``cards`` must already be sorted by rank; a repeated rank breaks the run.
    """

    return all(
        later.rank.ordinal - earlier.rank.ordinal == 1
        for earlier, later in zip(cards, cards[1:])
    )


def count_runs(cards: Sequence[Card]) -> RuleResult:
    """Score each maximal run of three or more consecutive ranks by its length.

    Candidate runs are tracked as masks over hand positions. Sizes are tried
    largest first and a run is only accepted when it is not a submask of one
    already accepted, so sub-runs of a longer run are never counted while
    duplicate ranks still yield distinct runs.
    """

    accepted: list[tuple[int, list[Card]]] = []
    for size in range(len(cards), MIN_RUN_LENGTH - 1, -1):
        for positions, mask in combos.position_combinations(len(cards), size):
            candidate = sorted((cards[pos] for pos in positions), key=lambda c: c.rank.ordinal)
            if not is_run(candidate):
                continue
            if any(combos.is_submask(mask, seen) for seen, _ in accepted):
                continue
            accepted.append((mask, candidate))

    points = sum(len(run) for _, run in accepted)
    description = "runs: " + " ".join(format_cards(run) for _, run in accepted)
    return RuleResult(points, description)


def check_flush(cards: Sequence[Card]) -> RuleResult:
    """Score 4 or 5 points when exactly that many cards share the first matching suit."""

    counts = encoding.suit_histogram(cards)
    for suit, count in zip(encoding.SUITS, counts):
        name = FLUSH_NAMES.get(int(count))
        if name is not None:
            return RuleResult(int(count), f"flush: {name} {suit.label}")
    return RuleResult(0, "flush: ")


RULES: Final[tuple[Rule, ...]] = (count_pairs, count_fifteens, count_runs, check_flush)


def score_breakdown(cards: Sequence[Card], rules: Sequence[Rule] = RULES) -> list[RuleResult]:
    """Return each rule's result for ``cards`` in rule order."""

    hand = tuple(cards)
    return [rule(hand) for rule in rules]


def check_rules(cards: Sequence[Card], rules: Sequence[Rule] = RULES) -> RuleResult:
    """Apply every rule to the hand and combine the results.

    Points are summed and descriptions are joined one per line in rule order.
    """

    results = score_breakdown(cards, rules)
    total = sum(result.points for result in results)
    description = "\n".join(result.description for result in results)
    return RuleResult(total, description)
