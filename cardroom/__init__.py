"""Top-level package for the hand counter and War simulator."""

from . import cards, combos, encoding, rules, war

__all__ = [
    "cards",
    "combos",
    "encoding",
    "rules",
    "war",
]
