"""Subset enumeration and hand-position bit-mask utilities."""

from __future__ import annotations

import itertools
from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")

__all__ = [
    "combinations",
    "subsets",
    "mask_from_positions",
    "positions_from_mask",
    "is_submask",
    "position_combinations",
]


def combinations(items: Sequence[T], size: int) -> list[tuple[T, ...]]:
    """Return every ``size``-element subset of ``items``.

    Subsets are positional: equal elements at different positions are
    distinct members, and each subset keeps the relative order of ``items``.
    """

    if not 0 <= size <= len(items):
        raise ValueError(f"subset size {size} out of range for {len(items)} item(s)")
    return list(itertools.combinations(items, size))


def subsets(
    items: Sequence[T],
    min_size: int = 1,
    max_size: int | None = None,
    *,
    largest_first: bool = False,
) -> Iterator[tuple[T, ...]]:
    """Yield subsets for every size in ``min_size..max_size`` inclusive.

    Sizes outside ``0..len(items)`` are skipped so short hands yield nothing.
    """

    upper = len(items) if max_size is None else min(max_size, len(items))
    lower = max(min_size, 0)
    sizes = range(upper, lower - 1, -1) if largest_first else range(lower, upper + 1)
    for size in sizes:
        yield from combinations(items, size)


def mask_from_positions(positions: Sequence[int]) -> int:
    """Return a bit-mask with one bit set per hand position."""

    mask = 0
    for position in positions:
        if position < 0:
            raise ValueError(f"position {position} must be non-negative")
        mask |= 1 << position
    return mask


def positions_from_mask(mask: int) -> list[int]:
    positions: list[int] = []
    position = 0
    while mask:
        if mask & 1:
            positions.append(position)
        mask >>= 1
        position += 1
    return positions


def is_submask(inner: int, outer: int) -> bool:
    """Return ``True`` when every position in ``inner`` is also in ``outer``."""

    return inner & ~outer == 0


def position_combinations(count: int, size: int) -> Iterator[tuple[tuple[int, ...], int]]:
    """Yield ``(positions, mask)`` for each ``size``-subset of ``range(count)``."""

    for positions in combinations(range(count), size):
        yield positions, mask_from_positions(positions)
