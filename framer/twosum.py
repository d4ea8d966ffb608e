"""Find pairs of indices whose values add up to a target."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def two_sum_linear(a: Sequence[int], target: int) -> list[int]:
    """Return the first index pair summing to target, or an empty list."""
    seen: dict[int, int] = {}
    for i, value in enumerate(a):
        k = seen.get(target - value)
        if k is not None:
            return [k, i]
        seen[value] = i
    return []


def two_sum(a: Sequence[int], target: int) -> list[list[int]]:
    """Return every index pair (i, j), i < j, whose values sum to target."""
    return [
        [i, j]
        for (i, x), (j, y) in combinations(enumerate(a), 2)
        if x + y == target
    ]