"""Maximum subarray sum, by several algorithms."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def _require_items(a: Sequence[int]) -> None:
    if not a:
        raise ValueError("array must not be empty")


def max_subarray_kadane(a: Sequence[int]) -> int:
    """Kadane's algorithm in linear time."""
    _require_items(a)
    best = a[0]
    running = 0
    for value in a:
        running += value
        best = max(best, running)
        if running <= 0:
            running = 0
    return best


def max_subarray_kadane_o2(a: Sequence[int]) -> int:
    """Quadratic variant that stops a scan once the running sum drops to zero or below."""
    _require_items(a)
    best = a[0]
    for start in range(len(a)):
        for running in accumulate(a[start:]):
            best = max(best, running)
            if running <= 0:
                break
    return best


def max_subarray_bf_o2(a: Sequence[int]) -> int:
    """Brute force with incrementally computed sums."""
    _require_items(a)
    return max(max(accumulate(a[start:])) for start in range(len(a)))


def max_subarray_bf_o3(a: Sequence[int]) -> int:
    """Brute force summing every subarray from scratch."""
    _require_items(a)
    n = len(a)
    return max(sum(a[i : j + 1]) for i in range(n) for j in range(i, n))