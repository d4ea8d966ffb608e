"""Remove consecutive duplicates from a sorted list in place."""

from __future__ import annotations

from typing import MutableSequence


def remove_dups(a: MutableSequence[int]) -> int:
    """Compact unique values to the front of a and return how many there are.

    Elements beyond the returned length are left as they were.
    """
    if not a:
        return 0
    last = 0
    for value in a[1:]:
        if value != a[last]:
            last += 1
            a[last] = value
    return last + 1