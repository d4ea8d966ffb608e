"""Length of the longest substring without repeating characters."""

from __future__ import annotations


def longest_substring(s: str) -> int:
    """Return the longest run of distinct characters, restarting at each repeat.

    When a character repeats, counting starts over from that character
    alone. This is a simple reset strategy, not a true sliding window.
    """
    best = 0
    seen: set[str] = set()
    for c in s:
        if c in seen:
            best = max(best, len(seen))
            seen = {c}
        else:
            seen.add(c)
    return max(best, len(seen))


def longest_substring_true_sliding(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    best = 0
    last_seen: dict[str, int] = {}
    left = 0
    for right, c in enumerate(s):
        previous = last_seen.get(c)
        if previous is not None and previous >= left:
            left = previous + 1
        last_seen[c] = right
        best = max(best, right - left + 1)
    return best