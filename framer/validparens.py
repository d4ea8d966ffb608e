"""Check that brackets in a string are balanced and properly nested."""

from __future__ import annotations

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def valid_parens(s: str) -> bool:
    """Return True if every bracket in s is closed in the right order."""
    stack: list[str] = []
    for c in s:
        if c in _OPENERS:
            stack.append(c)
        elif c in _PAIRS:
            if not stack or stack.pop() != _PAIRS[c]:
                return False
    return not stack