"""Reverse the order of words in a string."""

from __future__ import annotations

import re

_SPACE_RE = re.compile(r"[\t\n\f\r ]+")


def reverse_words(s: str) -> str:
    """Return the words of s in reverse order, joined by single spaces."""
    words = _SPACE_RE.sub(" ", s.strip(" ")).split(" ")
    return " ".join(reversed(words))