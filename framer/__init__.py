"""Classic algorithm exercises and a least-recently-used cache."""

__version__ = "0.1.0"
__all__ = [
    "longestsub",
    "lru",
    "maxsubarray",
    "removedups",
    "revwords",
    "twosum",
    "validparens",
]