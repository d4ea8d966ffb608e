# framer

A small collection of classic algorithm exercises written as plain Python functions,
plus one data structure. The package needs nothing but the standard library. It is a
library only: it has no command-line program.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Contents

| Module | What it offers |
| --- | --- |
| `framer.longestsub` | `longest_substring_true_sliding(s)` gives the length of the longest substring without repeated characters. `longest_substring(s)` is a simpler variant that restarts counting from the repeated character each time one repeats. |
| `framer.lru` | `LRUCache(capacity)`, a least-recently-used cache, and `NotFoundError`. |
| `framer.maxsubarray` | Four ways to find the largest sum of a contiguous subarray: `max_subarray_kadane`, `max_subarray_kadane_o2`, `max_subarray_bf_o2`, `max_subarray_bf_o3`. |
| `framer.removedups` | `remove_dups(a)` moves the distinct values of a sorted list to its front in place and returns how many there are. |
| `framer.revwords` | `reverse_words(s)` returns the words of `s` in reverse order, joined by single spaces. |
| `framer.twosum` | `two_sum_linear(a, target)` finds the first pair of indices whose values sum to `target`. `two_sum(a, target)` lists every such pair. |
| `framer.validparens` | `valid_parens(s)` checks that `()`, `[]` and `{}` are balanced and properly nested; other characters are ignored. |

## The LRU cache

```python
from framer.lru import LRUCache, NotFoundError

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)        # 1; key 1 is now the most recent
cache.put(3, 3)     # evicts key 2
str(cache)          # "[3:3,1:1]", most recent first
len(cache)          # 2
try:
    cache.get(2)
except NotFoundError as exc:
    exc.key         # 2
```

- `put` inserts or updates a key and makes it the most recent; inserting into a full
  cache first evicts the least recently used key.
- `get` returns the value and makes the key the most recent, or raises `NotFoundError`
  (a subclass of `LookupError`) when the key is absent.
- `LRUCache` raises `ValueError` when the capacity is not positive. The capacity is
  available as the `capacity` attribute.

## The other functions

```python
from framer.maxsubarray import max_subarray_kadane
from framer.twosum import two_sum, two_sum_linear
from framer.validparens import valid_parens
from framer.revwords import reverse_words
from framer.longestsub import longest_substring_true_sliding
from framer.removedups import remove_dups

max_subarray_kadane([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
two_sum_linear([2, 3, 5, 7, 11, 3], 10)                 # [1, 3]
two_sum_linear([2, 3, 5, 7, 11], 4)                     # []
two_sum([2, 3, 5, 7, 11, 3], 10)                        # [[1, 3], [3, 5]]
valid_parens("([{}])")                                  # True
valid_parens("([)]")                                    # False
reverse_words("  hello world  ")                        # "world hello"
longest_substring_true_sliding("pwwkew")                # 3

values = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
k = remove_dups(values)
values[:k]                                              # [0, 1, 2, 3, 4]
```

Notes:

- The four `max_subarray_*` functions raise `ValueError` for an empty sequence.
  An all-negative sequence gives its largest element.
- `remove_dups` leaves the elements after the returned length as they were.
- `reverse_words` strips leading and trailing spaces and collapses runs of
  whitespace between words into a single space.