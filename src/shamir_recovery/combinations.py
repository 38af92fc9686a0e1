"""Lazy k-subset enumeration and exact subset counts.

Subsets come out in lexicographic index order (the earliest index advances
slowest), one at a time, so a caller can stop after any number of them.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

from scipy.special import comb

T = TypeVar("T")


def iter_combinations(items: Sequence[T], k: int) -> Iterator[tuple[T, ...]]:
    """Yield every k-subset of ``items``, preserving their original order.

    Iterative: holds only the current index vector. Each call returns a
    fresh generator starting from the first subset.
    """
    n = len(items)
    if k < 0 or k > n:
        return
    indices = list(range(k))

    while True:
        yield tuple(items[i] for i in indices)

        # Rightmost index that can still move right.
        pos = k - 1
        while pos >= 0 and indices[pos] == pos + n - k:
            pos -= 1
        if pos < 0:
            return

        indices[pos] += 1
        for i in range(pos + 1, k):
            indices[i] = indices[i - 1] + 1


def count_combinations(n: int, k: int) -> int:
    """C(n, k) as an exact integer; 0 when k is outside [0, n]."""
    if n < 0 or not 0 <= k <= n:
        return 0
    return int(comb(n, k, exact=True))
