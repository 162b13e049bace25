"""
Comparator instrumentation for tests and benchmarks.

CountingComparator
    Wraps a comparator and counts how many times it was called. Used to check
    comparison-count bounds (e.g. O(n log n) on adversarial inputs).

McIlroyAdversary
    M. D. McIlroy's "killer adversary" (Software: Practice and Experience,
    1999). Sorting the indices 0..n-1 with it as the comparator decides the
    element values lazily, always in the way that makes the current pivot
    candidate as bad as possible. Any plain quicksort that picks its pivot from
    O(1) samples goes quadratic against it; introsort must not.
"""

from __future__ import annotations

from typing import Any, List, Optional

from introsort.algorithms.ordering import Comparator, natural_order

__all__ = ["CountingComparator", "McIlroyAdversary"]


class CountingComparator:
    def __init__(self, cmp: Optional[Comparator] = None) -> None:
        self.cmp = natural_order if cmp is None else cmp
        self.calls = 0

    def __call__(self, a: Any, b: Any) -> int:
        self.calls += 1
        return self.cmp(a, b)

    def reset(self) -> None:
        self.calls = 0


class McIlroyAdversary:
    """
    Comparator over item indices 0..n-1.

    Every item starts as "gas" (larger than any frozen value, equal to other
    gas). When two gas items meet, one of them is frozen to the next smallest
    value. The result stays a consistent total order throughout.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be nonnegative")
        self.gas = n
        self.values: List[int] = [n] * n
        self.nsolid = 0
        self.candidate = 0
        self.calls = 0

    def items(self) -> List[int]:
        """The list to sort: item i is index i."""
        return list(range(len(self.values)))

    def _freeze(self, x: int) -> None:
        self.values[x] = self.nsolid
        self.nsolid += 1

    def __call__(self, x: int, y: int) -> int:
        self.calls += 1
        vals = self.values
        if vals[x] == self.gas and vals[y] == self.gas:
            if x == self.candidate:
                self._freeze(x)
            else:
                self._freeze(y)
        if vals[x] == self.gas:
            self.candidate = x
        elif vals[y] == self.gas:
            self.candidate = y
        return vals[x] - vals[y]

    def settled_values(self, items: List[int]) -> List[int]:
        """Current values of `items` without freezing anything (gas stays maximal)."""
        return [self.values[x] for x in items]
