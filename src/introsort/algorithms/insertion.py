"""
Insertion sort: the small-range base case of the introsort driver.

O(n^2) comparisons, O(1) extra space. Elements move by adjacent swaps only, so
if the comparator raises part way through, the sequence is still a permutation
of its input.
"""

from __future__ import annotations

from typing import Any, Dict, MutableSequence, Optional

from .config import parse_config
from .ordering import Comparator, resolve_comparator

__all__ = ["insertion_sort", "insertion_sort_range", "sort"]


def insertion_sort(v: MutableSequence[Any], cmp: Optional[Comparator] = None) -> None:
    """Sort `v` in place with insertion sort (natural order if `cmp` is None)."""
    insertion_sort_range(v, 0, len(v), resolve_comparator(cmp))


def insertion_sort_range(v: MutableSequence[Any], lo: int, hi: int, cmp: Comparator) -> None:
    """Sort the half-open range v[lo:hi] in place."""
    for i in range(lo + 1, hi):
        j = i
        while j > lo and cmp(v[j - 1], v[j]) > 0:
            v[j - 1], v[j] = v[j], v[j - 1]
            j -= 1


def sort(a: MutableSequence[Any], *, config: Optional[Dict[str, Any]] = None) -> None:
    """Benchmark entry point (natural order)."""
    parse_config(config)
    insertion_sort(a)
