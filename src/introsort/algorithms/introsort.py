"""
Introsort: quicksort with a depth budget, a heapsort fallback and an
insertion-sort base case.

For every range the driver picks one of three strategies:

1. length <= insertion_threshold  -> insertion sort, done
2. depth budget exhausted         -> heapsort the range, done
3. otherwise                      -> median-of-three pivot, partition,
                                     continue into both sides with budget - 1

The budget starts at depth_factor * floor(log2(n)), which caps the total work
at O(n log n) even on inputs built to defeat the pivot heuristic. The smaller
side of each partition is handled by a recursive call and the larger side by
the loop, so the Python call stack is O(log n) deep.

Public API (stable):
    sort(v, *, config=None) -> None
    sort_by(v, cmp, *, config=None) -> None
    sort_range(v, lo, hi, cmp, *, config=None) -> None
"""

from __future__ import annotations

from typing import Any, Dict, MutableSequence, Optional

from .config import SortConfig, parse_config
from .heap_sort import heapsort_range
from .insertion import insertion_sort_range
from .ordering import Comparator, natural_order, resolve_comparator

__all__ = ["sort", "sort_by", "sort_range"]


def sort(v: MutableSequence[Any], *, config: Optional[Dict[str, Any]] = None) -> None:
    """
    Sort `v` in place in ascending natural order.

    Parameters
    ----------
    v : MutableSequence
        The sequence to reorder. Elements must support `<`.
    config : dict | None
        Optional tuning, see `introsort.algorithms.config`.
    """
    sort_range(v, 0, len(v), natural_order, config=config)


def sort_by(
    v: MutableSequence[Any],
    cmp: Comparator,
    *,
    config: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Sort `v` in place using `cmp(a, b) -> int` (negative, zero, positive).

    Equal elements may end up in any relative order. Exceptions raised by
    `cmp` propagate; `v` is then still a permutation of its input.
    """
    sort_range(v, 0, len(v), resolve_comparator(cmp), config=config)


def sort_range(
    v: MutableSequence[Any],
    lo: int,
    hi: int,
    cmp: Comparator,
    *,
    config: Optional[Dict[str, Any]] = None,
) -> None:
    """Sort the half-open range v[lo:hi] in place, leaving the rest of `v` untouched."""
    cfg: SortConfig = parse_config(config)
    if not (0 <= lo <= hi <= len(v)):
        raise ValueError(f"invalid range [{lo}, {hi}) for a sequence of length {len(v)}")
    n = hi - lo
    if n < 2:
        return
    _introsort(v, lo, hi, cmp, cfg.depth_budget(n), cfg.insertion_threshold)


def _introsort(
    v: MutableSequence[Any],
    lo: int,
    hi: int,
    cmp: Comparator,
    budget: int,
    threshold: int,
) -> None:
    while hi - lo > threshold:
        if budget == 0:
            heapsort_range(v, lo, hi, cmp)
            return
        budget -= 1
        p = _partition(v, lo, hi, cmp)
        if p - lo < hi - p - 1:
            _introsort(v, lo, p, cmp, budget, threshold)
            lo = p + 1
        else:
            _introsort(v, p + 1, hi, cmp, budget, threshold)
            hi = p
    insertion_sort_range(v, lo, hi, cmp)


def _partition(v: MutableSequence[Any], lo: int, hi: int, cmp: Comparator) -> int:
    """
    Partition v[lo:hi] (length >= 3) around a median-of-three pivot.

    Returns the pivot's final index p, with v[lo:p] <= v[p] <= v[p+1:hi].
    """
    mid = lo + (hi - lo) // 2
    last = hi - 1

    # Order the samples so that v[lo] <= v[mid] <= v[last].
    if cmp(v[mid], v[lo]) < 0:
        v[lo], v[mid] = v[mid], v[lo]
    if cmp(v[last], v[mid]) < 0:
        v[mid], v[last] = v[last], v[mid]
        if cmp(v[mid], v[lo]) < 0:
            v[lo], v[mid] = v[mid], v[lo]

    # Park the median at lo; v[last] >= pivot bounds the left scan.
    v[lo], v[mid] = v[mid], v[lo]
    pivot = v[lo]

    # Both scans stop on elements equal to the pivot, so long runs of equal
    # keys are split down the middle instead of all landing on one side.
    i = lo
    j = hi
    while True:
        i += 1
        while i < last and cmp(v[i], pivot) < 0:
            i += 1
        j -= 1
        while j > lo and cmp(pivot, v[j]) < 0:
            j -= 1
        if i >= j:
            break
        v[i], v[j] = v[j], v[i]

    v[lo], v[j] = v[j], v[lo]
    return j
