"""
Heapsort over an implicit binary max-heap.

Builds the heap bottom-up in O(n), then repeatedly swaps the maximum to the
end of the unsorted region and sifts the new root down. Worst case is
O(n log n) regardless of the input, which is why the introsort driver falls
back to it once its depth budget runs out.
"""

from __future__ import annotations

from typing import Any, Dict, MutableSequence, Optional

from .config import parse_config
from .ordering import Comparator, resolve_comparator

__all__ = ["heapsort", "heapsort_range", "sort"]


def heapsort(v: MutableSequence[Any], cmp: Optional[Comparator] = None) -> None:
    """Sort `v` in place with heapsort (natural order if `cmp` is None)."""
    heapsort_range(v, 0, len(v), resolve_comparator(cmp))


def heapsort_range(v: MutableSequence[Any], lo: int, hi: int, cmp: Comparator) -> None:
    """Sort the half-open range v[lo:hi] in place."""
    n = hi - lo
    if n < 2:
        return
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(v, lo, root, n, cmp)
    for end in range(n - 1, 0, -1):
        v[lo], v[lo + end] = v[lo + end], v[lo]
        _sift_down(v, lo, 0, end, cmp)


def _sift_down(v: MutableSequence[Any], base: int, root: int, size: int, cmp: Comparator) -> None:
    # Heap positions are relative to `base`; children of k are 2k+1 and 2k+2.
    while True:
        child = 2 * root + 1
        if child >= size:
            return
        if child + 1 < size and cmp(v[base + child], v[base + child + 1]) < 0:
            child += 1
        if cmp(v[base + root], v[base + child]) >= 0:
            return
        v[base + root], v[base + child] = v[base + child], v[base + root]
        root = child


def sort(a: MutableSequence[Any], *, config: Optional[Dict[str, Any]] = None) -> None:
    """Benchmark entry point (natural order)."""
    parse_config(config)
    heapsort(a)
