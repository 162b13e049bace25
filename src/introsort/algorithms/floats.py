"""
Total-order sorting for IEEE floating point values.

Ordering produced by `sort_floats`:

    -inf < negative finite < -0.0 < +0.0 < positive finite < +inf < NaN

Floats have no native total order: NaN is unordered against everything and
-0.0 == +0.0. Checking for NaN inside every comparison is slow, and most inputs
contain no NaN at all, so the work is split in three passes:

1. Move every NaN to the tail of the sequence.
2. Sort the NaN-free prefix with a plain `<`/`>` comparison.
3. The zeros now form one contiguous run in arbitrary sign order; binary
   search for its start, count each sign, and rewrite the run with the
   negative zeros first.

Works on lists of Python floats, lists of numpy floating scalars, and 1-D
numpy float arrays.
"""

from __future__ import annotations

import math
from bisect import bisect_left
from typing import Any, Dict, MutableSequence, Optional

from .config import parse_config
from .introsort import sort_range

__all__ = ["sort_floats", "sort"]


def sort_floats(v: MutableSequence[Any], *, config: Optional[Dict[str, Any]] = None) -> None:
    """
    Sort `v` in place into the float total order described above.

    NaNs end up at the tail in unspecified relative order. `config` is passed
    to the introsort driver for the NaN-free prefix.
    """
    cfg = parse_config(config)
    if len(v) <= 1:
        return

    end = _move_nans_to_tail(v)
    sort_range(v, 0, end, _cmp_ordered, config=cfg)
    _order_signed_zeros(v, end)


def _cmp_ordered(x: Any, y: Any) -> int:
    # Precondition: neither operand is NaN. A NaN here compares "equal" to
    # everything and silently corrupts the order.
    assert x == x and y == y, "NaN reached the ordered float comparison"
    if x < y:
        return -1
    if y < x:
        return 1
    return 0


def _move_nans_to_tail(v: MutableSequence[Any]) -> int:
    """Partition NaNs to the tail; return the length of the NaN-free prefix."""
    end = len(v)
    while end > 0 and math.isnan(v[end - 1]):
        end -= 1

    i = 0
    while i < end:
        if math.isnan(v[i]):
            end -= 1
            v[i], v[end] = v[end], v[i]
        else:
            i += 1
    return end


def _order_signed_zeros(v: MutableSequence[Any], end: int) -> None:
    """Put -0.0 before +0.0 inside the zero run of the sorted prefix v[:end]."""
    start = bisect_left(v, True, 0, end, key=lambda x: x >= 0)

    neg_count = 0
    pos_count = 0
    neg_zero = pos_zero = None
    stop = start
    while stop < end and v[stop] == 0:
        if math.copysign(1.0, v[stop]) < 0:
            neg_count += 1
            neg_zero = v[stop]
        else:
            pos_count += 1
            pos_zero = v[stop]
        stop += 1

    if neg_count == 0 or pos_count == 0:
        return

    # Reuse elements from the run so the element type is preserved.
    for k in range(start, start + neg_count):
        v[k] = neg_zero
    for k in range(start + neg_count, stop):
        v[k] = pos_zero


def sort(a: MutableSequence[Any], *, config: Optional[Dict[str, Any]] = None) -> None:
    """Benchmark entry point."""
    sort_floats(a, config=config)
