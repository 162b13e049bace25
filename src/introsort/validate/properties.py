"""
Property helpers for validating sorting results.

These functions provide lightweight checks used by the tests and by the
benchmark harness when output validation is switched on.

Public API (stable):
    is_sorted_by(xs, cmp=None) -> bool
    first_violation_index(xs, cmp=None) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    same_floats(a, b) -> bool

Notes
-----
- Multiset checks compare floats by their bit pattern. Plain `==` would count
  -0.0 and +0.0 as the same value, and NaN would never match itself, so
  neither a lost NaN nor a flipped zero sign could be detected.
- Stability is *not* checked here: the engine makes no stability promise.
"""

from __future__ import annotations

import math
import struct
from collections import Counter
from typing import Any, Callable, Dict, Optional, Sequence

import numpy as np

__all__ = [
    "is_sorted_by",
    "first_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "same_floats",
]


def is_sorted_by(xs: Sequence[Any], cmp: Optional[Callable[[Any, Any], int]] = None) -> bool:
    """Return True iff cmp(xs[i], xs[i+1]) <= 0 for all i (natural order if cmp is None)."""
    return first_violation_index(xs, cmp) is None


def first_violation_index(
    xs: Sequence[Any], cmp: Optional[Callable[[Any, Any], int]] = None
) -> int | None:
    """
    Return the first index i where xs[i] sorts after xs[i+1], or None.

    Useful for precise error messages:
        i = first_violation_index(out)
        assert i is None, f"out of order at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if cmp is None:
            if xs[i] > xs[i + 1]:
                return i
        elif cmp(xs[i], xs[i + 1]) > 0:
            return i
    return None


def _multiset_key(x: Any) -> Any:
    if isinstance(x, (float, np.floating)):
        return ("float", struct.pack(">d", float(x)))
    return x


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """
    Return True iff `a` and `b` contain exactly the same multiset of values.
    """
    if len(a) != len(b):
        return False
    return Counter(map(_multiset_key, a)) == Counter(map(_multiset_key, b))


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities. Float values
    are keyed by their bit pattern, see the module notes.
    """
    ca = Counter(map(_multiset_key, a))
    cb = Counter(map(_multiset_key, b))
    diff: Dict[Any, int] = {}
    for k in set(ca) | set(cb):
        d = ca[k] - cb[k]
        if d != 0:
            diff[k] = d
    return diff


def same_floats(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """
    Element-wise float equality that distinguishes -0.0 from +0.0 and
    considers any two NaNs equal.
    """
    if len(a) != len(b):
        return False
    for x, y in zip(a, b):
        if math.isnan(x) or math.isnan(y):
            if not (math.isnan(x) and math.isnan(y)):
                return False
        elif x != y or math.copysign(1.0, x) != math.copysign(1.0, y):
            return False
    return True
