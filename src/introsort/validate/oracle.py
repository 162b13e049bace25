"""
Oracles for sorting correctness.

We use Python's built-in `sorted()` as the ground truth:
- Natural order: `sorted(a)` directly.
- Float total order: `sorted(a, key=float_total_order_key)`, which places
  -0.0 before +0.0 and every NaN last.

Public API (stable):
    oracle_sort(a) -> list
    oracle_sort_floats(a) -> list
    equals_oracle(a, out) -> bool
    equals_float_oracle(a, out) -> bool

Conventions:
- The oracles never mutate their input and always return a **new** list.
"""

from __future__ import annotations

import math
from typing import Any, List, Sequence, Tuple

from .properties import same_floats

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = [
    "ORACLE_NAME",
    "float_total_order_key",
    "oracle_sort",
    "oracle_sort_floats",
    "equals_oracle",
    "equals_float_oracle",
]


def float_total_order_key(x: Any) -> Tuple[int, float, float]:
    """Sort key realising -inf < ... < -0.0 < +0.0 < ... < +inf < NaN."""
    if math.isnan(x):
        return (1, 0.0, 0.0)
    return (0, float(x), math.copysign(1.0, x))


def oracle_sort(a: Sequence[Any]) -> List[Any]:
    """Return a new list with the elements of `a` in nondecreasing natural order."""
    return sorted(a)


def oracle_sort_floats(a: Sequence[Any]) -> List[Any]:
    """Return a new list with the floats of `a` in total order."""
    return sorted(a, key=float_total_order_key)


def equals_oracle(a: Sequence[Any], out: Sequence[Any]) -> bool:
    """True iff `out` equals `oracle_sort(a)` element-wise."""
    return list(out) == oracle_sort(a)


def equals_float_oracle(a: Sequence[Any], out: Sequence[Any]) -> bool:
    """
    True iff `out` matches `oracle_sort_floats(a)`, telling -0.0 from +0.0 and
    treating any NaN as equal to any other NaN.
    """
    return same_floats(out, oracle_sort_floats(a))
