"""
Comparator conventions shared by every sorting entry point.

A comparator is a two-argument callable following the `functools.cmp_to_key`
convention:

    cmp(a, b) < 0   -> a sorts before b
    cmp(a, b) == 0  -> a and b are interchangeable
    cmp(a, b) > 0   -> a sorts after b

Only the sign of the result is inspected.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

Comparator = Callable[[Any, Any], int]

__all__ = ["Comparator", "natural_order", "reverse_order", "resolve_comparator"]


def natural_order(a: Any, b: Any) -> int:
    """Compare with the elements' own `<`."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse_order(cmp: Optional[Comparator] = None) -> Comparator:
    """Return a comparator ordering elements opposite to `cmp` (natural order by default)."""
    base = natural_order if cmp is None else cmp

    def _reversed(a: Any, b: Any) -> int:
        return base(b, a)

    return _reversed


def resolve_comparator(cmp: Optional[Comparator]) -> Comparator:
    if cmp is None:
        return natural_order
    if not callable(cmp):
        raise TypeError(f"comparator must be callable; got {type(cmp).__name__}")
    return cmp
