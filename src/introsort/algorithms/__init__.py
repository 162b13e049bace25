"""
Sorting algorithms public API.

Re-exports:
    - Introsort driver:  sort, sort_by, sort_range
    - Base cases:        insertion_sort, heapsort
    - Float adapter:     sort_floats
    - Comparators:       natural_order, reverse_order
    - Tuning:            SortConfig, parse_config

Each algorithm module (introsort, heap_sort, insertion, floats,
builtin_timsort) also defines `sort(a, *, config=None)`, the signature the
benchmark runner looks up by module name.
"""

from .config import SortConfig, parse_config
from .floats import sort_floats
from .heap_sort import heapsort, heapsort_range
from .insertion import insertion_sort, insertion_sort_range
from .introsort import sort, sort_by, sort_range
from .ordering import Comparator, natural_order, reverse_order

__all__ = [
    "sort",
    "sort_by",
    "sort_range",
    "insertion_sort",
    "insertion_sort_range",
    "heapsort",
    "heapsort_range",
    "sort_floats",
    "Comparator",
    "natural_order",
    "reverse_order",
    "SortConfig",
    "parse_config",
]
