"""
In-place introsort for mutable sequences, with a total-order sort for floats.

    from introsort import sort, sort_by, heapsort, insertion_sort, sort_floats
"""

from .algorithms import (
    SortConfig,
    heapsort,
    insertion_sort,
    natural_order,
    reverse_order,
    sort,
    sort_by,
    sort_floats,
)

__version__ = "0.1.0"

__all__ = [
    "sort",
    "sort_by",
    "insertion_sort",
    "heapsort",
    "sort_floats",
    "natural_order",
    "reverse_order",
    "SortConfig",
    "__version__",
]
