"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_sort
        oracle_sort_floats
        float_total_order_key
        equals_oracle
        equals_float_oracle

    - Property checks:
        is_sorted_by
        first_violation_index
        is_permutation
        permutation_counter_diff
        same_floats

    - Instrumentation:
        CountingComparator
        McIlroyAdversary
"""

from .instrument import CountingComparator, McIlroyAdversary
from .oracle import (
    ORACLE_NAME,
    equals_float_oracle,
    equals_oracle,
    float_total_order_key,
    oracle_sort,
    oracle_sort_floats,
)
from .properties import (
    first_violation_index,
    is_permutation,
    is_sorted_by,
    permutation_counter_diff,
    same_floats,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "oracle_sort_floats",
    "float_total_order_key",
    "equals_oracle",
    "equals_float_oracle",
    "is_sorted_by",
    "first_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "same_floats",
    "CountingComparator",
    "McIlroyAdversary",
]
