"""Tests for the oracle, property helpers and comparator instrumentation."""

from __future__ import annotations

import math

import pytest

from introsort import reverse_order
from introsort.validate import (
    CountingComparator,
    McIlroyAdversary,
    equals_float_oracle,
    equals_oracle,
    first_violation_index,
    float_total_order_key,
    is_permutation,
    is_sorted_by,
    oracle_sort_floats,
    permutation_counter_diff,
    same_floats,
)

NAN = float("nan")


def test_first_violation_index() -> None:
    assert first_violation_index([]) is None
    assert first_violation_index([1, 2, 2, 3]) is None
    assert first_violation_index([1, 3, 2]) == 1
    assert first_violation_index([3, 2, 1], reverse_order()) is None
    assert is_sorted_by([3, 2, 1], reverse_order())
    assert not is_sorted_by([3, 2, 1])


def test_permutation_is_sign_and_nan_aware() -> None:
    assert is_permutation([1, 2, 2], [2, 1, 2])
    assert not is_permutation([1, 2], [1, 2, 2])
    assert not is_permutation([0.0, -0.0], [0.0, 0.0])
    assert is_permutation([NAN, 1.0], [1.0, NAN])
    assert permutation_counter_diff([1, 1, 2], [1, 2, 3]) == {1: 1, 3: -1}


def test_same_floats() -> None:
    assert same_floats([NAN, -0.0, 1.0], [NAN, -0.0, 1.0])
    assert not same_floats([0.0], [-0.0])
    assert not same_floats([NAN], [1.0])
    assert not same_floats([1.0], [1.0, 2.0])


def test_float_oracle() -> None:
    out = oracle_sort_floats([NAN, 0.0, -math.inf, -0.0, 1.0])
    assert same_floats(out, [-math.inf, -0.0, 0.0, 1.0, NAN])
    assert float_total_order_key(-0.0) < float_total_order_key(0.0)
    assert float_total_order_key(math.inf) < float_total_order_key(NAN)
    assert equals_float_oracle([0.0, -0.0], [-0.0, 0.0])
    assert not equals_float_oracle([0.0, -0.0], [0.0, -0.0])
    assert equals_oracle([3, 1, 2], [1, 2, 3])


def test_counting_comparator() -> None:
    counter = CountingComparator(reverse_order())
    assert counter(1, 2) > 0
    assert counter(2, 1) < 0
    assert counter.calls == 2
    counter.reset()
    assert counter.calls == 0


def test_adversary_is_consistent_while_deciding() -> None:
    adv = McIlroyAdversary(3)
    assert adv(0, 1) != 0  # two gas items: one gets frozen
    assert adv.nsolid == 1
    assert adv(1, 0) == -adv(0, 1)
    with pytest.raises(ValueError):
        McIlroyAdversary(-1)
