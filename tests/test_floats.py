"""
Tests for sort_floats: the total order

    -inf < negative finite < -0.0 < +0.0 < positive finite < +inf < NaN
"""

from __future__ import annotations

import importlib
import math
from typing import Any, List

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from introsort import sort_by, sort_floats
from introsort.validate import equals_float_oracle, is_permutation, same_floats

floats_mod = importlib.import_module("introsort.algorithms.floats")

NAN = float("nan")
INF = float("inf")


# ------------------------- helpers ------------------------- #

def _signs(xs: List[float]) -> List[float]:
    return [math.copysign(1.0, x) for x in xs]


class RecordingList(list):
    """List that counts item assignments."""

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)
        self.writes = 0

    def __setitem__(self, i, x) -> None:
        self.writes += 1
        super().__setitem__(i, x)


@pytest.fixture
def ordered_cmp_operands(monkeypatch) -> List[Any]:
    """Every operand passed to the ordered (NaN-free) comparison."""
    seen: List[Any] = []
    real = floats_mod._cmp_ordered

    def spy(x, y):
        seen.append(x)
        seen.append(y)
        return real(x, y)

    monkeypatch.setattr(floats_mod, "_cmp_ordered", spy)
    return seen


# ------------------------- concrete scenarios ------------------------- #

def test_total_order_scenario() -> None:
    v = [1.0, -1.0, NAN, 0.0, -0.0, INF, -INF, NAN, 2.0]
    sort_floats(v)

    assert same_floats(v[:7], [-INF, -1.0, -0.0, 0.0, 1.0, 2.0, INF])
    assert math.isnan(v[7]) and math.isnan(v[8])


def test_signed_zero_isolation() -> None:
    v = [0.0, -0.0, 0.0, -0.0]
    sort_floats(v)
    assert v == [0.0, 0.0, 0.0, 0.0]
    assert _signs(v) == [-1.0, -1.0, 1.0, 1.0]


def test_empty_and_single() -> None:
    empty: List[float] = []
    sort_floats(empty)
    assert empty == []

    one = [NAN]
    sort_floats(one)
    assert math.isnan(one[0])

    zero = [-0.0]
    sort_floats(zero)
    assert _signs(zero) == [-1.0]


def test_all_nan() -> None:
    v = [NAN] * 10
    sort_floats(v)
    assert all(math.isnan(x) for x in v)


def test_nans_first_move_to_tail() -> None:
    v = [NAN, NAN, 3.0, NAN, 1.0, 2.0, NAN]
    sort_floats(v)
    assert v[:3] == [1.0, 2.0, 3.0]
    assert all(math.isnan(x) for x in v[3:])


def test_zeros_among_negatives_and_positives() -> None:
    a = [5.0, 0.0, -3.0, -0.0, 0.0, -2.5, -0.0, 7.0, 0.0] * 5
    v = list(a)
    sort_floats(v)
    assert equals_float_oracle(a, v)
    zero_signs = [math.copysign(1.0, x) for x in v if x == 0]
    assert zero_signs == [-1.0] * 10 + [1.0] * 15


def test_only_negative_zeros_and_negatives() -> None:
    v = [-0.0, -1.0, -0.0, -5.0]
    sort_floats(v)
    assert same_floats(v, [-5.0, -1.0, -0.0, -0.0])


# ------------------------- the NaN-free precondition ------------------------- #

def test_nan_never_reaches_ordered_comparison(ordered_cmp_operands) -> None:
    rng = np.random.default_rng(3)
    base = rng.normal(size=300)
    base[rng.random(300) < 0.2] = np.nan
    v = base.tolist()

    sort_floats(v)

    assert ordered_cmp_operands, "the prefix should have been sorted"
    assert not any(math.isnan(x) for x in ordered_cmp_operands)
    assert equals_float_oracle(base.tolist(), v)


def test_ordered_comparison_rejects_nan() -> None:
    with pytest.raises(AssertionError, match="NaN reached"):
        floats_mod._cmp_ordered(1.0, NAN)


# ------------------------- zero repair phase ------------------------- #

def test_no_zero_path_matches_plain_comparator_sort() -> None:
    rng = np.random.default_rng(5)
    a = rng.uniform(-100, 100, size=500).tolist()
    assert 0.0 not in a

    v = list(a)
    sort_floats(v)
    plain = list(a)
    sort_by(plain, floats_mod._cmp_ordered)
    assert v == plain


def test_zero_repair_is_a_no_op_without_zeros() -> None:
    v = RecordingList([-3.0, -1.0, 0.5, 2.0, 9.0])
    floats_mod._order_signed_zeros(v, len(v))
    assert v.writes == 0


def test_zero_repair_is_a_no_op_for_single_signed_run() -> None:
    v = RecordingList([-3.0, 0.0, 0.0, 0.0, 9.0])
    floats_mod._order_signed_zeros(v, len(v))
    assert v.writes == 0


def test_zero_repair_rewrites_only_the_zero_run() -> None:
    v = RecordingList([-3.0, 0.0, -0.0, 0.0, -0.0, 9.0, NAN])
    floats_mod._order_signed_zeros(v, 6)
    assert v.writes == 4
    assert _signs(v[1:5]) == [-1.0, -1.0, 1.0, 1.0]
    assert v[0] == -3.0 and v[5] == 9.0 and math.isnan(v[6])


# ------------------------- container and element types ------------------------- #

def test_numpy_array() -> None:
    arr = np.array([1.5, np.nan, -0.0, 0.0, -np.inf, 0.0, -0.0, np.inf, -2.0])
    sort_floats(arr)
    assert same_floats(arr[:7].tolist(), [-np.inf, -2.0, -0.0, -0.0, 0.0, 0.0, 1.5])
    assert arr[7] == np.inf
    assert np.isnan(arr[8])


def test_float32_elements_keep_their_type() -> None:
    v = [np.float32(x) for x in (0.0, -0.0, 2.0, -1.0, 0.0, -0.0)]
    sort_floats(v)
    assert all(isinstance(x, np.float32) for x in v)
    assert same_floats(v, [-1.0, -0.0, -0.0, 0.0, 0.0, 2.0])


def test_config_passes_through() -> None:
    rng = np.random.default_rng(9)
    a = rng.normal(size=200).tolist() + [0.0, -0.0, NAN] * 10
    v = list(a)
    sort_floats(v, config={"insertion_threshold": 4, "depth_factor": 0})
    assert equals_float_oracle(a, v)

    with pytest.raises(ValueError, match="depth_factor"):
        sort_floats(list(a), config={"depth_factor": -1})


# ------------------------- property-based tests (randomized) ------------------------- #

any_float = st.floats(allow_nan=True, allow_infinity=True)
zero_heavy = st.one_of(st.sampled_from([0.0, -0.0, NAN, INF, -INF]), st.floats(-10, 10))


@settings(deadline=None, max_examples=150)
@given(st.lists(any_float, min_size=0, max_size=300))
def test_property_total_order(a: List[float]) -> None:
    v = list(a)
    sort_floats(v)
    assert equals_float_oracle(a, v)
    assert is_permutation(a, v)


@settings(deadline=None, max_examples=150)
@given(st.lists(zero_heavy, min_size=0, max_size=300))
def test_property_zero_heavy(a: List[float]) -> None:
    v = list(a)
    sort_floats(v)
    assert equals_float_oracle(a, v)
    assert is_permutation(a, v)

    # Idempotence
    again = list(v)
    sort_floats(again)
    assert same_floats(again, v)
