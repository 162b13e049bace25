"""Tests for config parsing shared by every entry point."""

from __future__ import annotations

import numpy as np
import pytest

from introsort import SortConfig, heapsort, insertion_sort, sort
from introsort.algorithms import parse_config
from introsort.algorithms.config import DEFAULT_DEPTH_FACTOR, DEFAULT_INSERTION_THRESHOLD


def test_defaults() -> None:
    cfg = parse_config(None)
    assert cfg == SortConfig(DEFAULT_INSERTION_THRESHOLD, DEFAULT_DEPTH_FACTOR)
    assert parse_config({}) == cfg


def test_explicit_values() -> None:
    cfg = parse_config({"insertion_threshold": 24, "depth_factor": np.int64(3)})
    assert cfg.insertion_threshold == 24
    assert cfg.depth_factor == 3


def test_sortconfig_passes_through() -> None:
    cfg = SortConfig(insertion_threshold=5, depth_factor=1)
    assert parse_config(cfg) is cfg


@pytest.mark.parametrize(
    "config,match",
    [
        ({"threshold": 8}, "Unknown config keys"),
        ({"insertion_threshold": 2}, "insertion_threshold must be >= 3"),
        ({"insertion_threshold": 8.5}, "insertion_threshold must be an integer"),
        ({"insertion_threshold": True}, "insertion_threshold must be an integer"),
        ({"depth_factor": -1}, "depth_factor must be nonnegative"),
        ({"depth_factor": "2"}, "depth_factor must be an integer"),
        ([("depth_factor", 2)], "config must be a dict"),
    ],
)
def test_invalid_config(config, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        parse_config(config)


@pytest.mark.parametrize("fn", [sort])
def test_entry_point_validates_config(fn) -> None:
    with pytest.raises(ValueError, match="Unknown config keys"):
        fn([3, 2, 1], config={"bogus": 1})


def test_benchmark_entry_points_validate_config() -> None:
    import importlib

    for name in ("heap_sort", "insertion", "introsort", "floats"):
        mod = importlib.import_module(f"introsort.algorithms.{name}")
        with pytest.raises(ValueError):
            mod.sort([3.0, 2.0, 1.0], config={"bogus": 1})
        v = [3.0, 2.0, 1.0]
        mod.sort(v, config={})
        assert v == [1.0, 2.0, 3.0]


def test_standalone_entry_points_take_no_config() -> None:
    v = [2, 1]
    heapsort(v)
    insertion_sort(v)
    assert v == [1, 2]
