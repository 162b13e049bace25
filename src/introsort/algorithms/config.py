"""
Tuning knobs for the sorting entry points.

Every entry point takes an optional `config` dict (the same dict the benchmark
runner reads from YAML and passes through unchanged):

    {
        "insertion_threshold": 16,   # ranges this short go to insertion sort (int >= 3)
        "depth_factor": 2,           # depth budget = depth_factor * floor(log2(n)) (int >= 0)
    }

Neither value changes the result of a sort, only how fast it gets there.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

DEFAULT_INSERTION_THRESHOLD = 16
DEFAULT_DEPTH_FACTOR = 2

# Median-of-three needs three distinct positions.
MIN_INSERTION_THRESHOLD = 3

__all__ = [
    "DEFAULT_INSERTION_THRESHOLD",
    "DEFAULT_DEPTH_FACTOR",
    "SortConfig",
    "parse_config",
]


@dataclass(frozen=True)
class SortConfig:
    insertion_threshold: int = DEFAULT_INSERTION_THRESHOLD
    depth_factor: int = DEFAULT_DEPTH_FACTOR

    def depth_budget(self, n: int) -> int:
        """Number of partitioning levels allowed before falling back to heapsort."""
        if n < 2:
            return 0
        return self.depth_factor * (n.bit_length() - 1)


_DEFAULT = SortConfig()


def parse_config(config: Optional[Dict[str, Any]]) -> SortConfig:
    """
    Validate a user-supplied config dict and return the parsed `SortConfig`.

    An already parsed `SortConfig` is returned unchanged.

    Raises
    ------
    ValueError
        On unknown keys, non-integer values, or values out of range.
    """
    if config is None:
        return _DEFAULT
    if isinstance(config, SortConfig):
        return config
    if not isinstance(config, dict):
        raise ValueError(f"config must be a dict or None; got {type(config).__name__}")

    unknown = set(config) - {"insertion_threshold", "depth_factor"}
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    threshold = _parse_int(config, "insertion_threshold", DEFAULT_INSERTION_THRESHOLD)
    if threshold < MIN_INSERTION_THRESHOLD:
        raise ValueError(
            f"config.insertion_threshold must be >= {MIN_INSERTION_THRESHOLD}; got {threshold}"
        )
    depth_factor = _parse_int(config, "depth_factor", DEFAULT_DEPTH_FACTOR)
    if depth_factor < 0:
        raise ValueError(f"config.depth_factor must be nonnegative; got {depth_factor}")

    return SortConfig(insertion_threshold=threshold, depth_factor=depth_factor)


def _parse_int(config: Dict[str, Any], key: str, default: int) -> int:
    val = config.get(key, default)
    # bool is an int subclass; reject it explicitly
    if isinstance(val, bool) or not isinstance(val, (int, np.integer)):
        raise ValueError(f"config.{key} must be an integer; got {val!r}")
    return int(val)
