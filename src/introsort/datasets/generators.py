"""
Dataset generators for sorting tests and benchmarks.

Integer distributions:
- "random":        uniform integers from an inclusive range.
- "nearly_sorted": [0, 1, ..., n-1] with ceil(swap_frac * n) random swaps.
- "few_uniques":   k distinct values, positions filled uniformly from them.
- "sorted":        [0, 1, ..., n-1].
- "reversed":      [n-1, n-2, ..., 0].
- "organ_pipe":    ascending to the middle, then descending. A classic
                   stress shape for median-of-three pivot selection.

Float distribution:
- "floats":        uniform floats in an inclusive range, with configurable
                   fractions of NaN, signed zeros and infinities mixed in.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list

Conventions:
- Returns a Python list of ints or floats (the sorting engine stays
  NumPy-agnostic).
- The caller supplies the RNG; deterministic shapes ignore it.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np

SUPPORTED_DISTS = {
    "random",
    "nearly_sorted",
    "few_uniques",
    "sorted",
    "reversed",
    "organ_pipe",
    "floats",
}
__all__ = ["SUPPORTED_DISTS", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[Any]:
    """
    Generate a dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        Distribution specification:

            {"dist": "random", "params": {"range": [lo, hi]}}          # inclusive
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}   # in [0, 1]
            {"dist": "few_uniques", "params": {"k": 10, "range": [lo, hi]}}
            {"dist": "sorted"} / {"dist": "reversed"} / {"dist": "organ_pipe"}
            {"dist": "floats", "params": {
                "range": [-1e6, 1e6],
                "nan_frac": 0.01, "zero_frac": 0.01, "inf_frac": 0.0,
            }}

    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).

    Returns
    -------
    list
        A list of length `n`.

    Raises
    ------
    ValueError
        If inputs are invalid or the distribution is unsupported.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    if dist == "random":
        lo, hi = _parse_int_range(params, required=True, default=(0, 0))
        if n == 0:
            return []
        # Generator.integers is half-open; +1 makes the upper bound inclusive.
        return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()

    if dist == "nearly_sorted":
        swap_frac = _parse_fraction(params, "swap_frac", 0.05)
        arr = list(range(n))
        num_swaps = int(np.ceil(swap_frac * n))
        if n == 0 or num_swaps == 0:
            return arr
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            i = int(idxs[2 * k])
            j = int(idxs[2 * k + 1])
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    if dist == "few_uniques":
        k = params.get("k", None)
        if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k < 1:
            raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
        lo, hi = _parse_int_range(params, required=False, default=(0, 4294967295))
        if n == 0:
            return []
        actual_k = int(min(k, n, hi - lo + 1))
        # Distinct values come from the caller's RNG so runs stay reproducible.
        values = _distinct_sample(rng, lo, hi, actual_k)
        picks = rng.integers(0, actual_k, size=n)
        return [values[int(t)] for t in picks]

    if dist == "sorted":
        return list(range(n))

    if dist == "reversed":
        return list(range(n - 1, -1, -1))

    if dist == "organ_pipe":
        half = (n + 1) // 2
        return list(range(half)) + list(range(n - half - 1, -1, -1))

    if dist == "floats":
        return _make_floats(n, params, rng)

    # Unreachable: `dist` was checked against SUPPORTED_DISTS above.
    raise ValueError(f"Unhandled dataset dist: {dist!r}")


# ------------------------- helpers ------------------------- #


def _make_floats(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[float]:
    lo, hi = _parse_float_range(params, default=(-1e6, 1e6))
    nan_frac = _parse_fraction(params, "nan_frac", 0.0)
    zero_frac = _parse_fraction(params, "zero_frac", 0.0)
    inf_frac = _parse_fraction(params, "inf_frac", 0.0)
    if nan_frac + zero_frac + inf_frac > 1.0:
        raise ValueError("floats: nan_frac + zero_frac + inf_frac must not exceed 1.0")
    if n == 0:
        return []

    arr = rng.uniform(lo, hi, size=n)
    # One uniform draw per slot decides which special value (if any) replaces it.
    u = rng.random(size=n)
    signs = rng.integers(0, 2, size=n).astype(bool)
    nan_cut = nan_frac
    zero_cut = nan_cut + zero_frac
    inf_cut = zero_cut + inf_frac
    arr[u < nan_cut] = np.nan
    zero_mask = (u >= nan_cut) & (u < zero_cut)
    arr[zero_mask & signs] = -0.0
    arr[zero_mask & ~signs] = 0.0
    inf_mask = (u >= zero_cut) & (u < inf_cut)
    arr[inf_mask & signs] = -np.inf
    arr[inf_mask & ~signs] = np.inf
    return arr.tolist()


def _distinct_sample(rng: np.random.Generator, lo: int, hi: int, k: int) -> List[int]:
    chosen: List[int] = []
    seen = set()
    while len(chosen) < k:
        batch = rng.integers(lo, hi + 1, size=2 * (k - len(chosen)))
        for v in map(int, batch):
            if v not in seen:
                seen.add(v)
                chosen.append(v)
                if len(chosen) == k:
                    break
    return chosen


def _validate_n(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_int_range(
    params: Dict[str, Any], *, required: bool, default: Tuple[int, int]
) -> Tuple[int, int]:
    """Parse params["range"] == [min_int, max_int] (inclusive)."""
    if "range" not in params:
        if required:
            raise ValueError("params.range must be provided as [min, max] (inclusive)")
        return default
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError("params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_float_range(params: Dict[str, Any], default: Tuple[float, float]) -> Tuple[float, float]:
    if "range" not in params:
        return default
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("floats.params.range must be a 2-element list/tuple [min, max]")
    try:
        lo, hi = float(spec[0]), float(spec[1])
    except (TypeError, ValueError) as e:
        raise ValueError(f"floats.params.range values must be numbers; got {spec!r}") from e
    if not (np.isfinite(lo) and np.isfinite(hi)) or lo > hi:
        raise ValueError(f"floats.params.range invalid: [{lo}, {hi}]")
    return lo, hi


def _parse_fraction(params: Dict[str, Any], key: str, default: float) -> float:
    val = params.get(key, default)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(f"params.{key} must be a float in [0.0, 1.0]; got {val!r}") from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"params.{key} must be in [0.0, 1.0]; got {x}")
    return x


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types, but not bools
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
