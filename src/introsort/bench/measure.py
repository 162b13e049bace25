"""
Timing harness for in-place sorting algorithms.

We measure exactly one call to an algorithm's `sort(a, config=...)` per sample,
using a monotonic high-resolution clock. Every algorithm sorts in place and so
destroys its input; each sample therefore gets a fresh copy, made outside the
timed block. GC handling and warmup also stay outside the timed block.

Public API (stable):
    time_sort_call(... ) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each successful sample
        "status": "ok" | "timeout" | "error" | "invalid",
        "error": str | None,                # populated if status is "error" or "invalid"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

__all__ = ["time_sort_call"]

# validator(original_input, sorted_output) -> bool
Validator = Callable[[List[Any], List[Any]], bool]


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., None],
    a: List[Any],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    validator: Optional[Validator] = None,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(copy_of_a, config=config)`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for logs/records).
    algo_fn : Callable[..., None]
        Callable implementing sort(a, *, config=None) that sorts `a` in place.
    a : list
        Input array. Never passed to `algo_fn` directly; only copies are.
    config : dict | None
        Algorithm configuration passed through unchanged.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call before timing.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample timeout threshold. If a single call exceeds this threshold,
        we mark status="timeout" and stop further sampling.
    validator : callable | None
        If given, called as validator(a, output) after every sample; a falsy
        result marks status="invalid" and stops sampling.

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],  # type: List[int]
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    # ---- Warmup (outside GC disable & outside timed block) ----
    if warmup and repeats > 0:
        try:
            algo_fn(list(a), config=config)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    # ---- GC control ----
    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        # ---- Timed loop ----
        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a)
            try:
                t0 = time.perf_counter_ns()
                algo_fn(arg, config=config)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            if validator is not None and not validator(a, arg):
                result["status"] = "invalid"
                result["error"] = f"output failed validation at repeat {r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))

            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break

    finally:
        # Restore original GC state; leave it alone if the caller had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
