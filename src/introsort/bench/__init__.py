"""
Benchmark harness public API.

Re-exports:
    time_sort_call   (bench.measure)
    run_experiment   (bench.runner)
"""

from .measure import time_sort_call
from .runner import run_experiment

__all__ = ["time_sort_call", "run_experiment"]
