"""
Baseline: CPython's built-in `list.sort` (timsort), for benchmark comparisons.

Not part of the engine; it gives the runner a reference point measured with
the same harness as the in-place algorithms.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

__all__ = ["sort"]


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> None:
    if config:
        raise ValueError("builtin_timsort takes no config")
    a.sort()
