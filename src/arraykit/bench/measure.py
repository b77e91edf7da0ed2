"""
Timing harness for the in-place sort entry points.

Each sample times exactly one call to `sort_fn(buf, 0, len(buf), cmp_fn)` on
a fresh copy of the input, using time.perf_counter_ns. Copying, warmup and GC
handling stay outside the timed block.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "n": int,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns per completed sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }

A sort that raises is recorded as status="error" rather than propagated, so a
sweep over several algorithms can carry on past a broken one.
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, MutableSequence, Sequence

from arraykit.core import Comparator

__all__ = ["time_sort_call"]

SortFn = Callable[[MutableSequence[Any], int, int, Comparator], None]


def time_sort_call(
    *,
    algo_name: str,
    sort_fn: SortFn,
    seq: Sequence[Any],
    cmp_fn: Comparator,
    repeats: int,
    warmup: bool = True,
    disable_gc: bool = True,
    timeout_seconds: float = 10.0,
) -> Dict[str, Any]:
    """
    Time repeated in-place sorts of copies of `seq`.

    Parameters
    ----------
    algo_name : str
        Label stored in the result.
    sort_fn : callable
        In-place sort with the signature sort_fn(seq, lo, hi, cmp_fn),
        e.g. arraykit.merge_sort.
    seq : Sequence
        Input. Never mutated; each sample sorts its own copy.
    cmp_fn : Comparator
        Passed through unchanged.
    repeats : int
        Number of timed samples (>= 0).
    warmup : bool
        If True, make one untimed call first.
    disable_gc : bool
        If True, collect and disable the GC for the timed loop, then restore it.
    timeout_seconds : float
        A sample slower than this marks status="timeout" and stops sampling.

    Returns
    -------
    dict
        See module docstring for the schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    samples: List[int] = []
    result: Dict[str, Any] = {
        "algo": algo_name,
        "n": len(seq),
        "repeats": repeats,
        "samples_ns": samples,
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if warmup and repeats > 0:
        buf = list(seq)
        try:
            sort_fn(buf, 0, len(buf), cmp_fn)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            buf = list(seq)
            try:
                t0 = time.perf_counter_ns()
                sort_fn(buf, 0, len(buf), cmp_fn)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            samples.append(elapsed)
            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Leave GC disabled if the caller had it disabled
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
