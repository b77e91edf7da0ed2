"""
Random input generators for exercising the sorting and partitioning routines.

Currently implemented (make_dataset):
- dist == "random":
    Integers drawn uniformly from an inclusive range.
- dist == "nearly_sorted":
    [0, 1, ..., n-1] degraded by ceil(swap_frac * n) random index swaps.
- dist == "few_uniques":
    At most k distinct values, repeated to fill n slots.
- dist == "sorted":
    [0, 1, ..., n-1].
- dist == "reversed":
    [n-1, ..., 0].

Plus random_array(), which draws the length as well as the values
(lengths 1..300, values 1..100 by default).

Conventions:
- All ranges are inclusive on both ends.
- The caller owns the numpy Generator; nothing here seeds it.
- Results are plain Python lists so the algorithms never see numpy types.
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
}

DEFAULT_MIN_LENGTH = 1
DEFAULT_MAX_LENGTH = 300
DEFAULT_MIN_VALUE = 1
DEFAULT_MAX_VALUE = 100

__all__ = ["SUPPORTED_DISTS", "make_dataset", "random_array"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate `n` integers according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements. Must be >= 0.
    spec : dict
        {"dist": <one of SUPPORTED_DISTS>, "params": {...}}

            random:         {"range": [lo, hi]}            (required)
            nearly_sorted:  {"swap_frac": 0.05}            (in [0, 1])
            few_uniques:    {"k": 10, "range": [lo, hi]}   (range optional)
            sorted, reversed: params ignored
    rng : numpy.random.Generator
        Unused by the deterministic dists.

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        On a negative/non-int `n`, an unknown dist, or malformed params.
    """
    if not isinstance(n, int) or n < 0:
        raise ValueError(f"n must be a nonnegative int; got {n!r}")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    params = spec.get("params") or {}

    if dist == "sorted":
        return list(range(n))

    if dist == "reversed":
        return list(range(n - 1, -1, -1))

    if dist == "random":
        if "range" not in params:
            raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
        lo, hi = _parse_range(params["range"])
        return _uniform(rng, lo, hi, n)

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params.get("swap_frac", 0.05))
        arr = list(range(n))
        num_swaps = int(np.ceil(swap_frac * n))
        if n == 0 or num_swaps == 0:
            return arr
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for s in range(num_swaps):
            i, j = int(idxs[2 * s]), int(idxs[2 * s + 1])
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    # few_uniques
    k = params.get("k")
    if not isinstance(k, int) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _parse_range(params.get("range", [0, 2**32 - 1]))
    if n == 0:
        return []
    actual_k = min(k, n, hi - lo + 1)
    # Draw distinct values from the caller's RNG, not Python's random module
    chosen: List[int] = []
    seen = set()
    while len(chosen) < actual_k:
        for v in map(int, rng.integers(lo, hi + 1, size=2 * (actual_k - len(chosen)))):
            if v not in seen:
                seen.add(v)
                chosen.append(v)
                if len(chosen) == actual_k:
                    break
    return [chosen[int(t)] for t in rng.integers(0, actual_k, size=n)]


def random_array(
    rng: np.random.Generator,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
    min_value: int = DEFAULT_MIN_VALUE,
    max_value: int = DEFAULT_MAX_VALUE,
) -> List[int]:
    """
    Draw a length uniformly from [min_length, max_length], then that many
    values uniformly from [min_value, max_value]. All bounds inclusive.
    """
    lo_len, hi_len = _parse_range([min_length, max_length])
    if lo_len < 0:
        raise ValueError(f"min_length must be nonnegative; got {lo_len}")
    n = int(rng.integers(lo_len, hi_len + 1))
    lo, hi = _parse_range([min_value, max_value])
    return _uniform(rng, lo, hi, n)


# ------------------------- helpers ------------------------- #


def _uniform(rng: np.random.Generator, lo: int, hi: int, n: int) -> List[int]:
    if n == 0:
        return []
    # Generator.integers is half-open; +1 makes hi inclusive
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _parse_range(spec: Any) -> Tuple[int, int]:
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError("range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(val: Any) -> float:
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _is_int_like(x: Any) -> bool:
    # bool is an int subclass but never a sensible bound
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
