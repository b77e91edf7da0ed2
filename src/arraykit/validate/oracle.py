"""
Oracle for sorting correctness.

Python's built-in `sorted()` (driven through functools.cmp_to_key) is the
ground truth: it never mutates its input and returns a new list.

Public API (stable):
    oracle_sort(a, cmp_fn=natural_cmp) -> list
    equals_oracle(a, out, cmp_fn=natural_cmp) -> bool

`equals_oracle` compares element-for-element, so it is only meaningful when
equivalent elements are also equal (plain ints, say). For records with a
sort key, compare the keys or check order + permutation instead; merge_sort
is not stable and may order ties differently from the oracle.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, List, Sequence

from arraykit.core import Comparator, natural_cmp

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[Any], cmp_fn: Comparator = natural_cmp) -> List[Any]:
    return sorted(a, key=cmp_to_key(cmp_fn))


def equals_oracle(a: Sequence[Any], out: Sequence[Any], cmp_fn: Comparator = natural_cmp) -> bool:
    """True iff `out` equals oracle_sort(a, cmp_fn) element-for-element."""
    return list(out) == oracle_sort(a, cmp_fn)
