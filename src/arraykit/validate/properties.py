"""
Property helpers for validating sort and partition results in tests.

Public API (stable):
    first_order_violation_index(xs, cmp_fn) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    assert_no_mutation(before, after) -> None
    first_partition_violation_index(xs, k, pred_fn) -> int | None
    is_partitioned(xs, k, pred_fn) -> bool

Notes
-----
- Sortedness itself is arraykit.is_sorted; the index variant here exists for
  error messages.
- Permutation checks count elements with collections.Counter, so elements
  must be hashable.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Hashable, Optional, Sequence

from arraykit.core import Comparator, Predicate, natural_cmp

__all__ = [
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "first_partition_violation_index",
    "is_partitioned",
]


def first_order_violation_index(xs: Sequence[Any], cmp_fn: Comparator = natural_cmp) -> Optional[int]:
    """
    Return the first i with cmp_fn(xs[i], xs[i+1]) > 0, or None if ordered.

        i = first_order_violation_index(out)
        assert i is None, f"out of order at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if cmp_fn(xs[i], xs[i + 1]) > 0:
            return i
    return None


def is_permutation(a: Sequence[Hashable], b: Sequence[Hashable]) -> bool:
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Hashable], b: Sequence[Hashable]) -> Dict[Hashable, int]:
    """
    Return value -> (count in a - count in b), omitting zero entries.

    An empty dict means a and b hold the same multiset.
    """
    ca = Counter(a)
    cb = Counter(b)
    diff: Dict[Hashable, int] = {}
    for k in set(ca) | set(cb):
        d = ca[k] - cb[k]
        if d != 0:
            diff[k] = d
    return diff


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Raise AssertionError naming the first differing index if `after` differs
    from `before`. Used to check that read-only helpers leave input alone.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x!r}, after={y!r}")


def first_partition_violation_index(xs: Sequence[Any], k: int, pred_fn: Predicate) -> Optional[int]:
    """
    Return the first index that breaks "pred_fn true on xs[:k], false on
    xs[k:]", or None if `xs` is partitioned at k.
    """
    if not 0 <= k <= len(xs):
        raise ValueError(f"k must be in [0, {len(xs)}]; got {k}")
    for i, x in enumerate(xs):
        if bool(pred_fn(x)) != (i < k):
            return i
    return None


def is_partitioned(xs: Sequence[Any], k: int, pred_fn: Predicate) -> bool:
    return first_partition_violation_index(xs, k, pred_fn) is None
