"""
Tests for the merge helper, partition, and the read-only checks
(is_sorted, for_each).

Two documented non-guarantees are pinned down here on purpose:
- merge puts the right run's element first on ties (not stable)
- partition may reorder predicate-false elements
"""

from __future__ import annotations

from collections import Counter
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from arraykit import for_each, is_sorted, key_cmp, merge, natural_cmp, partition
from arraykit.validate import assert_no_mutation, is_partitioned, is_permutation


def is_even(x: int) -> bool:
    return x % 2 == 0


# ------------------------- is_sorted / for_each ------------------------- #


@pytest.mark.parametrize(
    "seq,lo,hi,expected",
    [
        ([], 0, 0, True),
        ([3], 0, 1, True),
        ([3, 1], 1, 1, True),
        ([3, 1], 0, 2, False),
        ([1, 1, 2], 0, 3, True),
        ([5, 1, 2, 3, 0], 1, 4, True),
        ([5, 1, 2, 3, 0], 1, 5, False),
    ],
)
def test_is_sorted(seq: List[int], lo: int, hi: int, expected: bool) -> None:
    before = list(seq)
    assert is_sorted(seq, lo, hi, natural_cmp) is expected
    assert_no_mutation(before, seq)


def test_is_sorted_stops_at_first_violation() -> None:
    calls = []

    def cmp(a, b):
        calls.append((a, b))
        return natural_cmp(a, b)

    assert not is_sorted([1, 3, 2, 0, -1], 0, 5, cmp)
    assert calls == [(1, 3), (3, 2)]


def test_for_each() -> None:
    seq = [2, 4, 5, 6]
    assert for_each(seq, 0, 2, is_even)
    assert not for_each(seq, 0, 4, is_even)
    assert for_each(seq, 3, 4, is_even)
    assert for_each(seq, 2, 2, is_even)
    assert for_each([], 0, 0, is_even)


def test_for_each_short_circuits() -> None:
    seen = []

    def pred(x):
        seen.append(x)
        return x > 0

    assert not for_each([1, -1, 2, 3], 0, 4, pred)
    assert seen == [1, -1]


# ------------------------- merge ------------------------- #


def test_merge_two_runs() -> None:
    seq = [1, 4, 9, 2, 3, 10, 11]
    merge(seq, 0, 3, 7, natural_cmp)
    assert seq == [1, 2, 3, 4, 9, 10, 11]


def test_merge_within_subrange() -> None:
    seq = [99, 5, 7, 1, 6, -1]
    merge(seq, 1, 3, 5, natural_cmp)
    assert seq == [99, 1, 5, 6, 7, -1]


@pytest.mark.parametrize("lo,mid,hi", [(0, 0, 3), (0, 3, 3), (2, 2, 2)])
def test_merge_with_empty_run(lo: int, mid: int, hi: int) -> None:
    seq = [1, 2, 3]
    merge(seq, lo, mid, hi, natural_cmp)
    assert seq == [1, 2, 3]


def test_merge_ties_take_right_run_first() -> None:
    seq = [(1, "a"), (2, "c"), (1, "b"), (2, "d")]
    merge(seq, 0, 2, 4, key_cmp(lambda r: r[0]))
    assert seq == [(1, "b"), (1, "a"), (2, "d"), (2, "c")]


@settings(deadline=None, max_examples=100)
@given(
    st.lists(st.integers(min_value=-50, max_value=50), max_size=60),
    st.lists(st.integers(min_value=-50, max_value=50), max_size=60),
)
def test_property_merge(left: List[int], right: List[int]) -> None:
    left, right = sorted(left), sorted(right)
    seq = left + right
    merge(seq, 0, len(left), len(seq), natural_cmp)
    assert len(seq) == len(left) + len(right)
    assert seq == sorted(left + right)


# ------------------------- partition ------------------------- #


def test_partition_concrete_scenario() -> None:
    seq = [4, 2, 4, 1, 3]
    k = partition(seq, is_even)
    assert k == 3
    assert Counter(seq[:k]) == Counter([4, 2, 4])
    assert Counter(seq[k:]) == Counter([1, 3])


def test_partition_keeps_order_of_true_elements() -> None:
    seq = [1, 8, 3, 6, 5, 4, 7, 2]
    k = partition(seq, is_even)
    assert k == 4
    assert seq[:k] == [8, 6, 4, 2]


def test_partition_may_reorder_false_elements() -> None:
    # The swap that brings 2 to the front sends 1 behind 3
    seq = [1, 3, 2]
    k = partition(seq, is_even)
    assert k == 1
    assert seq == [2, 3, 1]


@pytest.mark.parametrize(
    "seq,expected_k",
    [
        ([], 0),
        ([1, 3, 5], 0),
        ([2, 4, 6], 3),
        ([7], 0),
        ([8], 1),
    ],
)
def test_partition_edges(seq: List[int], expected_k: int) -> None:
    before = list(seq)
    k = partition(seq, is_even)
    assert k == expected_k
    if k in (0, len(seq)):
        assert seq == before


@settings(deadline=None, max_examples=150)
@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=200))
def test_property_partition(a: List[int]) -> None:
    seq = list(a)
    k = partition(seq, is_even)
    assert k == sum(1 for x in a if is_even(x))
    assert is_partitioned(seq, k, is_even)
    assert is_permutation(a, seq)
    assert seq[:k] == [x for x in a if is_even(x)]
