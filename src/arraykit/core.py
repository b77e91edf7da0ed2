"""
Ordered array toolkit: in-place sorting and partitioning over half-open ranges.

Public API (stable):
    is_sorted(seq, lo, hi, cmp_fn) -> bool
    for_each(seq, lo, hi, pred_fn) -> bool
    merge(seq, lo, mid, hi, cmp_fn) -> None
    insertion_sort(seq, lo, hi, cmp_fn) -> None
    merge_sort(seq, lo, hi, cmp_fn) -> None
    partition(seq, pred_fn) -> int

    natural_cmp(a, b) -> int
    key_cmp(key) -> Comparator
    reverse_cmp(cmp_fn) -> Comparator

Conventions:
- Ranges are half-open `[lo, hi)` with 0 <= lo <= hi <= len(seq).
- `cmp_fn(a, b)` is a three-way comparator: < 0 if a orders before b, 0 if
  equivalent, > 0 if after.
- Every operation mutates the caller's sequence in place and returns None,
  except the read-only checks and `partition` (which returns the split index).
- With debug mode on (see arraykit._config) ranges are validated, loop
  invariants are asserted, and one diagnostic line per call goes to stderr.
  With it off none of that runs.

Stability:
- `insertion_sort` is stable.
- `merge` takes from the left run only on a strict `< 0`, so on ties the
  right run's element lands first. `merge_sort` is therefore NOT stable.
- `partition` keeps the relative order of predicate-true elements only;
  predicate-false elements may be reordered by the swaps.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Sequence, TypeVar

from arraykit._config import DEBUG
from arraykit._debug import dbg_print
from arraykit.errors import InvariantViolation, check_range, check_split

T = TypeVar("T")

Comparator = Callable[[T, T], int]
Predicate = Callable[[T], bool]

__all__ = [
    "Comparator",
    "Predicate",
    "is_sorted",
    "for_each",
    "merge",
    "insertion_sort",
    "merge_sort",
    "partition",
    "natural_cmp",
    "key_cmp",
    "reverse_cmp",
]


# ------------------------- comparators ------------------------- #


def natural_cmp(a: Any, b: Any) -> int:
    """Three-way comparison using the elements' own `<` and `>`."""
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


def key_cmp(key: Callable[[T], Any]) -> Comparator:
    """Return a comparator ordering elements by `key(x)`."""

    def _cmp(a: T, b: T) -> int:
        return natural_cmp(key(a), key(b))

    return _cmp


def reverse_cmp(cmp_fn: Comparator) -> Comparator:
    def _cmp(a: T, b: T) -> int:
        return cmp_fn(b, a)

    return _cmp


# ------------------------- correctness checks ------------------------- #


def is_sorted(seq: Sequence[T], lo: int, hi: int, cmp_fn: Comparator) -> bool:
    """
    Return True iff seq[lo:hi] is nondecreasing under `cmp_fn`.

    Ranges with hi - lo <= 1 (including lo == hi) are vacuously sorted.
    """
    if DEBUG:
        check_range(seq, lo, hi)
    for i in range(lo, hi - 1):
        if cmp_fn(seq[i], seq[i + 1]) > 0:
            return False
    return True


def for_each(seq: Sequence[T], lo: int, hi: int, pred_fn: Predicate) -> bool:
    """Return True iff `pred_fn` holds for every element of seq[lo:hi]."""
    if DEBUG:
        check_range(seq, lo, hi)
    for i in range(lo, hi):
        if not pred_fn(seq[i]):
            return False
    return True


# ------------------------- sorting ------------------------- #


def merge(seq: MutableSequence[T], lo: int, mid: int, hi: int, cmp_fn: Comparator) -> None:
    """
    Merge the sorted runs seq[lo:mid] and seq[mid:hi] into sorted seq[lo:hi].

    Parameters
    ----------
    seq : MutableSequence
        Sequence holding both runs; only indices in [lo, hi) are written.
    lo, mid, hi : int
        0 <= lo <= mid <= hi <= len(seq).
    cmp_fn : Comparator
        Three-way comparator. The left element is taken only when
        cmp_fn(left, right) < 0; equal elements come from the right run first.

    Notes
    -----
    Uses a scratch list of length hi - lo that is dropped when the call returns.
    """
    if DEBUG:
        check_split(seq, lo, mid, hi)
        if not is_sorted(seq, lo, mid, cmp_fn) or not is_sorted(seq, mid, hi, cmp_fn):
            raise InvariantViolation(f"merge: runs [{lo}, {mid}) and [{mid}, {hi}) must both be sorted")
        dbg_print(f"merge [{lo}, {mid}) + [{mid}, {hi})")

    tmp = []
    # i walks the left run, j the right run
    i, j = lo, mid
    while i < mid and j < hi:
        if cmp_fn(seq[i], seq[j]) < 0:
            tmp.append(seq[i])
            i += 1
        else:
            tmp.append(seq[j])
            j += 1

    # At most one of these copies anything
    tmp.extend(seq[i:mid])
    tmp.extend(seq[j:hi])

    for k, x in enumerate(tmp):
        seq[lo + k] = x


def insertion_sort(seq: MutableSequence[T], lo: int, hi: int, cmp_fn: Comparator) -> None:
    """
    Sort seq[lo:hi] in place with insertion sort.

    Stable: an element only moves past neighbours that compare strictly
    greater. Elements outside [lo, hi) are never read or written.
    O(n^2) comparisons worst case, O(1) extra space.
    """
    if DEBUG:
        check_range(seq, lo, hi)
        dbg_print(f"insertion_sort [{lo}, {hi})")

    if hi - lo <= 1:
        return

    for i in range(lo + 1, hi):
        if DEBUG and not is_sorted(seq, lo, i, cmp_fn):
            raise InvariantViolation(f"insertion_sort: prefix [{lo}, {i}) is not sorted")

        key = seq[i]
        j = i - 1
        while j >= lo and cmp_fn(seq[j], key) > 0:
            seq[j + 1] = seq[j]
            j -= 1
        seq[j + 1] = key


def merge_sort(seq: MutableSequence[T], lo: int, hi: int, cmp_fn: Comparator) -> None:
    """
    Sort seq[lo:hi] in place with top-down merge sort.

    O(n log n) comparisons. Each merge allocates at most hi - lo scratch slots,
    released before the next merge starts. Not stable, see `merge`.
    """
    if DEBUG:
        check_range(seq, lo, hi)
    if hi - lo <= 1:
        return
    mid = lo + (hi - lo) // 2
    merge_sort(seq, lo, mid, cmp_fn)
    merge_sort(seq, mid, hi, cmp_fn)
    merge(seq, lo, mid, hi, cmp_fn)


# ------------------------- partitioning ------------------------- #


def partition(seq: MutableSequence[T], pred_fn: Predicate) -> int:
    """
    Move every element satisfying `pred_fn` to the front of `seq`.

    Operates on the whole sequence (no range arguments).

    Returns
    -------
    int
        k such that pred_fn holds for seq[:k] and fails for seq[k:];
        k is the number of predicate-true elements.

    Notes
    -----
    Predicate-true elements keep their relative order. Predicate-false
    elements do not: each swap sends the element at k to wherever the
    true element was found, e.g. [1, 3, 2] with "is even" becomes [2, 3, 1].
    """
    if DEBUG:
        dbg_print(f"partition over {len(seq)} elements")

    k = 0
    for i in range(len(seq)):
        if DEBUG:
            if not for_each(seq, 0, k, pred_fn):
                raise InvariantViolation(f"partition: prefix [0, {k}) has a predicate-false element at i={i}")
            if not for_each(seq, k, i, lambda x: not pred_fn(x)):
                raise InvariantViolation(f"partition: window [{k}, {i}) has a predicate-true element")

        if pred_fn(seq[i]):
            seq[k], seq[i] = seq[i], seq[k]
            k += 1
    return k
