"""
Exceptions raised by arraykit in debug mode.

Nothing here is raised on the release path: with debug mode off, a bad range
surfaces as whatever Python does with it (IndexError, or a silently wrong
result).
"""

from __future__ import annotations

from typing import Optional, Sequence

__all__ = [
    "ArrayKitError",
    "InvalidRangeError",
    "InvariantViolation",
    "check_range",
    "check_split",
]


class ArrayKitError(Exception):
    pass


class InvalidRangeError(ArrayKitError, ValueError):
    """A half-open range does not satisfy 0 <= lo <= [mid <=] hi <= len(seq)."""

    def __init__(self, lo: int, hi: int, length: int, mid: Optional[int] = None) -> None:
        self.lo = lo
        self.hi = hi
        self.length = length
        self.mid = mid
        if mid is None:
            msg = f"invalid range [{lo}, {hi}) for sequence of length {length}"
        else:
            msg = f"invalid split [{lo}, {mid}, {hi}) for sequence of length {length}"
        super().__init__(msg)


class InvariantViolation(ArrayKitError, AssertionError):
    pass


def check_range(seq: Sequence, lo: int, hi: int) -> None:
    if not (0 <= lo <= hi <= len(seq)):
        raise InvalidRangeError(lo, hi, len(seq))


def check_split(seq: Sequence, lo: int, mid: int, hi: int) -> None:
    if not (0 <= lo <= mid <= hi <= len(seq)):
        raise InvalidRangeError(lo, hi, len(seq), mid=mid)
