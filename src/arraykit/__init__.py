"""
arraykit public API.

Re-export the core toolkit so callers can write:
    from arraykit import merge_sort, natural_cmp
"""

from .core import (
    Comparator,
    Predicate,
    for_each,
    insertion_sort,
    is_sorted,
    key_cmp,
    merge,
    merge_sort,
    natural_cmp,
    partition,
    reverse_cmp,
)
from .errors import ArrayKitError, InvalidRangeError, InvariantViolation

__version__ = "0.1.0"

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
    "ArrayKitError",
    "InvalidRangeError",
    "InvariantViolation",
]
