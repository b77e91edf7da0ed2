"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_sort
        equals_oracle

    - Property checks:
        first_order_violation_index
        is_permutation
        permutation_counter_diff
        assert_no_mutation
        first_partition_violation_index
        is_partitioned
"""

from .oracle import ORACLE_NAME, equals_oracle, oracle_sort
from .properties import (
    assert_no_mutation,
    first_order_violation_index,
    first_partition_violation_index,
    is_partitioned,
    is_permutation,
    permutation_counter_diff,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "first_partition_violation_index",
    "is_partitioned",
]
