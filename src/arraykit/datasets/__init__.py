"""
Datasets package public API.

Re-export the generators so callers can write:
    from arraykit.datasets import make_dataset, random_array
"""

from .generators import SUPPORTED_DISTS, make_dataset, random_array

__all__ = ["make_dataset", "random_array", "SUPPORTED_DISTS"]
