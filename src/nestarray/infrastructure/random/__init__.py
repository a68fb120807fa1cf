"""
Random sampling utilities producing nested arrays.
"""

from ._sampling import (
    to_generator,
    randoms,
    sample_uniform,
    sample_normal,
    sample_rand_int,
    sample_binomial,
)

__all__ = [
    to_generator.__name__,
    randoms.__name__,
    sample_uniform.__name__,
    sample_normal.__name__,
    sample_rand_int.__name__,
    sample_binomial.__name__,
]
