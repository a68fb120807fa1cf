"""
Unary mixin (negation and maths table) and its NestedArray control paths.
"""

from ._nested_maths import *
from ._base import NestedArrayMixinUnary, MATHS_OPS

__all__ = [
    NestedArrayMixinUnary.__name__,
    "MATHS_OPS",
]
