"""
Comparison mixin and its NestedArray control path.
"""

from ._nested_equals import *
from ._base import NestedArrayMixinComparison

__all__ = [
    NestedArrayMixinComparison.__name__,
]
