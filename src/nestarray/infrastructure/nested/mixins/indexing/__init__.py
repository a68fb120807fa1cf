"""
Indexed access mixin and its NestedArray control paths.
"""

from ._nested_indexing import *
from ._base import NestedArrayMixinIndexing

__all__ = [
    NestedArrayMixinIndexing.__name__,
]
