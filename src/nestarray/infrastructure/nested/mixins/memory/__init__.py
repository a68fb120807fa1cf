"""
Memory (conversion and export) mixin and its NestedArray control paths.
"""

from ._nested_conversion import *
from ._nested_flatten import *
from ._base import NestedArrayMixinMemory

__all__ = [
    NestedArrayMixinMemory.__name__,
]
