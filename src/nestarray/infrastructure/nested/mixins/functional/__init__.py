"""
Functional (map/reduce) mixin and its NestedArray control paths.
"""

from ._nested_functional import *
from ._base import NestedArrayMixinFunctional

__all__ = [
    NestedArrayMixinFunctional.__name__,
]
