"""
Dimension-information mixin and its NestedArray control paths.

The implementation module is imported for its side effects (registration);
only the base mixin is exported.
"""

from ._nested_shape import *
from ._base import NestedArrayMixinShape

__all__ = [
    NestedArrayMixinShape.__name__,
]
