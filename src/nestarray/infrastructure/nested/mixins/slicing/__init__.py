"""
Slicing mixin and its NestedArray control paths.

Implementation modules are imported for their side effect of registering
control paths; only the base mixin is public.
"""

from ._nested_slicing import *
from ._nested_reorder import *
from ._base import NestedArrayMixinSlicing

__all__ = [
    NestedArrayMixinSlicing.__name__,
]
