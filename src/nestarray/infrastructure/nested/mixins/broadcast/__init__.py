"""
Broadcast mixin and its NestedArray control paths.
"""

from ._nested_broadcast import *
from ._base import NestedArrayMixinBroadcast

__all__ = [
    NestedArrayMixinBroadcast.__name__,
]
