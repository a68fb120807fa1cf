"""
Construction mixin (classmethod factories).
"""

from ._base import NestedArrayMixinConstruction

__all__ = [
    NestedArrayMixinConstruction.__name__,
]
