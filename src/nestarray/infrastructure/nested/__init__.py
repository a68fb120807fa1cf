"""
Native nested-array backend.

Importing this package defines `NestedArray`, registers it in the
implementation registry under ``"nested"``, and registers the capability
control paths through which generic code reaches nested arrays, plain
sequences and foreign arrays.
"""

from ._nested_array import NestedArray
from . import _delegation
from ._coercion import (
    coerce,
    is_canonical,
    new_nd,
    construct_from_generator,
)
from ._engine import (
    mapmatrix,
    common_shape,
    broadcast_compatible,
    inner_product,
)

__all__ = [
    NestedArray.__name__,
    "coerce",
    "is_canonical",
    "new_nd",
    "construct_from_generator",
    "mapmatrix",
    "common_shape",
    "broadcast_compatible",
    "inner_product",
]
