"""
Arithmetic mixin and its NestedArray control paths.

This package aggregates the arithmetic mixin and the modules registering
its implementations:

- addition and subtraction  (``matrix_add`` / ``matrix_sub``, ``+`` / ``-``)
- multiplication            (``element_multiply``, ``scale``, ``@``, ``*``)
- vector products and norms (``vector_dot``, ``length``, ``normalise``)
- row operations            (``swap_rows``, ``multiply_row``, ``add_row``)

Implementation modules are imported for their side effect of registering
control paths. Only the base mixin is exported.
"""

from ._nested_addition import *
from ._nested_multiplication import *
from ._nested_vector import *
from ._nested_rows import *
from ._base import NestedArrayMixinArithmetic

__all__ = [
    NestedArrayMixinArithmetic.__name__,
]
