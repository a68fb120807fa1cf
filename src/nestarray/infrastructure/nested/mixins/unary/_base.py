"""
Unary mixin declaring negation and the element-wise maths table.

The maths functions are not written out one by one. `MATHS_OPS` lists
``(name, ufunc)`` pairs and the mixin receives two declarations per entry:

- ``name()``: returns a new array with the function applied to every leaf
- ``name_()``: the in-place variant, writing into mutable leaves (see
  `NestedArrayMixinFunctional.element_map_`)

Scalar kernels are numpy ufuncs applied to Python floats, so domain errors
produce IEEE results (NaN, +/-Inf) rather than exceptions, and results are
Python floats.
"""

from abc import ABC
from typing import Any, Callable, Tuple

import numpy as np

from .....domain._array import IArray

MATHS_OPS: Tuple[Tuple[str, Callable[[Any], Any]], ...] = (
    ("abs", np.absolute),
    ("acos", np.arccos),
    ("asin", np.arcsin),
    ("atan", np.arctan),
    ("cbrt", np.cbrt),
    ("ceil", np.ceil),
    ("cos", np.cos),
    ("cosh", np.cosh),
    ("exp", np.exp),
    ("floor", np.floor),
    ("log", np.log),
    ("log10", np.log10),
    ("rint", np.rint),
    ("signum", np.sign),
    ("sin", np.sin),
    ("sinh", np.sinh),
    ("sqrt", np.sqrt),
    ("tan", np.tan),
    ("tanh", np.tanh),
    ("to_degrees", np.degrees),
    ("to_radians", np.radians),
)
"""Element-wise maths functions as ``(method name, numpy ufunc)`` pairs."""


class NestedArrayMixinUnary(ABC):
    """
    Abstract mixin defining unary element-wise operations.

    Notes
    -----
    Besides `__neg__`, one pure and one in-place method per `MATHS_OPS`
    entry are attached to this class when the module is imported.
    """

    def __neg__(self: IArray) -> "IArray":
        """Element-wise negation."""
        ...


def _declare(name: str, ufunc: Callable[[Any], Any], in_place: bool) -> Callable:
    def method(self: IArray) -> Any: ...

    method.__name__ = name
    method.__qualname__ = f"{NestedArrayMixinUnary.__name__}.{name}"
    if in_place:
        method.__doc__ = (
            f"In-place variant of `{name[:-1]}`; writes into mutable leaves "
            "and returns the updated array."
        )
    else:
        method.__doc__ = f"Apply ``numpy.{ufunc.__name__}`` to every leaf."
    return method


for _name, _ufunc in MATHS_OPS:
    setattr(NestedArrayMixinUnary, _name, _declare(_name, _ufunc, False))
    setattr(NestedArrayMixinUnary, _name + "_", _declare(_name + "_", _ufunc, True))
