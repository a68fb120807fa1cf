"""
Vector product and norm control paths for NestedArray.
"""

import math
import warnings
from functools import reduce
from typing import Any

from .... import _capabilities as caps
from ... import _engine as engine
from ..._coercion import as_operand
from ..._nested_builder import nested_control_path_manager

from .....domain._backend import BackendKind
from .....domain._config import zero_norm_policy
from .....domain._errors import ShapeError

from ._base import NestedArrayMixinArithmetic as NMA


@nested_control_path_manager(NMA, NMA.vector_dot, BackendKind.NESTED)
def nested_vector_dot(self, other: Any) -> Any:
    other = as_operand(other)
    odims = caps.dimensionality(other)
    if odims == 0:
        return self.scale(engine.scalar_coerce(other))
    if odims == 1 and self.dimensionality() == 1:
        xs = self._items
        ys = tuple(caps.element_seq(other))
        if len(xs) != len(ys):
            raise ShapeError(
                "Mismatched vector sizes", shape=(len(xs),), target=(len(ys),)
            )
        total = 0.0
        for x, y in zip(xs, ys):
            total += x * y
        return total
    return engine.inner_product(self, other)


@nested_control_path_manager(NMA, NMA.length_squared, BackendKind.NESTED)
def nested_length_squared(self) -> float:
    return float(reduce(lambda acc, x: acc + x * x, self.element_seq(), 0.0))


@nested_control_path_manager(NMA, NMA.length, BackendKind.NESTED)
def nested_length(self) -> float:
    return math.sqrt(self.length_squared())


@nested_control_path_manager(NMA, NMA.normalise, BackendKind.NESTED)
def nested_normalise(self) -> Any:
    norm = self.length()
    if norm == 0.0:
        if zero_norm_policy() == "raise":
            raise ZeroDivisionError("Cannot normalise a vector of length zero")
        warnings.warn(
            "Normalising a vector of length zero; the result is NaN.",
            RuntimeWarning,
            stacklevel=3,
        )
        return engine.mapmatrix(lambda x: math.nan, self)
    return self.scale(1.0 / norm)


@nested_control_path_manager(NMA, NMA.distance, BackendKind.NESTED)
def nested_distance(self, other: Any) -> float:
    return caps.length(caps.matrix_sub(as_operand(other), self))
