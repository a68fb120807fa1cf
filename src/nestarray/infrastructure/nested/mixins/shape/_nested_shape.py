"""
Dimension-information control paths for NestedArray.

Registers the ``BackendKind.NESTED`` implementations of the methods declared
by `NestedArrayMixinShape`. Every function recurses into the first element
only; nested foreign arrays answer through the capability functions.
"""

from typing import Tuple

from .... import _capabilities as caps
from ..._nested_builder import nested_control_path_manager

from .....domain._backend import BackendKind
from .....domain._errors import ShapeError, ValidationError

from ._base import NestedArrayMixinShape as NMS


@nested_control_path_manager(NMS, NMS.dimensionality, BackendKind.NESTED)
def nested_dimensionality(self) -> int:
    if len(self) == 0:
        return 1
    return 1 + caps.dimensionality(self[0])


@nested_control_path_manager(NMS, NMS.get_shape, BackendKind.NESTED)
def nested_shape(self) -> Tuple[int, ...]:
    n = len(self)
    if n == 0:
        return (0,)
    return (n,) + tuple(caps.shape(self[0]))


@nested_control_path_manager(NMS, NMS.dimension_count, BackendKind.NESTED)
def nested_dimension_count(self, axis: int) -> int:
    axis = int(axis)
    if axis == 0:
        return len(self)
    if axis < 0 or len(self) == 0:
        raise ShapeError(f"Axis {axis} is out of range", shape=self.get_shape())
    return caps.dimension_count(self[0], axis - 1)


@nested_control_path_manager(NMS, NMS.element_count, BackendKind.NESTED)
def nested_element_count(self) -> int:
    n = len(self)
    if n == 0:
        return 0
    return n * caps.element_count(self[0])


@nested_control_path_manager(NMS, NMS.is_scalar, BackendKind.NESTED)
def nested_is_scalar(self) -> bool:
    return False


@nested_control_path_manager(NMS, NMS.is_vector, BackendKind.NESTED)
def nested_is_vector(self) -> bool:
    return len(self) == 0 or caps.dimensionality(self[0]) == 0


def _same_shapes(value) -> bool:
    if caps.dimensionality(value) == 0:
        return True
    slices = caps.get_major_slice_seq(value)
    if len(slices) == 0:
        return True
    first = tuple(caps.shape(slices[0]))
    return all(tuple(caps.shape(s)) == first for s in slices) and all(
        _same_shapes(s) for s in slices
    )


@nested_control_path_manager(NMS, NMS.validate_shape, BackendKind.NESTED)
def nested_validate_shape(self) -> Tuple[int, ...]:
    if not _same_shapes(self):
        raise ValidationError(
            "Inconsistent shape for nested array.", shape=self.get_shape()
        )
    return self.get_shape()
