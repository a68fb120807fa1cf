"""
Rotation, gathering and concatenation control paths for NestedArray.

These operations rebuild only the top-level container when working on
axis 0 and recurse into every major slice otherwise.
"""

from typing import Any, Sequence

from .... import _capabilities as caps
from ..._coercion import coerce
from ..._nested_builder import nested_control_path_manager

from .....domain._backend import BackendKind, kind_of
from .....domain._errors import ShapeError

from ._base import NestedArrayMixinSlicing as NMS


def _check_axis(self, axis: int) -> int:
    axis = int(axis)
    if axis < 0:
        raise ShapeError(f"Axis {axis} is out of range", shape=self.get_shape())
    return axis


@nested_control_path_manager(NMS, NMS.rotate, BackendKind.NESTED)
def nested_rotate(self, axis: int, places: int):
    axis = _check_axis(self, axis)
    if axis > 0:
        return type(self)(caps.rotate(s, axis - 1, places) for s in self)
    c = len(self)
    sh = (-int(places)) % c if c > 0 else 0
    if sh == 0:
        return self
    items = self._items
    return self._wrap(items[sh:] + items[:sh])


@nested_control_path_manager(NMS, NMS.order, BackendKind.NESTED)
def nested_order(self, indices: Any, axis: int = 0):
    axis = _check_axis(self, axis)
    if axis > 0:
        return type(self)(caps.order(s, indices, axis - 1) for s in self)
    return self._wrap(tuple(self[int(i)] for i in caps.element_seq(indices)))


def _join_error(self, other) -> ShapeError:
    return ShapeError(
        "Joining with array of incompatible size",
        shape=self.get_shape(),
        target=caps.shape(other),
    )


@nested_control_path_manager(NMS, NMS.join, BackendKind.NESTED)
def nested_join(self, other: Any):
    other = coerce(other)
    da, db = self.dimensionality(), caps.dimensionality(other)
    if db == da:
        if len(self) and len(other) and self.get_shape()[1:] != other.get_shape()[1:]:
            raise _join_error(self, other)
        return self._wrap(self._items + other.get_major_slice_seq())
    if db == da - 1:
        if len(self) and tuple(caps.shape(other)) != self.get_shape()[1:]:
            raise _join_error(self, other)
        return self._wrap(self._items + (other,))
    raise _join_error(self, other)


@nested_control_path_manager(NMS, NMS.join_along, BackendKind.NESTED)
def nested_join_along(self, other: Any, axis: int):
    axis = _check_axis(self, axis)
    if axis == 0:
        return self.join(other)
    other = coerce(other)
    if caps.dimensionality(other) != self.dimensionality() or len(other) != len(self):
        raise _join_error(self, other)
    return type(self)(
        coerce(a).join_along(b, axis - 1) for a, b in zip(self, other)
    )


@nested_control_path_manager(NMS, NMS.select, BackendKind.NESTED)
def nested_select(self, args: Sequence[Any]) -> Any:
    args = tuple(args)
    if len(args) != self.dimensionality():
        raise ShapeError(
            "Array dimension does not match length of args",
            shape=self.get_shape(),
        )
    area, rest = args[0], args[1:]
    if kind_of(area) is BackendKind.SCALAR:
        return caps.select(self[int(area)], rest)
    return type(self)(caps.select(self[int(i)], rest) for i in area)
