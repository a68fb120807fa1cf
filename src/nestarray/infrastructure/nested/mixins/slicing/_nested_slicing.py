"""
Slice, row/column and sub-range control paths for NestedArray.
"""

from typing import Any, Tuple

from .... import _capabilities as caps
from ..._nested_builder import nested_control_path_manager

from .....domain._backend import BackendKind
from .....domain._errors import ArrayIndexError, ShapeError

from ._base import NestedArrayMixinSlicing as NMS


@nested_control_path_manager(NMS, NMS.get_major_slice_seq, BackendKind.NESTED)
def nested_get_major_slice_seq(self) -> Tuple[Any, ...]:
    return self._items


@nested_control_path_manager(NMS, NMS.get_major_slice, BackendKind.NESTED)
def nested_get_major_slice(self, i: int) -> Any:
    return self[i]


@nested_control_path_manager(NMS, NMS.get_major_slice_view, BackendKind.NESTED)
def nested_get_major_slice_view(self, i: int) -> Any:
    return self[i]


@nested_control_path_manager(NMS, NMS.get_slice, BackendKind.NESTED)
def nested_get_slice(self, axis: int, i: int) -> Any:
    axis = int(axis)
    if axis == 0:
        return self[i]
    if axis < 0:
        raise ShapeError(f"Axis {axis} is out of range", shape=self.get_shape())
    return type(self)(caps.get_slice(s, axis - 1, i) for s in self)


@nested_control_path_manager(NMS, NMS.get_slice_view, BackendKind.NESTED)
def nested_get_slice_view(self, axis: int, i: int) -> Any:
    return self.get_slice(axis, i)


@nested_control_path_manager(NMS, NMS.get_row, BackendKind.NESTED)
def nested_get_row(self, i: int) -> Any:
    return self[i]


@nested_control_path_manager(NMS, NMS.get_column, BackendKind.NESTED)
def nested_get_column(self, j: int) -> Any:
    return self.get_slice(1, j)


@nested_control_path_manager(NMS, NMS.get_rows, BackendKind.NESTED)
def nested_get_rows(self) -> Any:
    return self


@nested_control_path_manager(NMS, NMS.get_columns, BackendKind.NESTED)
def nested_get_columns(self) -> Any:
    if self.dimensionality() < 2:
        raise ShapeError(
            "get_columns requires an array with at least 2 dimensions",
            shape=self.get_shape(),
        )
    return type(self)(self.get_column(j) for j in range(self.dimension_count(1)))


@nested_control_path_manager(NMS, NMS.subvector, BackendKind.NESTED)
def nested_subvector(self, start: int, length: int):
    start, length = int(start), int(length)
    n = len(self)
    if start < 0 or start > n:
        raise ArrayIndexError(start, n)
    if length < 0 or start + length > n:
        raise ArrayIndexError(start + length, n)
    return self._wrap(self._items[start : start + length])
