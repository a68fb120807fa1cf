"""
numpy.ndarray as a foreign array backend.

numpy arrays may be combined with nested arrays as operands and may appear
as leaves inside them. This module registers ``BackendKind.NUMPY`` control
paths for the generic capability functions:

1. Every capability first gets a fallback path that converts the ndarray to
   a `NestedArray` (through `convert_to_nested_vectors`) and dispatches
   again.
2. Capabilities numpy answers directly are then overridden with native
   implementations (shape queries, slicing, rolling, arithmetic, and the
   in-place element map used by the ``*_`` methods of `NestedArray`).

Notes
-----
- Scalars handed out by these paths are Python scalars (``ndarray.item`` /
  ``ndarray.tolist``), so nested results never hold numpy scalar types.
- `set_nd` copies before writing. Only `element_map_` and
  `element_map_indexed_` write into the array, and only when it is
  writeable.
"""

import math
from typing import Any, Callable, Sequence, Tuple

import numpy as np

from .. import _capabilities as caps
from ..nested._coercion import coerce
from ..nested._delegation import CAPABILITIES

from ...domain._backend import BackendKind, kind_of
from ...domain._errors import ArrayIndexError, ShapeError


def numpy_path(capability: Callable) -> Callable[[Callable], Callable]:
    """Decorator registering a ``BackendKind.NUMPY`` path for `capability`."""
    return caps.capability_path_manager(None, capability, BackendKind.NUMPY)


def _converted_path(capability: Callable) -> Callable:
    def path(arr: np.ndarray, *args: Any, **kwargs: Any) -> Any:
        return capability(caps.convert_to_nested_vectors(arr), *args, **kwargs)

    return path


for _capability in CAPABILITIES:
    numpy_path(_capability)(_converted_path(_capability))


def _unwrap(value: Any) -> Any:
    if np.ndim(value) == 0:
        return value.item() if hasattr(value, "item") else value
    return value


def _as_ndarray(value: Any) -> Any:
    """Return `value` as an ndarray, leaving scalars and ndarrays untouched."""
    kind = kind_of(value)
    if kind is BackendKind.NUMPY or kind is BackendKind.SCALAR:
        return value
    return np.asarray(caps.to_list(value))


def _check_indices(arr: np.ndarray, indices: Sequence[int]) -> Tuple[int, ...]:
    indices = tuple(int(i) for i in indices)
    if len(indices) > arr.ndim:
        raise ArrayIndexError(indices[arr.ndim], None)
    for i, n in zip(indices, arr.shape):
        if i < 0 or i >= n:
            raise ArrayIndexError(i, n)
    return indices


def _require_array(arr: np.ndarray, op: str) -> None:
    if arr.ndim == 0:
        raise ShapeError(f"{op} requires an array, got a 0-d ndarray", shape=())


# ---------------------------------------------------------------------
# Dimension information
# ---------------------------------------------------------------------
@numpy_path(caps.dimensionality)
def numpy_dimensionality(arr: np.ndarray) -> int:
    return arr.ndim


@numpy_path(caps.shape)
def numpy_shape(arr: np.ndarray) -> Tuple[int, ...]:
    return tuple(arr.shape)


@numpy_path(caps.dimension_count)
def numpy_dimension_count(arr: np.ndarray, axis: int) -> int:
    axis = int(axis)
    if axis < 0 or axis >= arr.ndim:
        raise ShapeError(f"Axis {axis} is out of range", shape=tuple(arr.shape))
    return arr.shape[axis]


@numpy_path(caps.element_count)
def numpy_element_count(arr: np.ndarray) -> int:
    return int(arr.size)


@numpy_path(caps.is_scalar)
def numpy_is_scalar(arr: np.ndarray) -> bool:
    return False


@numpy_path(caps.is_vector)
def numpy_is_vector(arr: np.ndarray) -> bool:
    return arr.ndim == 1


@numpy_path(caps.is_mutable)
def numpy_is_mutable(arr: np.ndarray) -> bool:
    return bool(arr.flags.writeable)


# ---------------------------------------------------------------------
# Element and slice access
# ---------------------------------------------------------------------
@numpy_path(caps.element_seq)
def numpy_element_seq(arr: np.ndarray):
    return arr.ravel().tolist()


@numpy_path(caps.get_major_slice_seq)
def numpy_get_major_slice_seq(arr: np.ndarray):
    _require_array(arr, "get_major_slice_seq")
    if arr.ndim == 1:
        return tuple(arr.tolist())
    return tuple(arr)


@numpy_path(caps.get_major_slice)
def numpy_get_major_slice(arr: np.ndarray, i: int) -> Any:
    _require_array(arr, "get_major_slice")
    (i,) = _check_indices(arr, (i,))
    return _unwrap(arr[i])


@numpy_path(caps.get_slice)
def numpy_get_slice(arr: np.ndarray, axis: int, i: int) -> Any:
    axis = int(axis)
    if axis < 0 or axis >= arr.ndim:
        raise ShapeError(f"Axis {axis} is out of range", shape=tuple(arr.shape))
    i = int(i)
    if i < 0 or i >= arr.shape[axis]:
        raise ArrayIndexError(i, arr.shape[axis])
    return _unwrap(np.take(arr, i, axis=axis))


@numpy_path(caps.get_column)
def numpy_get_column(arr: np.ndarray, j: int) -> Any:
    return numpy_get_slice(arr, 1, j)


@numpy_path(caps.get_0d)
def numpy_get_0d(arr: np.ndarray) -> Any:
    if arr.ndim != 0:
        raise ShapeError(
            "Cannot get a 0-d value from an array", shape=tuple(arr.shape)
        )
    return arr.item()


@numpy_path(caps.get_1d)
def numpy_get_1d(arr: np.ndarray, i: int) -> Any:
    return _unwrap(arr[_check_indices(arr, (i,))])


@numpy_path(caps.get_nd)
def numpy_get_nd(arr: np.ndarray, indices: Sequence[int]) -> Any:
    return _unwrap(arr[_check_indices(arr, indices)])


@numpy_path(caps.set_nd)
def numpy_set_nd(arr: np.ndarray, indices: Sequence[int], value: Any) -> np.ndarray:
    indices = _check_indices(arr, indices)
    out = arr.copy()
    out[indices] = _as_ndarray(value)
    return out


# ---------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------
@numpy_path(caps.convert_to_nested_vectors)
def numpy_convert_to_nested_vectors(arr: np.ndarray) -> Any:
    if arr.ndim == 0:
        return arr.item()
    return coerce(arr.tolist())


@numpy_path(caps.to_list)
def numpy_to_list(arr: np.ndarray) -> Any:
    return arr.tolist()


# ---------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------
@numpy_path(caps.broadcast)
def numpy_broadcast(arr: np.ndarray, target_shape: Sequence[int]) -> np.ndarray:
    target = tuple(int(d) for d in target_shape)
    shape = tuple(arr.shape)
    if len(target) < len(shape):
        raise ShapeError(
            "Can't broadcast to a lower dimensional shape", shape=shape, target=target
        )
    if target[len(target) - len(shape) :] != shape:
        raise ShapeError(
            f"Incompatible shapes, cannot broadcast {shape} to {target}",
            shape=shape,
            target=target,
        )
    return np.broadcast_to(arr, target)


@numpy_path(caps.rotate)
def numpy_rotate(arr: np.ndarray, axis: int, places: int) -> np.ndarray:
    _require_array(arr, "rotate")
    return np.roll(arr, int(places), axis=int(axis))


@numpy_path(caps.order)
def numpy_order(arr: np.ndarray, indices: Any, axis: int = 0) -> np.ndarray:
    _require_array(arr, "order")
    picks = [int(i) for i in caps.element_seq(indices)]
    return np.take(arr, picks, axis=int(axis))


# ---------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------
@numpy_path(caps.matrix_add)
def numpy_matrix_add(arr: np.ndarray, other: Any) -> np.ndarray:
    return arr + _as_ndarray(other)


@numpy_path(caps.matrix_sub)
def numpy_matrix_sub(arr: np.ndarray, other: Any) -> np.ndarray:
    return arr - _as_ndarray(other)


@numpy_path(caps.scale)
def numpy_scale(arr: np.ndarray, factor: Any) -> np.ndarray:
    return arr * factor


@numpy_path(caps.pre_scale)
def numpy_pre_scale(arr: np.ndarray, factor: Any) -> np.ndarray:
    return factor * arr


@numpy_path(caps.vector_dot)
def numpy_vector_dot(arr: np.ndarray, other: Any) -> Any:
    other = _as_ndarray(other)
    if arr.ndim == 1 and np.ndim(other) == 1 and arr.shape[0] != np.shape(other)[0]:
        raise ShapeError(
            "Mismatched vector sizes", shape=tuple(arr.shape), target=np.shape(other)
        )
    return _unwrap(np.dot(arr, other))


@numpy_path(caps.length_squared)
def numpy_length_squared(arr: np.ndarray) -> float:
    return float(np.sum(arr * arr))


@numpy_path(caps.length)
def numpy_length(arr: np.ndarray) -> float:
    return math.sqrt(numpy_length_squared(arr))


@numpy_path(caps.matrix_equals)
def numpy_matrix_equals(arr: np.ndarray, other: Any) -> bool:
    if caps.dimensionality(other) != arr.ndim:
        return False
    if tuple(caps.shape(other)) != tuple(arr.shape):
        return False
    return bool(np.array_equal(arr, _as_ndarray(other)))


# ---------------------------------------------------------------------
# In-place mapping
# ---------------------------------------------------------------------
def _flat_operands(arr: np.ndarray, others: Sequence[Any]):
    flats = [arr.ravel().tolist()]
    for o in others:
        flats.append(np.broadcast_to(_as_ndarray(o), arr.shape).ravel().tolist())
    return flats


def _write_back(arr: np.ndarray, values: list) -> np.ndarray:
    if not arr.flags.writeable:
        raise ValueError("Cannot map in place over a read-only ndarray")
    arr[...] = np.asarray(values, dtype=arr.dtype).reshape(arr.shape)
    return arr


@numpy_path(caps.element_map_)
def numpy_element_map_(arr: np.ndarray, f: Callable[..., Any], *others: Any):
    values = [f(*group) for group in zip(*_flat_operands(arr, others))]
    return _write_back(arr, values)


@numpy_path(caps.element_map_indexed_)
def numpy_element_map_indexed_(arr: np.ndarray, f: Callable[..., Any], *others: Any):
    values = [
        f(idx, *group)
        for idx, group in zip(np.ndindex(*arr.shape), zip(*_flat_operands(arr, others)))
    ]
    return _write_back(arr, values)
