"""
Generic capability entry points.

Every function in this module accepts *any* value as its first argument: a
scalar, a `NestedArray`, a plain Python sequence, a numpy ndarray, or a
foreign object implementing `IArrayCore`. Each function is a canonical
control path whose own body implements the scalar (0-dimensional) behaviour;
backend-specific implementations are registered against
`capability_path_manager` for the other `BackendKind` values:

- ``BackendKind.NESTED`` / ``SEQUENCE`` / ``FOREIGN`` paths are registered by
  the nested-array package (sequences are coerced first, foreign objects are
  asked for the capability directly when they provide it).
- ``BackendKind.NUMPY`` paths are registered by the numpy adapter.

The nested-array core only ever talks to values it does not own through the
functions below, never through their concrete representation.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Sequence, Tuple

from ..domain._backend import kind_of
from ..domain._errors import ArrayIndexError, ShapeError
from ..domain._implementations import get_implementation
from ..domain.utils._control_path import create_path_builder

capability_path_manager = create_path_builder(kind_of)
"""Control-path manager dispatching capability functions on `kind_of(value)`."""

_canonical = capability_path_manager.canonical


def _native():
    return get_implementation("nested")


def _scalar_error(op: str, value: Any) -> ShapeError:
    return ShapeError(f"{op} requires an array, got scalar {value!r}", shape=())


# ---------------------------------------------------------------------
# Dimension information
# ---------------------------------------------------------------------
@_canonical
def dimensionality(value: Any) -> int:
    """Number of dimensions of `value` (0 for scalars)."""
    return 0


@_canonical
def shape(value: Any) -> Tuple[int, ...]:
    """Shape tuple of `value` (empty for scalars)."""
    return ()


@_canonical
def dimension_count(value: Any, axis: int) -> int:
    """Length of `value` along `axis`."""
    raise _scalar_error("dimension_count", value)


@_canonical
def element_count(value: Any) -> int:
    """Total number of scalar leaves."""
    return 1


@_canonical
def is_scalar(value: Any) -> bool:
    return True


@_canonical
def is_vector(value: Any) -> bool:
    return False


@_canonical
def is_mutable(value: Any) -> bool:
    return False


# ---------------------------------------------------------------------
# Element and slice access
# ---------------------------------------------------------------------
@_canonical
def element_seq(value: Any):
    """Row-major iterable over the scalar leaves of `value`."""
    return (value,)


@_canonical
def get_major_slice_seq(value: Any) -> Sequence[Any]:
    raise _scalar_error("get_major_slice_seq", value)


@_canonical
def get_major_slice(value: Any, i: int) -> Any:
    raise _scalar_error("get_major_slice", value)


@_canonical
def get_slice(value: Any, axis: int, i: int) -> Any:
    raise _scalar_error("get_slice", value)


@_canonical
def get_column(value: Any, j: int) -> Any:
    raise _scalar_error("get_column", value)


@_canonical
def get_0d(value: Any) -> Any:
    """Scalar value held by a 0-dimensional array (the value itself for scalars)."""
    return value


@_canonical
def get_1d(value: Any, i: int) -> Any:
    raise ArrayIndexError(i, None)


@_canonical
def get_nd(value: Any, indices: Sequence[int]) -> Any:
    if len(indices) == 0:
        return value
    raise ArrayIndexError(indices[0], None)


@_canonical
def set_nd(value: Any, indices: Sequence[int], new_value: Any) -> Any:
    """Return `value` with position `indices` replaced (never mutates)."""
    if len(indices) == 0:
        return new_value
    raise ArrayIndexError(indices[0], None)


# ---------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------
@_canonical
def convert_to_nested_vectors(value: Any) -> Any:
    return value


@_canonical
def to_list(value: Any) -> Any:
    """Nested Python lists for arrays, the value itself for scalars."""
    return value


# ---------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------
@_canonical
def broadcast(value: Any, target_shape: Sequence[int]) -> Any:
    """Replicate a scalar into an array of `target_shape`."""
    result = value
    NestedArray = _native()
    for dup in reversed(tuple(target_shape)):
        result = NestedArray((result,) * int(dup))
    return result


@_canonical
def rotate(value: Any, axis: int, places: int) -> Any:
    raise _scalar_error("rotate", value)


@_canonical
def order(value: Any, indices: Any, axis: int = 0) -> Any:
    raise _scalar_error("order", value)


@_canonical
def select(value: Any, args: Sequence[Sequence[int]]) -> Any:
    if len(args) == 0:
        return value
    raise ShapeError("Array dimension does not match length of args", shape=())


# ---------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------
@_canonical
def matrix_add(value: Any, other: Any) -> Any:
    if dimensionality(other) == 0:
        return value + get_0d(other)
    return matrix_add(broadcast(value, shape(other)), other)


@_canonical
def matrix_sub(value: Any, other: Any) -> Any:
    if dimensionality(other) == 0:
        return value - get_0d(other)
    return matrix_sub(broadcast(value, shape(other)), other)


@_canonical
def scale(value: Any, factor: Any) -> Any:
    return value * factor


@_canonical
def pre_scale(value: Any, factor: Any) -> Any:
    return factor * value


@_canonical
def vector_dot(value: Any, other: Any) -> Any:
    if dimensionality(other) == 0:
        return value * get_0d(other)
    return pre_scale(other, value)


@_canonical
def length_squared(value: Any) -> float:
    x = float(value)
    return x * x


@_canonical
def length(value: Any) -> float:
    return math.fabs(float(value))


@_canonical
def matrix_equals(value: Any, other: Any) -> bool:
    return dimensionality(other) == 0 and value == get_0d(other)


# ---------------------------------------------------------------------
# In-place mapping over mutable leaves
# ---------------------------------------------------------------------
@_canonical
def element_map_(value: Any, f: Callable[..., Any], *others: Any) -> Any:
    """
    Apply `f` element-wise, mutating `value` where it is a mutable array.

    Scalars cannot be mutated, so the canonical path simply returns the mapped
    value; callers must use the return value.
    """
    return f(value, *(get_0d(o) for o in others))


@_canonical
def element_map_indexed_(value: Any, f: Callable[..., Any], *others: Any) -> Any:
    return f((), value, *(get_0d(o) for o in others))
