"""
nestarray: immutable N-dimensional arrays built from nested tuples.

Quick start
-----------
>>> import nestarray as na
>>> m = na.array([[1, 2], [3, 4]])
>>> m @ m
NestedArray([[7.0, 10.0], [15.0, 22.0]])
>>> na.shape(m), na.dimensionality([1, 2, 3])
((2, 2), 1)

The generic capability functions re-exported here (`shape`,
`dimensionality`, `matrix_add`, ...) accept scalars, nested arrays, plain
sequences, numpy arrays and foreign arrays implementing `IArrayCore`.
"""

from .domain import (
    ArrayIndexError,
    BackendKind,
    IArray,
    IArrayCore,
    ImplementationRecord,
    NestedArrayError,
    ShapeError,
    UpdateError,
    ValidationError,
    ZERO_NORM_POLICIES,
    get_implementation,
    implementations_supporting,
    kind_of,
    list_implementations,
    register_implementation,
    set_zero_norm_policy,
    zero_norm_policy,
)
from .infrastructure import NestedArray, capabilities
from .infrastructure._capabilities import (
    dimensionality,
    shape,
    element_count,
    element_seq,
    get_nd,
    set_nd,
    matrix_add,
    matrix_sub,
    matrix_equals,
    to_list,
)
from .infrastructure.nested import (
    broadcast_compatible,
    coerce,
    common_shape,
    construct_from_generator,
    inner_product,
    is_canonical,
    mapmatrix,
)
from .infrastructure.random import (
    randoms,
    sample_binomial,
    sample_normal,
    sample_rand_int,
    sample_uniform,
)

array = NestedArray.construct_matrix
"""Build a validated `NestedArray` from nested input (alias of `construct_matrix`)."""

zeros = NestedArray.new_nd
"""Build a zero-filled `NestedArray` of the given shape."""

__version__ = "0.1.0"

__all__ = [
    "NestedArray",
    "array",
    "zeros",
    "capabilities",
    "dimensionality",
    "shape",
    "element_count",
    "element_seq",
    "get_nd",
    "set_nd",
    "matrix_add",
    "matrix_sub",
    "matrix_equals",
    "to_list",
    "coerce",
    "is_canonical",
    "mapmatrix",
    "common_shape",
    "broadcast_compatible",
    "inner_product",
    "construct_from_generator",
    "randoms",
    "sample_uniform",
    "sample_normal",
    "sample_rand_int",
    "sample_binomial",
    "IArray",
    "IArrayCore",
    "BackendKind",
    "kind_of",
    "NestedArrayError",
    "ShapeError",
    "ValidationError",
    "ArrayIndexError",
    "UpdateError",
    "ZERO_NORM_POLICIES",
    "zero_norm_policy",
    "set_zero_norm_policy",
    "ImplementationRecord",
    "register_implementation",
    "get_implementation",
    "list_implementations",
    "implementations_supporting",
]
