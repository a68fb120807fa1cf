"""
Array capability interface definitions.

This module defines the domain-level capability contract for array-like
objects using structural typing. Two protocols are provided:

- `IArrayCore`: the narrow surface the nested-array core calls on values it
  does not own. A foreign backend only needs these members to be nested inside
  or combined with nested arrays.
- `IArray`: the full capability contract implemented by `NestedArray`. It
  mirrors the public API of the concrete implementation so that code can type
  against the complete surface when desired.

Notes
-----
The element-wise maths functions (``exp``, ``sqrt``, ...) are generated from a
table on the concrete class and are not repeated here.
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    runtime_checkable,
)

Shape = Tuple[int, ...]


@runtime_checkable
class IArrayCore(Protocol):
    """
    Narrow capability contract for foreign array backends.

    Any object providing these members can appear as a leaf of a nested array
    or as an operand of its binary operations, regardless of its concrete
    class. Capabilities outside this set are obtained by converting the value
    with `convert_to_nested_vectors`.
    """

    def dimensionality(self) -> int: ...
    def get_shape(self) -> Shape: ...
    def element_seq(self) -> Iterable[Any]: ...
    def get_major_slice_seq(self) -> Sequence[Any]: ...
    def get_major_slice(self, i: int) -> Any: ...
    def get_0d(self) -> Any: ...
    def convert_to_nested_vectors(self) -> Any: ...


@runtime_checkable
class IArray(IArrayCore, Protocol):
    """
    Full array capability contract.

    An `IArray` is an N-dimensional array offering shape inference, indexed
    access and immutable update, slicing, broadcasting, element-wise mapping
    and reduction, linear algebra, equality and flat-buffer export.

    Notes
    -----
    - All operations are non-mutating unless their name ends with an
      underscore, in which case they may additionally write into mutable
      leaves (see `element_map_`).
    - Indices are non-negative integers; axis 0 is the outermost axis.
    """

    # ---------------------------------------------------------------------
    # Container protocol
    # ---------------------------------------------------------------------
    def __len__(self) -> int: ...
    def __getitem__(self, key: Any) -> Any: ...
    def __iter__(self) -> Any: ...
    def __eq__(self, other: object) -> bool: ...
    def __hash__(self) -> int: ...
    def __repr__(self) -> str: ...

    @property
    def shape(self) -> Shape:
        """
        Return the shape of the array.

        Returns
        -------
        tuple[int, ...]
            One entry per dimension, outermost first.
        """
        ...

    # ---------------------------------------------------------------------
    # Implementation / construction
    # ---------------------------------------------------------------------
    @classmethod
    def implementation_key(cls) -> str: ...

    @classmethod
    def meta_info(cls) -> Dict[str, Any]: ...

    @classmethod
    def supports_dimensionality(cls, dims: int) -> bool: ...

    @classmethod
    def new_vector(cls, length: int) -> "IArray": ...

    @classmethod
    def new_matrix(cls, rows: int, columns: int) -> "IArray": ...

    @classmethod
    def new_nd(cls, dims: Sequence[int]) -> Any: ...

    @classmethod
    def construct_matrix(cls, data: Any) -> Any: ...

    @classmethod
    def construct_from_generator(
        cls, shape: Sequence[int], generator_fn: Callable[[Shape], Any]
    ) -> Any: ...

    # ---------------------------------------------------------------------
    # Dimension information
    # ---------------------------------------------------------------------
    def dimension_count(self, axis: int) -> int: ...
    def element_count(self) -> int: ...
    def is_scalar(self) -> bool: ...
    def is_vector(self) -> bool: ...
    def validate_shape(self) -> Shape: ...

    # ---------------------------------------------------------------------
    # Indexed access and immutable update
    # ---------------------------------------------------------------------
    def get_1d(self, i: int) -> Any: ...
    def get_2d(self, i: int, j: int) -> Any: ...
    def get_nd(self, indices: Sequence[int]) -> Any: ...
    def set_1d(self, i: int, value: Any) -> "IArray": ...
    def set_2d(self, i: int, j: int, value: Any) -> "IArray": ...
    def set_nd(self, indices: Sequence[int], value: Any) -> "IArray": ...
    def is_mutable(self) -> bool: ...

    # ---------------------------------------------------------------------
    # Slicing and views
    # ---------------------------------------------------------------------
    def get_major_slice_view(self, i: int) -> Any: ...
    def get_slice(self, axis: int, i: int) -> Any: ...
    def get_slice_view(self, axis: int, i: int) -> Any: ...
    def get_row(self, i: int) -> Any: ...
    def get_column(self, j: int) -> Any: ...
    def get_rows(self) -> Any: ...
    def get_columns(self) -> Any: ...
    def subvector(self, start: int, length: int) -> "IArray": ...
    def rotate(self, axis: int, places: int) -> "IArray": ...
    def order(self, indices: Any, axis: int = 0) -> "IArray": ...
    def join(self, other: Any) -> "IArray": ...
    def join_along(self, other: Any, axis: int) -> "IArray": ...
    def select(self, args: Sequence[Sequence[int]]) -> Any: ...

    # ---------------------------------------------------------------------
    # Broadcasting
    # ---------------------------------------------------------------------
    def broadcast(self, target_shape: Sequence[int]) -> "IArray": ...
    def broadcast_like(self, other: Any) -> "IArray": ...
    def broadcast_coerce(self, other: Any) -> Any: ...

    # ---------------------------------------------------------------------
    # Element-wise engine
    # ---------------------------------------------------------------------
    def element_map(self, f: Callable[..., Any], *others: Any) -> Any: ...
    def element_map_(self, f: Callable[..., Any], *others: Any) -> Any: ...
    def element_map_indexed(self, f: Callable[..., Any], *others: Any) -> Any: ...
    def element_map_indexed_(self, f: Callable[..., Any], *others: Any) -> Any: ...
    def element_reduce(self, f: Callable[[Any, Any], Any], *init: Any) -> Any: ...
    def element_sum(self) -> Any: ...

    # ---------------------------------------------------------------------
    # Linear algebra
    # ---------------------------------------------------------------------
    def matrix_add(self, other: Any) -> Any: ...
    def matrix_sub(self, other: Any) -> Any: ...
    def element_multiply(self, other: Any) -> Any: ...
    def matrix_multiply(self, other: Any) -> Any: ...
    def scale(self, factor: Any) -> Any: ...
    def pre_scale(self, factor: Any) -> Any: ...
    def square(self) -> Any: ...
    def vector_dot(self, other: Any) -> Any: ...
    def length(self) -> float: ...
    def length_squared(self) -> float: ...
    def normalise(self) -> Any: ...
    def distance(self, other: Any) -> float: ...
    def vector_transform(self, other: Any) -> Any: ...
    def vector_transform_(self, other: Any) -> Any: ...
    def swap_rows(self, i: int, j: int) -> "IArray": ...
    def multiply_row(self, i: int, factor: Any) -> "IArray": ...
    def add_row(self, i: int, j: int, factor: Any) -> "IArray": ...

    def __add__(self, other: Any) -> Any: ...
    def __radd__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __rsub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __rmul__(self, other: Any) -> Any: ...
    def __matmul__(self, other: Any) -> Any: ...
    def __rmatmul__(self, other: Any) -> Any: ...
    def __neg__(self) -> Any: ...

    # ---------------------------------------------------------------------
    # Equality
    # ---------------------------------------------------------------------
    def matrix_equals(self, other: Any) -> bool: ...

    # ---------------------------------------------------------------------
    # Conversion and flat export
    # ---------------------------------------------------------------------
    def to_flat_buffer(self, kind: str = "double") -> Any: ...
    def to_double_array(self) -> Any: ...
    def to_object_array(self) -> Any: ...
    def as_double_array(self) -> Optional[Any]: ...
    def as_object_array(self) -> Optional[Any]: ...
    def to_list(self) -> Any: ...
    def immutable_matrix(self) -> "IArray": ...
    def mutable_matrix(self) -> Any: ...
    def coerce_param(self, param: Any) -> Any: ...
