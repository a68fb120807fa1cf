"""
Arithmetic mixin defining element-wise and linear-algebra operations.

This module declares :class:`NestedArrayMixinArithmetic`, which specifies the
public API of nested-array arithmetic: broadcasting addition and subtraction,
element-wise and scalar multiplication, vector products and norms, matrix
multiplication and elementary row operations, plus the Python operators
built on top of them.

The mixin itself does not compute anything. Implementations are registered
through the nested control-path manager.
"""

from abc import ABC
from typing import Any, Union

from .....domain._array import IArray

Number = Union[int, float]


class NestedArrayMixinArithmetic(ABC):
    """
    Abstract mixin defining arithmetic for nested arrays.

    Notes
    -----
    - Operands may be nested arrays, plain sequences, numpy arrays, foreign
      arrays or scalars. Plain sequences are coerced first.
    - Binary element-wise operations broadcast both operands to their common
      shape (trailing-dimension matching).
    - Results are always new arrays.
    """

    # ----------------------------
    # Element-wise
    # ----------------------------
    def matrix_add(self: IArray, other: Any) -> Any:
        """
        Element-wise sum with broadcasting.

        Raises
        ------
        ShapeError
            If the shapes have no common broadcast shape.
        """
        ...

    def matrix_sub(self: IArray, other: Any) -> Any:
        """Element-wise difference ``self - other`` with broadcasting."""
        ...

    def element_multiply(self: IArray, other: Any) -> Any:
        """Element-wise product with broadcasting; scalars scale."""
        ...

    def scale(self: IArray, factor: Any) -> Any:
        """Multiply every leaf by `factor` on the right (``x * factor``)."""
        ...

    def pre_scale(self: IArray, factor: Any) -> Any:
        """Multiply every leaf by `factor` on the left (``factor * x``)."""
        ...

    def square(self: IArray) -> Any:
        """Element-wise square."""
        ...

    # ----------------------------
    # Vectors
    # ----------------------------
    def vector_dot(self: IArray, other: Any) -> Any:
        """
        Dot product.

        Two 1-D operands are multiplied and summed directly in double
        precision, so the result is a float even for integer inputs (and
        so are the entries of a matrix product built from it). A 0-D
        `other` scales the array. Any other combination falls back to the
        generic inner product, which keeps the leaf types.

        Raises
        ------
        ShapeError
            If two 1-D operands differ in length.
        """
        ...

    def length_squared(self: IArray) -> float:
        """Sum of the squares of all leaves."""
        ...

    def length(self: IArray) -> float:
        """Euclidean norm."""
        ...

    def normalise(self: IArray) -> Any:
        """
        Divide the vector by its length.

        Notes
        -----
        A zero-length vector is handled according to
        `nestarray.zero_norm_policy`: ``"nan"`` warns with `RuntimeWarning`
        and returns NaN components, ``"raise"`` raises `ZeroDivisionError`.
        """
        ...

    def distance(self: IArray, other: Any) -> float:
        """Euclidean distance, ``length(other - self)``."""
        ...

    # ----------------------------
    # Matrices
    # ----------------------------
    def matrix_multiply(self: IArray, other: Any) -> Any:
        """
        Matrix product.

        Dispatches on the dimensionalities: a scalar `other` scales, then
        vector x matrix, matrix x vector and matrix x matrix are computed
        with dot products. Other combinations use the generic inner product
        (last axis of ``self`` against first axis of `other`).
        """
        ...

    def vector_transform(self: IArray, other: Any) -> Any:
        """Apply this matrix to the vector `other`."""
        ...

    def vector_transform_(self: IArray, other: Any) -> Any:
        """
        Apply this matrix to `other`, writing into `other` when it is mutable.

        Returns `other` after the write, or the transformed vector when
        `other` is immutable.
        """
        ...

    def swap_rows(self: IArray, i: int, j: int) -> "IArray":
        """Return a copy with rows `i` and `j` exchanged."""
        ...

    def multiply_row(self: IArray, i: int, factor: Any) -> "IArray":
        """Return a copy with row `i` scaled by `factor`."""
        ...

    def add_row(self: IArray, i: int, j: int, factor: Any) -> "IArray":
        """Return a copy with ``factor * row_j`` added to row `i`."""
        ...

    # ----------------------------
    # Operators
    # ----------------------------
    def __add__(self: IArray, other: Any) -> Any:
        """``self + other``; see `matrix_add`."""
        ...

    def __radd__(self: IArray, other: Any) -> Any:
        """``other + self`` for scalars, sequences and numpy arrays."""
        ...

    def __sub__(self: IArray, other: Any) -> Any:
        """``self - other``; see `matrix_sub`."""
        ...

    def __rsub__(self: IArray, other: Any) -> Any:
        """``other - self``."""
        ...

    def __mul__(self: IArray, other: Any) -> Any:
        """Element-wise ``self * other``; see `element_multiply`."""
        ...

    def __rmul__(self: IArray, other: Any) -> Any:
        """Element-wise ``other * self``."""
        ...

    def __matmul__(self: IArray, other: Any) -> Any:
        """``self @ other``; see `matrix_multiply`."""
        ...

    def __rmatmul__(self: IArray, other: Any) -> Any:
        """``other @ self``."""
        ...
