"""
Slicing mixin declaring sub-array extraction and restructuring.

This module declares :class:`NestedArrayMixinSlicing`, covering slices along
any axis, row and column access, contiguous sub-ranges, rotation, gathering
(`order`, `select`) and concatenation (`join`, `join_along`).

Slices of a nested array are its own sub-arrays, so extracting a major slice
never copies. Slices along deeper axes are rebuilt from the major slices.
"""

from abc import ABC
from typing import Any, Sequence, Tuple

from .....domain._array import IArray


class NestedArrayMixinSlicing(ABC):
    """
    Abstract mixin defining slicing and restructuring for nested arrays.

    Notes
    -----
    - Axis 0 is the outermost axis. Operations on deeper axes recurse into
      every major slice, reaching foreign leaves through the capability
      functions.
    - All operations return new arrays; the receiver is never modified.
    """

    def get_major_slice_seq(self: IArray) -> Tuple[Any, ...]:
        """Return the top-level elements as a tuple."""
        ...

    def get_major_slice(self: IArray, i: int) -> Any:
        """
        Return the `i`-th top-level element.

        The element is returned as stored (an alias, never a copy).

        Raises
        ------
        ArrayIndexError
            If `i` is out of range.
        """
        ...

    def get_major_slice_view(self: IArray, i: int) -> Any:
        """Same as `get_major_slice`; nested arrays are their own views."""
        ...

    def get_slice(self: IArray, axis: int, i: int) -> Any:
        """
        Return the slice at position `i` along `axis`.

        Parameters
        ----------
        axis : int
            Axis to slice. Axis 0 returns the major slice.
        i : int
            Position along `axis`.

        Returns
        -------
        Any
            An array with one dimension fewer (a scalar for 1-D input).
        """
        ...

    def get_slice_view(self: IArray, axis: int, i: int) -> Any:
        """Same as `get_slice`."""
        ...

    def get_row(self: IArray, i: int) -> Any:
        """Return row `i` (the axis-0 slice)."""
        ...

    def get_column(self: IArray, j: int) -> Any:
        """Return column `j` (the axis-1 slice) as a new array."""
        ...

    def get_rows(self: IArray) -> Any:
        """Return the rows of a matrix (its major slices)."""
        ...

    def get_columns(self: IArray) -> Any:
        """
        Return the columns of a matrix as a nested array of 1-D arrays.

        Raises
        ------
        ShapeError
            If the array has fewer than two dimensions.
        """
        ...

    def subvector(self: IArray, start: int, length: int) -> "IArray":
        """
        Return the contiguous range ``[start, start + length)`` of a vector.

        Raises
        ------
        ArrayIndexError
            If the range does not lie within the array.
        """
        ...

    def rotate(self: IArray, axis: int, places: int) -> "IArray":
        """
        Circularly shift elements along `axis` by `places`.

        Element ``k`` moves to position ``(k + places) % n``, so
        ``rotate([1, 2, 3, 4, 5], 0, 2)`` is ``[4, 5, 1, 2, 3]``. Negative
        `places` shift the other way.
        """
        ...

    def order(self: IArray, indices: Any, axis: int = 0) -> "IArray":
        """
        Gather elements along `axis` in the order given by `indices`.

        Indices may repeat or omit positions.
        """
        ...

    def join(self: IArray, other: Any) -> "IArray":
        """
        Concatenate `other` along axis 0.

        If `other` has the same dimensionality as ``self`` its major slices
        are appended; if it has exactly one dimension fewer it is appended as
        a single new major slice.

        Raises
        ------
        ShapeError
            If the dimensionalities or the trailing shapes are incompatible.
        """
        ...

    def join_along(self: IArray, other: Any, axis: int) -> "IArray":
        """
        Concatenate `other` along `axis`.

        Both operands must have the same dimensionality and the same length
        on every axis before `axis`.
        """
        ...

    def select(self: IArray, args: Sequence[Any]) -> Any:
        """
        Gather a sub-array with one index selector per axis.

        Parameters
        ----------
        args : Sequence[Any]
            One entry per dimension. A sequence of indices keeps the axis and
            gathers those positions; a single int drops the axis.

        Raises
        ------
        ShapeError
            If ``len(args)`` differs from the dimensionality.
        """
        ...
