"""
Indexing mixin declaring positional access and immutable update.

This module declares :class:`NestedArrayMixinIndexing`. Reads descend one
index per nesting level. Writes never mutate: every ``set_*`` method returns a
new array that shares every untouched sub-array with the original
(structural sharing). Only the containers along the updated path are
rebuilt.
"""

from abc import ABC
from typing import Any, Sequence

from .....domain._array import IArray


class NestedArrayMixinIndexing(ABC):
    """
    Abstract mixin defining indexed access for nested arrays.

    Notes
    -----
    - Indices must be non-negative and in range; violations raise
      `ArrayIndexError` (no negative wrap-around).
    - When a nested leaf is a mutable foreign array, `set_nd` asks that leaf
      for an updated copy through the capability functions; the nested
      structure itself is never mutated.
    """

    def get_1d(self: IArray, i: int) -> Any:
        """
        Return the element at position `i` of a 1-D array.

        0-dimensional foreign elements are unwrapped to their scalar value.
        """
        ...

    def get_2d(self: IArray, i: int, j: int) -> Any:
        """Return the element at row `i`, column `j`."""
        ...

    def get_nd(self: IArray, indices: Sequence[int]) -> Any:
        """
        Return the scalar or sub-array at coordinate `indices`.

        Parameters
        ----------
        indices : Sequence[int]
            One index per level to descend. An empty sequence returns the
            array itself.

        Raises
        ------
        ArrayIndexError
            If any index is out of range.
        """
        ...

    def set_1d(self: IArray, i: int, value: Any) -> "IArray":
        """Return a copy with position `i` replaced by `value`."""
        ...

    def set_2d(self: IArray, i: int, j: int, value: Any) -> "IArray":
        """Return a copy with row `i`, column `j` replaced by `value`."""
        ...

    def set_nd(self: IArray, indices: Sequence[int], value: Any) -> "IArray":
        """
        Return a copy with the position at `indices` replaced by `value`.

        Parameters
        ----------
        indices : Sequence[int]
            Coordinate of the position to replace.
        value : Any
            Replacement scalar or sub-array.

        Returns
        -------
        IArray
            A new array; sub-arrays off the updated path are shared with
            ``self``.

        Raises
        ------
        UpdateError
            If `indices` is empty.
        ArrayIndexError
            If any index is out of range.
        """
        ...

    def is_mutable(self: IArray) -> bool:
        """
        Always False.

        The nested structure is immutable even when some leaves are mutable
        foreign arrays.
        """
        ...
