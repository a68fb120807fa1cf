"""
Shape mixin declaring dimension-information methods for nested arrays.

This module declares :class:`NestedArrayMixinShape`, an abstract mixin that
specifies dimensionality, shape and element-count inference together with
explicit rectangularity validation.

Inference is derived purely from the nesting structure: a nested array of
length ``n`` has shape ``(n,) + shape(first element)``. Inference never checks
that siblings agree; only `validate_shape` does.
"""

from abc import ABC
from typing import Tuple

from .....domain._array import IArray


class NestedArrayMixinShape(ABC):
    """
    Abstract mixin defining dimension information for nested arrays.

    Notes
    -----
    - Methods here are interface declarations; concrete implementations are
      registered through the nested control-path manager.
    - Nested foreign arrays contribute their own shape by delegation.
    - Results on non-rectangular input are undefined (except for
      `validate_shape`, which detects it).
    """

    @property
    def shape(self: IArray) -> Tuple[int, ...]:
        """
        Return the shape of the array as a tuple.

        Returns
        -------
        tuple[int, ...]
            ``(len(self),) + shape(self[0])``, or ``(0,)`` for an empty array.
        """
        return self.get_shape()

    def dimensionality(self: IArray) -> int:
        """
        Return the number of dimensions.

        Returns
        -------
        int
            1 for an empty array or an array of scalars; otherwise
            ``1 + dimensionality(self[0])``.
        """
        ...

    def get_shape(self: IArray) -> Tuple[int, ...]:
        """
        Compute the shape tuple (see :attr:`shape`).

        An empty array has shape ``(0,)``: no further levels are knowable.
        """
        ...

    def dimension_count(self: IArray, axis: int) -> int:
        """
        Return the length of the array along `axis`.

        Parameters
        ----------
        axis : int
            Axis to measure; 0 is the outermost axis.

        Returns
        -------
        int
            ``len(self)`` for axis 0, otherwise the count of the first element
            along ``axis - 1``.
        """
        ...

    def element_count(self: IArray) -> int:
        """
        Return the total number of scalar leaves (product of the shape).

        Returns 0 for an empty array.
        """
        ...

    def is_scalar(self: IArray) -> bool:
        """Always False: a nested array is never a scalar."""
        ...

    def is_vector(self: IArray) -> bool:
        """True when the array is empty or its first element is 0-dimensional."""
        ...

    def validate_shape(self: IArray) -> Tuple[int, ...]:
        """
        Check rectangularity at every nesting level.

        Returns
        -------
        tuple[int, ...]
            The shape of the array.

        Raises
        ------
        ValidationError
            If sibling sub-arrays at any level have differing shapes.
        """
        ...
