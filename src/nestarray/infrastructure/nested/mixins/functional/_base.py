"""
Functional mixin declaring the element-wise map and reduce API.

This module declares :class:`NestedArrayMixinFunctional`. Every method is a
thin entry point into the recursive engine in
``nestarray.infrastructure.nested._engine``; arithmetic and the maths table
are built on top of these methods.
"""

from abc import ABC
from typing import Any, Callable, Iterable

from .....domain._array import IArray


class NestedArrayMixinFunctional(ABC):
    """
    Abstract mixin defining element-wise mapping and reduction.

    Notes
    -----
    - Multi-operand maps broadcast all operands to their common shape first.
    - Methods ending with an underscore are the "in place" variants. A nested
      array cannot mutate itself, so these mutate reachable mutable leaves
      (e.g. writeable numpy arrays) and rebuild the nested structure where
      other leaves change. Always use the returned value.
    """

    def element_seq(self: IArray) -> Iterable[Any]:
        """
        Return the scalar leaves in row-major order.

        A 1-D array returns its own item tuple. Higher-dimensional arrays
        return a tuple concatenating the element sequences of their major
        slices, so the result can be iterated any number of times.
        """
        ...

    def element_map(self: IArray, f: Callable[..., Any], *others: Any) -> Any:
        """
        Map `f` over every leaf, pairing leaves of `others` positionally.

        Parameters
        ----------
        f : Callable[..., Any]
            Function of ``1 + len(others)`` scalars.
        *others : Any
            Additional operands, broadcast to a common shape with ``self``.

        Returns
        -------
        Any
            A new nested array.

        Raises
        ------
        ShapeError
            If the operands cannot be broadcast to a common shape.
        """
        ...

    def element_map_(self: IArray, f: Callable[..., Any], *others: Any) -> Any:
        """
        In-place variant of `element_map`.

        `others` are broadcast to the shape of ``self``.
        """
        ...

    def element_map_indexed(
        self: IArray, f: Callable[..., Any], *others: Any
    ) -> Any:
        """
        Map ``f(index, x, *ys)`` over every leaf.

        `index` is the coordinate of the leaf as a tuple of ints.
        """
        ...

    def element_map_indexed_(
        self: IArray, f: Callable[..., Any], *others: Any
    ) -> Any:
        """In-place variant of `element_map_indexed`."""
        ...

    def element_reduce(self: IArray, f: Callable[[Any, Any], Any], *init: Any) -> Any:
        """
        Left-fold `f` over the element sequence.

        Parameters
        ----------
        f : Callable[[Any, Any], Any]
            Binary reducing function.
        *init : Any
            Optional initial value (at most one).

        Raises
        ------
        TypeError
            If the array is empty and no initial value is given.
        """
        ...

    def element_sum(self: IArray) -> Any:
        """Return the sum of all leaves (0 for an empty array)."""
        ...
