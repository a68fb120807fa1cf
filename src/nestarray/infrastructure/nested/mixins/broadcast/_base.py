"""
Broadcast mixin declaring shape expansion for nested arrays.

Broadcasting here follows trailing-dimension matching: an array of shape
``s`` can be broadcast to ``t`` when ``t`` ends with ``s``. Expansion adds
the missing leading dimensions by replicating the whole array, innermost
added dimension first. Size-1 dimensions are not stretched.
"""

from abc import ABC
from typing import Any, Sequence

from .....domain._array import IArray


class NestedArrayMixinBroadcast(ABC):
    """
    Abstract mixin defining broadcasting for nested arrays.

    Notes
    -----
    Replication shares the receiver: every copy along an added dimension is
    the same immutable object.
    """

    def broadcast(self: IArray, target_shape: Sequence[int]) -> "IArray":
        """
        Expand the array to `target_shape`.

        Parameters
        ----------
        target_shape : Sequence[int]
            Desired shape. It must have at least as many dimensions as the
            array, and its trailing dimensions must equal the array's shape.

        Returns
        -------
        IArray
            The expanded array, or ``self`` when the shapes already match.

        Raises
        ------
        ShapeError
            If `target_shape` has fewer dimensions or its trailing dimensions
            differ from the array's shape.
        """
        ...

    def broadcast_like(self: IArray, other: Any) -> "IArray":
        """Broadcast the array to the shape of `other`."""
        ...

    def broadcast_coerce(self: IArray, other: Any) -> Any:
        """
        Coerce `other` to canonical form and broadcast it to this array's shape.

        Used to bring the operand of a binary operation to the receiver's
        shape.
        """
        ...
