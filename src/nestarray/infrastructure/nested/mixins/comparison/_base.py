"""
Comparison mixin declaring numeric structural equality.
"""

from abc import ABC
from typing import Any

from .....domain._array import IArray


class NestedArrayMixinComparison(ABC):
    """
    Abstract mixin defining equality between arrays of any backend.

    Notes
    -----
    Leaves are compared with ``==``, so ``1`` equals ``1.0`` and a nested
    array can equal a numpy array holding the same values.
    """

    def matrix_equals(self: IArray, other: Any) -> bool:
        """
        Return True if `other` has the same shape and equal leaves.

        Parameters
        ----------
        other : Any
            Array of any backend, plain sequence or scalar.

        Returns
        -------
        bool
            False when `other` is 0-dimensional or differs in length along
            axis 0. 1-D arrays require a 1-D `other` with pairwise equal
            leaves. Higher-dimensional arrays compare major slices pairwise
            and stop at the first mismatch.
        """
        ...
