"""
Array-structure exceptions for nestarray.

This module defines the error kinds raised by array operations. Every error is
local and synchronous: it is raised at the point where the problem is
detected and propagated unchanged to the caller. No operation retries or
returns partial results after raising.

The concrete classes also derive from the closest built-in exception
(`ValueError`, `IndexError`) so that generic handlers keep working.

Notes
-----
Some invariants are *assumed* rather than checked (rectangularity during
dimensionality inference, shape inference and flattening). Violating them
produces undefined results, not one of the errors below.
"""

from typing import Optional, Sequence


class NestedArrayError(Exception):
    """
    Common base class for nestarray errors.

    Only used as a catch-all in handlers; the library always raises one of the
    concrete subclasses.
    """


class ShapeError(NestedArrayError, ValueError):
    """
    Raised when operand shapes are incompatible for an operation.

    Typical sources are joins, broadcasts, element-wise arithmetic, dot
    products and per-axis selection.

    Attributes
    ----------
    shape : Optional[tuple[int, ...]]
        Shape of the offending operand, when known.
    target : Optional[tuple[int, ...]]
        Shape the operand was expected to match, when known.
    """

    def __init__(
        self,
        message: str,
        shape: Optional[Sequence[int]] = None,
        target: Optional[Sequence[int]] = None,
    ) -> None:
        """
        Initialize the ShapeError.

        Parameters
        ----------
        message : str
            Human-readable description of the failure.
        shape : Optional[Sequence[int]], optional
            Shape of the offending operand.
        target : Optional[Sequence[int]], optional
            Shape the operand was expected to match.
        """
        super().__init__(message)
        self.shape = None if shape is None else tuple(shape)
        self.target = None if target is None else tuple(target)


class ValidationError(ShapeError):
    """
    Raised when explicit validation finds a non-rectangular structure.

    Sibling sub-arrays at some nesting level do not share a single shape.
    """


class ArrayIndexError(NestedArrayError, IndexError):
    """
    Raised when a coordinate is outside the bounds of an array.

    Negative coordinates are out of range: nested arrays do not wrap around
    the way Python sequences do.

    Attributes
    ----------
    index : int
        The offending coordinate.
    size : Optional[int]
        Length of the axis that was indexed, when known.
    """

    def __init__(self, index: int, size: Optional[int] = None) -> None:
        """
        Initialize the ArrayIndexError.

        Parameters
        ----------
        index : int
            The offending coordinate.
        size : Optional[int], optional
            Length of the indexed axis.
        """
        if size is None:
            message = f"Index {index} is out of range"
        else:
            message = f"Index {index} is out of range for axis of length {size}"
        super().__init__(message)
        self.index = index
        self.size = size


class UpdateError(NestedArrayError, ValueError):
    """
    Raised when an immutable update cannot address a position.

    The usual cause is calling a multi-level set with fewer indices than the
    nesting depth requires.
    """
