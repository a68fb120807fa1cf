"""
Memory mixin declaring conversion and flat-buffer export.

This module declares :class:`NestedArrayMixinMemory`. It covers conversion
to canonical nested form (the hook other backends use to coerce values),
Python lists, and contiguous numpy buffers in row-major order.
"""

from abc import ABC
from typing import Any, Optional

from .....domain._array import IArray


class NestedArrayMixinMemory(ABC):
    """
    Abstract mixin defining conversion and export for nested arrays.

    Notes
    -----
    Flat export assumes the array is rectangular and does not check it. A
    ragged array produces undefined buffer contents; call `validate_shape`
    first when the input is untrusted.
    """

    def get_0d(self: IArray) -> Any:
        """
        Always raises.

        Nested arrays have at least one dimension.

        Raises
        ------
        ShapeError
            Always.
        """
        ...

    def convert_to_nested_vectors(self: IArray) -> "IArray":
        """
        Return the array in canonical form.

        Canonical arrays are returned unchanged. Otherwise every element is
        converted and the top-level container is rebuilt if anything changed.

        Raises
        ------
        ValidationError
            If the converted elements do not all share one shape.
        """
        ...

    def to_list(self: IArray) -> list:
        """Return the array as nested Python lists."""
        ...

    def to_flat_buffer(self: IArray, kind: str = "double") -> Any:
        """
        Copy the leaves into a new contiguous 1-D numpy buffer.

        Parameters
        ----------
        kind : str, optional
            ``"double"`` for a float64 buffer or ``"object"`` for an object
            buffer holding the leaves as-is. Defaults to ``"double"``.

        Returns
        -------
        numpy.ndarray
            Buffer of length `element_count()` in row-major order.

        Raises
        ------
        ValueError
            If `kind` is not a known buffer kind.
        """
        ...

    def to_double_array(self: IArray) -> Any:
        """Flat float64 copy of the leaves (``to_flat_buffer("double")``)."""
        ...

    def to_object_array(self: IArray) -> Any:
        """Flat object copy of the leaves (``to_flat_buffer("object")``)."""
        ...

    def as_double_array(self: IArray) -> Optional[Any]:
        """Always None; nested arrays have no backing buffer to expose."""
        ...

    def as_object_array(self: IArray) -> Optional[Any]:
        """Always None; nested arrays have no backing buffer to expose."""
        ...

    def immutable_matrix(self: IArray) -> "IArray":
        """Return ``self``; nested arrays are already immutable."""
        ...

    def mutable_matrix(self: IArray) -> Any:
        """Return a writeable float64 numpy copy with the same shape."""
        ...

    def coerce_param(self: IArray, param: Any) -> Any:
        """Coerce `param` into canonical nested form."""
        ...
