"""
Construction mixin providing the class-level factory API.

Unlike the other mixins, these are concrete classmethods: construction has
no receiver state to dispatch on. All of them build canonical nested arrays
through ``nestarray.infrastructure.nested._coercion``.
"""

from abc import ABC
from typing import Any, Callable, Dict, Sequence, Tuple

from ... import _coercion

from .....domain._backend import BackendKind, kind_of


class NestedArrayMixinConstruction(ABC):
    """
    Mixin defining implementation metadata and constructors.

    Notes
    -----
    Fresh arrays are filled with ``0.0``. Replicated rows are shared rather
    than copied, which is safe because nested arrays are immutable.
    """

    @classmethod
    def implementation_key(cls) -> str:
        """Return the registry key of this implementation, ``"nested"``."""
        return "nested"

    @classmethod
    def meta_info(cls) -> Dict[str, Any]:
        """Return descriptive metadata about this implementation."""
        return {
            "doc": (
                "Immutable N-dimensional arrays stored as nested tuples, "
                "with structural sharing on update."
            ),
            "min_dimensionality": 1,
        }

    @classmethod
    def supports_dimensionality(cls, dims: int) -> bool:
        """Return True for every dimensionality of at least 1."""
        return int(dims) >= 1

    @classmethod
    def new_vector(cls, length: int):
        """Return a zero vector of `length` elements."""
        return _coercion.new_nd((length,))

    @classmethod
    def new_matrix(cls, rows: int, columns: int):
        """Return a ``rows x columns`` zero matrix."""
        return _coercion.new_nd((rows, columns))

    @classmethod
    def new_nd(cls, dims: Sequence[int]) -> Any:
        """
        Return a zero array of shape `dims`.

        An empty `dims` returns the scalar ``0.0``.
        """
        return _coercion.new_nd(dims)

    @classmethod
    def construct_matrix(cls, data: Any) -> Any:
        """
        Build a canonical array from `data`.

        Parameters
        ----------
        data : Any
            Scalar, nested Python sequences, numpy array, or array of any
            backend.

        Returns
        -------
        Any
            A canonical nested array, or the scalar for 0-dimensional data.

        Raises
        ------
        ValidationError
            If `data` is not rectangular.
        """
        result = _coercion.coerce(data)
        if kind_of(result) is BackendKind.NESTED:
            result.validate_shape()
        return result

    @classmethod
    def construct_from_generator(
        cls,
        shape: Sequence[int],
        generator_fn: Callable[[Tuple[int, ...]], Any],
    ) -> Any:
        """
        Build an array of `shape` whose leaves are ``generator_fn(coords)``.

        Leaves are produced in row-major order.
        """
        return _coercion.construct_from_generator(shape, generator_fn)
