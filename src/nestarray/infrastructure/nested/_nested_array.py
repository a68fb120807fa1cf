"""
Concrete immutable nested-array implementation.

This module provides `NestedArray`, the native array type of nestarray. An
N-dimensional array is stored as a tuple whose items are either scalars (for
the innermost dimension), further `NestedArray` values of identical shape,
or foreign arrays (numpy arrays or objects implementing `IArrayCore`) that
act as opaque sub-arrays.

The class itself only implements the container protocol and structural
sharing primitives. Every array operation is declared on one of the mixins
in `nestarray.infrastructure.nested.mixins` and dispatched through the
nested control-path manager on ``self._state``.

Design notes
------------
- Instances are immutable: attribute assignment raises and no method
  modifies ``_items``. Updates return new arrays that share every untouched
  sub-array with the original.
- Negative indices are rejected rather than wrapped.
- ``__array_ufunc__ = None`` makes numpy defer binary operators to the
  reflected methods of this class, which dispatch on the left operand
  (``ndarray + NestedArray`` is computed by the numpy backend).
"""

from __future__ import annotations

from operator import index
from typing import Any, Iterable, Iterator, Tuple

from ...domain._array import IArray
from ...domain._backend import BackendKind, kind_of
from ...domain._errors import ArrayIndexError
from ...domain._implementations import register_implementation

from .mixins.shape import NestedArrayMixinShape
from .mixins.indexing import NestedArrayMixinIndexing
from .mixins.slicing import NestedArrayMixinSlicing
from .mixins.broadcast import NestedArrayMixinBroadcast
from .mixins.functional import NestedArrayMixinFunctional
from .mixins.arithmetic import NestedArrayMixinArithmetic
from .mixins.unary import NestedArrayMixinUnary
from .mixins.comparison import NestedArrayMixinComparison
from .mixins.memory import NestedArrayMixinMemory
from .mixins.construction import NestedArrayMixinConstruction


class NestedArray(
    NestedArrayMixinShape,
    NestedArrayMixinIndexing,
    NestedArrayMixinSlicing,
    NestedArrayMixinBroadcast,
    NestedArrayMixinFunctional,
    NestedArrayMixinArithmetic,
    NestedArrayMixinUnary,
    NestedArrayMixinComparison,
    NestedArrayMixinMemory,
    NestedArrayMixinConstruction,
    IArray,
):
    """
    Immutable N-dimensional array stored as nested tuples.

    Parameters
    ----------
    items : Iterable[Any], optional
        The top-level elements. They are stored as given; use
        `NestedArray.construct_matrix` to build from arbitrary nested input
        with coercion and validation.

    Notes
    -----
    - Shape is inferred from the first element at every level. Sibling
      elements are assumed to share that shape; only `validate_shape`
      checks it.
    - An empty array has shape ``(0,)`` and dimensionality 1.
    - Equality is numeric and structural (see `matrix_equals`). Hashing
      uses the shape and the flattened leaves, so it is consistent with
      equality even when some leaves are numpy sub-arrays.

    Examples
    --------
    >>> m = NestedArray.construct_matrix([[1, 2], [3, 4]])
    >>> m.shape
    (2, 2)
    >>> m.set_2d(0, 1, 9)
    NestedArray([[1, 9], [3, 4]])
    """

    _backend_kind = BackendKind.NESTED
    """Class-level tag read by `kind_of`."""

    __array_ufunc__ = None

    def __init__(self, items: Iterable[Any] = ()) -> None:
        object.__setattr__(self, "_items", tuple(items))

    @classmethod
    def _wrap(cls, items: Tuple[Any, ...]) -> "NestedArray":
        """Build an instance around an existing tuple without copying it."""
        obj = cls.__new__(cls)
        object.__setattr__(obj, "_items", items)
        return obj

    @property
    def _state(self) -> BackendKind:
        """Dispatch state for the nested control-path manager."""
        return self._backend_kind

    def _assoc(self, i: int, value: Any) -> "NestedArray":
        """Return a copy with item `i` replaced, sharing all other items."""
        i = self._check_index(i)
        items = self._items
        return self._wrap(items[:i] + (value,) + items[i + 1 :])

    def _check_index(self, i: Any) -> int:
        i = index(i)
        n = len(self._items)
        if i < 0 or i >= n:
            raise ArrayIndexError(i, n)
        return i

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, key: Any) -> Any:
        """
        Return an item, a range of items, or the value at a coordinate.

        Parameters
        ----------
        key : int | slice | tuple[int, ...]
            An int returns the major slice at that position, a slice returns
            a `NestedArray` sharing the selected items, and a tuple is
            forwarded to `get_nd`.

        Raises
        ------
        ArrayIndexError
            If an index is negative or out of range.
        """
        if isinstance(key, slice):
            return self._wrap(self._items[key])
        if isinstance(key, tuple):
            return self.get_nd(key)
        return self._items[self._check_index(key)]

    def __eq__(self, other: object) -> bool:
        if kind_of(other) is not BackendKind.NESTED:
            return NotImplemented
        return self.matrix_equals(other)

    def __hash__(self) -> int:
        return hash((self.get_shape(), tuple(self.element_seq())))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def __reduce__(self):
        return (type(self), (self._items,))


register_implementation("nested", NestedArray, 1)
