"""
Capability control paths for nested arrays, sequences and foreign arrays.

Registers, for every generic capability function in
``nestarray.infrastructure._capabilities``:

- ``BackendKind.NESTED``: call the same-named `NestedArray` method.
- ``BackendKind.SEQUENCE``: coerce the sequence to a `NestedArray`, then
  dispatch again.
- ``BackendKind.FOREIGN``: call the same-named method of the foreign object
  when it provides one, otherwise coerce it (through its
  ``convert_to_nested_vectors`` hook) and dispatch again.

The capability ``shape`` maps onto the ``get_shape`` method; every other
capability has the same name as its method.
"""

from typing import Any, Callable

from .. import _capabilities as caps
from ...domain._backend import BackendKind
from ._coercion import coerce

CAPABILITIES = (
    caps.dimensionality,
    caps.shape,
    caps.dimension_count,
    caps.element_count,
    caps.is_scalar,
    caps.is_vector,
    caps.is_mutable,
    caps.element_seq,
    caps.get_major_slice_seq,
    caps.get_major_slice,
    caps.get_slice,
    caps.get_column,
    caps.get_0d,
    caps.get_1d,
    caps.get_nd,
    caps.set_nd,
    caps.convert_to_nested_vectors,
    caps.to_list,
    caps.broadcast,
    caps.rotate,
    caps.order,
    caps.select,
    caps.matrix_add,
    caps.matrix_sub,
    caps.scale,
    caps.pre_scale,
    caps.vector_dot,
    caps.length_squared,
    caps.length,
    caps.matrix_equals,
    caps.element_map_,
    caps.element_map_indexed_,
)
"""Capability functions that nested arrays answer with a method."""

METHOD_NAMES = {"shape": "get_shape"}
"""Capabilities whose method name differs from the function name."""


def method_name(capability: Callable) -> str:
    """Return the array method implementing `capability`."""
    return METHOD_NAMES.get(capability.__name__, capability.__name__)


def _nested_path(name: str) -> Callable:
    def path(value: Any, *args: Any, **kwargs: Any) -> Any:
        return getattr(value, name)(*args, **kwargs)

    return path


def _sequence_path(capability: Callable) -> Callable:
    def path(value: Any, *args: Any, **kwargs: Any) -> Any:
        return capability(coerce(value), *args, **kwargs)

    return path


def _foreign_path(capability: Callable, name: str) -> Callable:
    def path(value: Any, *args: Any, **kwargs: Any) -> Any:
        method = getattr(value, name, None)
        if callable(method):
            return method(*args, **kwargs)
        return capability(coerce(value), *args, **kwargs)

    return path


for _capability in CAPABILITIES:
    _name = method_name(_capability)
    caps.capability_path_manager(None, _capability, BackendKind.NESTED)(
        _nested_path(_name)
    )
    caps.capability_path_manager(None, _capability, BackendKind.SEQUENCE)(
        _sequence_path(_capability)
    )
    caps.capability_path_manager(None, _capability, BackendKind.FOREIGN)(
        _foreign_path(_capability, _name)
    )
