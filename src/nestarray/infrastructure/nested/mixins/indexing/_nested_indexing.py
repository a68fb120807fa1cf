"""
Indexed access and structural-sharing update control paths for NestedArray.
"""

from typing import Any, Sequence

from .... import _capabilities as caps
from ..._engine import scalar_coerce
from ..._nested_builder import nested_control_path_manager

from .....domain._backend import BackendKind
from .....domain._errors import UpdateError

from ._base import NestedArrayMixinIndexing as NMI


@nested_control_path_manager(NMI, NMI.get_1d, BackendKind.NESTED)
def nested_get_1d(self, i: int) -> Any:
    return scalar_coerce(self[i])


@nested_control_path_manager(NMI, NMI.get_2d, BackendKind.NESTED)
def nested_get_2d(self, i: int, j: int) -> Any:
    return caps.get_1d(self[i], j)


@nested_control_path_manager(NMI, NMI.get_nd, BackendKind.NESTED)
def nested_get_nd(self, indices: Sequence[int]) -> Any:
    indices = tuple(indices)
    if not indices:
        return self
    if len(indices) == 1:
        return self[indices[0]]
    return caps.get_nd(self[indices[0]], indices[1:])


@nested_control_path_manager(NMI, NMI.set_1d, BackendKind.NESTED)
def nested_set_1d(self, i: int, value: Any):
    return self._assoc(i, value)


@nested_control_path_manager(NMI, NMI.set_2d, BackendKind.NESTED)
def nested_set_2d(self, i: int, j: int, value: Any):
    return self._assoc(i, caps.set_nd(self[i], (j,), value))


@nested_control_path_manager(NMI, NMI.set_nd, BackendKind.NESTED)
def nested_set_nd(self, indices: Sequence[int], value: Any):
    indices = tuple(indices)
    if not indices:
        raise UpdateError(
            "Trying to set on a nested array with insufficient indices"
        )
    i = indices[0]
    if len(indices) == 1:
        return self._assoc(i, value)
    return self._assoc(i, caps.set_nd(self[i], indices[1:], value))


@nested_control_path_manager(NMI, NMI.is_mutable, BackendKind.NESTED)
def nested_is_mutable(self) -> bool:
    return False
