"""
Elementary row operation control paths for NestedArray.

Each operation replaces the affected rows and shares every other row with
the receiver.
"""

from typing import Any

from .... import _capabilities as caps
from ..._nested_builder import nested_control_path_manager

from .....domain._backend import BackendKind

from ._base import NestedArrayMixinArithmetic as NMA


@nested_control_path_manager(NMA, NMA.swap_rows, BackendKind.NESTED)
def nested_swap_rows(self, i: int, j: int):
    i, j = int(i), int(j)
    if i == j:
        return self
    row_i, row_j = self[i], self[j]
    return self._assoc(i, row_j)._assoc(j, row_i)


@nested_control_path_manager(NMA, NMA.multiply_row, BackendKind.NESTED)
def nested_multiply_row(self, i: int, factor: Any):
    return self._assoc(i, caps.scale(self[i], factor))


@nested_control_path_manager(NMA, NMA.add_row, BackendKind.NESTED)
def nested_add_row(self, i: int, j: int, factor: Any):
    return self._assoc(i, caps.matrix_add(self[i], caps.scale(self[j], factor)))
