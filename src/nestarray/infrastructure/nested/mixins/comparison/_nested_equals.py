"""
Equality control path for NestedArray.
"""

from typing import Any

from .... import _capabilities as caps
from ..._coercion import as_operand
from ..._nested_builder import nested_control_path_manager

from .....domain._backend import BackendKind

from ._base import NestedArrayMixinComparison as NMC


@nested_control_path_manager(NMC, NMC.matrix_equals, BackendKind.NESTED)
def nested_matrix_equals(self, other: Any) -> bool:
    other = as_operand(other)
    odims = caps.dimensionality(other)
    if odims <= 0 or caps.dimension_count(other, 0) != len(self):
        return False
    if self.dimensionality() == 1:
        if odims != 1:
            return False
        return all(x == y for x, y in zip(self._items, caps.element_seq(other)))
    return all(
        caps.matrix_equals(a, b)
        for a, b in zip(self._items, caps.get_major_slice_seq(other))
    )
