"""
Broadcasting addition and subtraction control paths for NestedArray.

Both operations broadcast the operands to their common shape and then map
the scalar operator over matching leaves. Scalars and sequences on the left
of ``+`` / ``-`` are handled by the reflected operators, which route through
the generic capability functions.
"""

from operator import add, sub
from typing import Any

from .... import _capabilities as caps
from ... import _engine as engine
from ..._coercion import as_operand
from ..._nested_builder import nested_control_path_manager

from .....domain._backend import BackendKind

from ._base import NestedArrayMixinArithmetic as NMA


@nested_control_path_manager(NMA, NMA.matrix_add, BackendKind.NESTED)
def nested_matrix_add(self, other: Any) -> Any:
    a, b = engine.broadcast_compatible(self, as_operand(other))
    return engine.mapmatrix(add, a, b)


@nested_control_path_manager(NMA, NMA.matrix_sub, BackendKind.NESTED)
def nested_matrix_sub(self, other: Any) -> Any:
    a, b = engine.broadcast_compatible(self, as_operand(other))
    return engine.mapmatrix(sub, a, b)


@nested_control_path_manager(NMA, NMA.__add__, BackendKind.NESTED)
def nested_add(self, other: Any) -> Any:
    return self.matrix_add(other)


@nested_control_path_manager(NMA, NMA.__radd__, BackendKind.NESTED)
def nested_radd(self, other: Any) -> Any:
    return caps.matrix_add(other, self)


@nested_control_path_manager(NMA, NMA.__sub__, BackendKind.NESTED)
def nested_sub(self, other: Any) -> Any:
    return self.matrix_sub(other)


@nested_control_path_manager(NMA, NMA.__rsub__, BackendKind.NESTED)
def nested_rsub(self, other: Any) -> Any:
    return caps.matrix_sub(other, self)
