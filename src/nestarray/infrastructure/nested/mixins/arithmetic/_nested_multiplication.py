"""
Multiplication control paths for NestedArray.

Covers element-wise products, scaling, and matrix multiplication. Matrix
multiplication handles the common vector/matrix cases with dot products
and leaves every other combination to the generic inner product.
"""

from operator import mul
from typing import Any

from .... import _capabilities as caps
from ... import _engine as engine
from ..._coercion import as_operand, coerce
from ..._nested_builder import nested_control_path_manager

from .....domain._backend import BackendKind

from ._base import NestedArrayMixinArithmetic as NMA


@nested_control_path_manager(NMA, NMA.element_multiply, BackendKind.NESTED)
def nested_element_multiply(self, other: Any) -> Any:
    other = as_operand(other)
    if caps.dimensionality(other) == 0:
        return self.scale(engine.scalar_coerce(other))
    a, b = engine.broadcast_compatible(self, other)
    return engine.mapmatrix(mul, a, b)


@nested_control_path_manager(NMA, NMA.scale, BackendKind.NESTED)
def nested_scale(self, factor: Any) -> Any:
    factor = engine.scalar_coerce(factor)
    return engine.mapmatrix(lambda x: x * factor, self)


@nested_control_path_manager(NMA, NMA.pre_scale, BackendKind.NESTED)
def nested_pre_scale(self, factor: Any) -> Any:
    factor = engine.scalar_coerce(factor)
    return engine.mapmatrix(lambda x: factor * x, self)


@nested_control_path_manager(NMA, NMA.square, BackendKind.NESTED)
def nested_square(self) -> Any:
    return engine.mapmatrix(mul, self, self)


@nested_control_path_manager(NMA, NMA.matrix_multiply, BackendKind.NESTED)
def nested_matrix_multiply(self, other: Any) -> Any:
    other = as_operand(other)
    mdims, odims = self.dimensionality(), caps.dimensionality(other)
    if odims == 0:
        return self.scale(engine.scalar_coerce(other))
    if mdims == 1 and odims == 2:
        columns = caps.dimension_count(other, 1)
        return type(self)(
            self.vector_dot(caps.get_slice(other, 1, j)) for j in range(columns)
        )
    if mdims == 2 and odims == 1:
        return type(self)(caps.vector_dot(row, other) for row in self)
    if mdims == 2 and odims == 2:
        columns = [
            caps.get_slice(other, 1, j) for j in range(caps.dimension_count(other, 1))
        ]
        return type(self)(
            type(self)(caps.vector_dot(row, col) for col in columns) for row in self
        )
    return engine.inner_product(self, other)


@nested_control_path_manager(NMA, NMA.vector_transform, BackendKind.NESTED)
def nested_vector_transform(self, other: Any) -> Any:
    return self.matrix_multiply(other)


@nested_control_path_manager(NMA, NMA.vector_transform_, BackendKind.NESTED)
def nested_vector_transform_(self, other: Any) -> Any:
    result = self.matrix_multiply(other)
    if not caps.is_mutable(other):
        return result
    caps.element_map_(other, lambda _, y: y, result)
    return other


@nested_control_path_manager(NMA, NMA.__mul__, BackendKind.NESTED)
def nested_mul(self, other: Any) -> Any:
    return self.element_multiply(other)


@nested_control_path_manager(NMA, NMA.__rmul__, BackendKind.NESTED)
def nested_rmul(self, other: Any) -> Any:
    if caps.dimensionality(other) == 0:
        return self.pre_scale(other)
    return coerce(other).element_multiply(self)


@nested_control_path_manager(NMA, NMA.__matmul__, BackendKind.NESTED)
def nested_matmul(self, other: Any) -> Any:
    return self.matrix_multiply(other)


@nested_control_path_manager(NMA, NMA.__rmatmul__, BackendKind.NESTED)
def nested_rmatmul(self, other: Any) -> Any:
    if caps.dimensionality(other) == 0:
        return self.pre_scale(other)
    return coerce(other).matrix_multiply(self)
