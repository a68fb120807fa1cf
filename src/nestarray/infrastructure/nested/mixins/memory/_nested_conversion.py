"""
Conversion control paths for NestedArray.
"""

from typing import Any, Optional

from .... import _capabilities as caps
from ..._coercion import coerce, is_canonical
from ..._engine import map_identity_check
from ..._nested_builder import nested_control_path_manager

from .....domain._backend import BackendKind
from .....domain._errors import ShapeError, ValidationError

from ._base import NestedArrayMixinMemory as NMM


@nested_control_path_manager(NMM, NMM.get_0d, BackendKind.NESTED)
def nested_get_0d(self) -> Any:
    raise ShapeError(
        "Cannot get a 0-d value from a nested array", shape=self.get_shape()
    )


@nested_control_path_manager(NMM, NMM.convert_to_nested_vectors, BackendKind.NESTED)
def nested_convert_to_nested_vectors(self):
    if is_canonical(self):
        return self
    converted = map_identity_check(caps.convert_to_nested_vectors, self)
    shapes = [tuple(caps.shape(e)) for e in converted]
    if any(s != shapes[0] for s in shapes[1:]):
        raise ValidationError(
            "Can't convert to nested array: inconsistent shape.",
            shape=self.get_shape(),
        )
    return converted


@nested_control_path_manager(NMM, NMM.to_list, BackendKind.NESTED)
def nested_to_list(self) -> list:
    return [caps.to_list(e) for e in self._items]


@nested_control_path_manager(NMM, NMM.as_double_array, BackendKind.NESTED)
def nested_as_double_array(self) -> Optional[Any]:
    return None


@nested_control_path_manager(NMM, NMM.as_object_array, BackendKind.NESTED)
def nested_as_object_array(self) -> Optional[Any]:
    return None


@nested_control_path_manager(NMM, NMM.immutable_matrix, BackendKind.NESTED)
def nested_immutable_matrix(self):
    return self


@nested_control_path_manager(NMM, NMM.mutable_matrix, BackendKind.NESTED)
def nested_mutable_matrix(self) -> Any:
    return self.to_double_array().reshape(self.get_shape())


@nested_control_path_manager(NMM, NMM.coerce_param, BackendKind.NESTED)
def nested_coerce_param(self, param: Any) -> Any:
    return coerce(param)
