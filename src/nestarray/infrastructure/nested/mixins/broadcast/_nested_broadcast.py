"""
Broadcasting control paths for NestedArray.
"""

from typing import Any, Sequence

from .... import _capabilities as caps
from ..._coercion import coerce
from ..._nested_builder import nested_control_path_manager

from .....domain._backend import BackendKind
from .....domain._errors import ShapeError

from ._base import NestedArrayMixinBroadcast as NMB


@nested_control_path_manager(NMB, NMB.broadcast, BackendKind.NESTED)
def nested_broadcast(self, target_shape: Sequence[int]):
    target = tuple(int(d) for d in target_shape)
    shape = self.get_shape()
    dims, tdims = len(shape), len(target)
    if tdims < dims:
        raise ShapeError(
            "Can't broadcast to a lower dimensional shape", shape=shape, target=target
        )
    if target[tdims - dims :] != shape:
        raise ShapeError(
            f"Incompatible shapes, cannot broadcast {shape} to {target}",
            shape=shape,
            target=target,
        )
    result = self
    for dup in reversed(target[: tdims - dims]):
        result = type(self)((result,) * dup)
    return result


@nested_control_path_manager(NMB, NMB.broadcast_like, BackendKind.NESTED)
def nested_broadcast_like(self, other: Any):
    return self.broadcast(caps.shape(other))


@nested_control_path_manager(NMB, NMB.broadcast_coerce, BackendKind.NESTED)
def nested_broadcast_coerce(self, other: Any) -> Any:
    return caps.broadcast(coerce(other), self.get_shape())
