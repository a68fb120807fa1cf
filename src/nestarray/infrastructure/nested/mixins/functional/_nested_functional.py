"""
Element-wise map and reduce control paths for NestedArray.
"""

from functools import reduce
from operator import add
from typing import Any, Callable, Iterable

from .... import _capabilities as caps
from ... import _engine as engine
from ..._nested_builder import nested_control_path_manager

from .....domain._backend import BackendKind

from ._base import NestedArrayMixinFunctional as NMF


@nested_control_path_manager(NMF, NMF.element_seq, BackendKind.NESTED)
def nested_element_seq(self) -> Iterable[Any]:
    if not self._items:
        return ()
    if caps.dimensionality(self[0]) >= 1:
        return engine.element_seq_of_slices(self)
    return self._items


@nested_control_path_manager(NMF, NMF.element_map, BackendKind.NESTED)
def nested_element_map(self, f: Callable[..., Any], *others: Any) -> Any:
    if not others:
        return engine.mapmatrix(f, self)
    return engine.mapmatrix(f, *engine.broadcast_compatible(self, *others))


@nested_control_path_manager(NMF, NMF.element_map_, BackendKind.NESTED)
def nested_element_map_(self, f: Callable[..., Any], *others: Any) -> Any:
    others = [self.broadcast_coerce(o) for o in others]
    return engine.map_in_place(f, self, others)


@nested_control_path_manager(NMF, NMF.element_map_indexed, BackendKind.NESTED)
def nested_element_map_indexed(self, f: Callable[..., Any], *others: Any) -> Any:
    if not others:
        return engine.map_indexed(f, self)
    return engine.map_indexed(f, *engine.broadcast_compatible(self, *others))


@nested_control_path_manager(NMF, NMF.element_map_indexed_, BackendKind.NESTED)
def nested_element_map_indexed_(self, f: Callable[..., Any], *others: Any) -> Any:
    others = [self.broadcast_coerce(o) for o in others]
    return engine.map_indexed_in_place(f, self, others)


@nested_control_path_manager(NMF, NMF.element_reduce, BackendKind.NESTED)
def nested_element_reduce(self, f: Callable[[Any, Any], Any], *init: Any) -> Any:
    return reduce(f, self.element_seq(), *init)


@nested_control_path_manager(NMF, NMF.element_sum, BackendKind.NESTED)
def nested_element_sum(self) -> Any:
    return reduce(add, self.element_seq(), 0)
