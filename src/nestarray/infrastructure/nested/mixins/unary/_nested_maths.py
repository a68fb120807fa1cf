"""
Negation and maths-table control paths for NestedArray.

Every `MATHS_OPS` entry is registered twice from the same kernel: once
through `element_map` (pure) and once through `element_map_` (in place).
"""

from operator import neg
from typing import Any, Callable

import numpy as np

from ... import _engine as engine
from ..._nested_builder import nested_control_path_manager

from .....domain._backend import BackendKind

from ._base import MATHS_OPS
from ._base import NestedArrayMixinUnary as NMU


@nested_control_path_manager(NMU, NMU.__neg__, BackendKind.NESTED)
def nested_neg(self) -> Any:
    return engine.mapmatrix(neg, self)


def scalar_kernel(ufunc: Callable[[Any], Any]) -> Callable[[Any], float]:
    """Wrap a numpy ufunc as a scalar function returning a Python float."""

    def kernel(x: Any) -> float:
        return float(ufunc(float(x)))

    kernel.__name__ = ufunc.__name__
    return kernel


def _register(name: str, ufunc: Callable[[Any], Any]) -> None:
    kernel = scalar_kernel(ufunc)

    def pure(self) -> Any:
        with np.errstate(all="ignore"):
            return self.element_map(kernel)

    def in_place(self) -> Any:
        with np.errstate(all="ignore"):
            return self.element_map_(kernel)

    pure.__name__ = f"nested_{name}"
    in_place.__name__ = f"nested_{name}_"
    nested_control_path_manager(NMU, getattr(NMU, name), BackendKind.NESTED)(pure)
    nested_control_path_manager(NMU, getattr(NMU, name + "_"), BackendKind.NESTED)(
        in_place
    )


for _name, _ufunc in MATHS_OPS:
    _register(_name, _ufunc)
