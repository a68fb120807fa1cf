"""
Flat-buffer export control paths for NestedArray.

The buffer is filled by splitting it into one equal chunk per major slice
and recursing. A slice whose length equals its chunk and whose elements are
all 0-dimensional is copied directly. Foreign sub-arrays are copied through
their element sequence.
"""

from typing import Any

import numpy as np

from .... import _capabilities as caps
from ..._engine import scalar_coerce
from ..._nested_builder import nested_control_path_manager

from .....domain._backend import BackendKind, kind_of

from ._base import NestedArrayMixinMemory as NMM

BUFFER_DTYPES = {
    "double": np.float64,
    "object": object,
}
"""Flat-buffer kinds and the numpy dtype allocated for each."""


def _fill(m: Any, buf: np.ndarray, offset: int, size: int) -> None:
    if kind_of(m) is not BackendKind.NESTED:
        for k, x in enumerate(caps.element_seq(m)):
            buf[offset + k] = scalar_coerce(x)
        return
    n = len(m)
    if n == 0:
        return
    if n == size and all(caps.dimensionality(e) == 0 for e in m):
        for k, x in enumerate(m):
            buf[offset + k] = scalar_coerce(x)
        return
    chunk = size // n
    for k, e in enumerate(m):
        _fill(e, buf, offset + k * chunk, chunk)


@nested_control_path_manager(NMM, NMM.to_flat_buffer, BackendKind.NESTED)
def nested_to_flat_buffer(self, kind: str = "double") -> np.ndarray:
    try:
        dtype = BUFFER_DTYPES[kind]
    except KeyError:
        raise ValueError(
            f"Unknown buffer kind {kind!r}; expected one of {tuple(BUFFER_DTYPES)}"
        ) from None
    size = self.element_count()
    buf = np.empty(size, dtype=dtype)
    _fill(self, buf, 0, size)
    return buf


@nested_control_path_manager(NMM, NMM.to_double_array, BackendKind.NESTED)
def nested_to_double_array(self) -> np.ndarray:
    return self.to_flat_buffer("double")


@nested_control_path_manager(NMM, NMM.to_object_array, BackendKind.NESTED)
def nested_to_object_array(self) -> np.ndarray:
    return self.to_flat_buffer("object")
