"""
Backend classification utilities.

This module defines the closed set of array representations the nested-array
core knows how to talk to, and a classifier that maps any Python value onto
that set. Capability functions dispatch on the classification instead of on
open-ended runtime type registration.

- `BackendKind`: an enumeration of representation categories
- `kind_of`: classify a value
"""

from collections.abc import Iterable
from enum import Enum
from typing import Any

import numpy as np

from ._array import IArrayCore


class BackendKind(Enum):
    """
    Enumeration of value representations seen by the nested-array core.

    Attributes
    ----------
    SCALAR : BackendKind
        Anything that is not an array: numbers, numpy scalars, None, strings
        and opaque objects.
    NESTED : BackendKind
        A `NestedArray` value (the native representation).
    SEQUENCE : BackendKind
        Plain Python lists, tuples and other non-string iterables. Never
        canonical; coerced before use.
    NUMPY : BackendKind
        A `numpy.ndarray` (the dense reference foreign backend).
    FOREIGN : BackendKind
        Any other object implementing the narrow capability protocol
        `IArrayCore`.
    """

    SCALAR = "scalar"
    NESTED = "nested"
    SEQUENCE = "sequence"
    NUMPY = "numpy"
    FOREIGN = "foreign"


_TEXT_TYPES = (str, bytes, bytearray)
_NUMBER_TYPES = (int, float, complex)


def kind_of(value: Any) -> BackendKind:
    """
    Classify `value` into a `BackendKind`.

    Parameters
    ----------
    value : Any
        The value to classify.

    Returns
    -------
    BackendKind
        The representation category of `value`.

    Notes
    -----
    Native arrays advertise themselves through a class-level
    ``_backend_kind`` attribute equal to `BackendKind.NESTED`, which keeps
    this module free of infrastructure imports.
    """
    if getattr(type(value), "_backend_kind", None) is BackendKind.NESTED:
        return BackendKind.NESTED
    if isinstance(value, _NUMBER_TYPES):
        return BackendKind.SCALAR
    if isinstance(value, np.ndarray):
        return BackendKind.NUMPY
    if isinstance(value, (np.generic,) + _TEXT_TYPES) or value is None:
        return BackendKind.SCALAR
    if isinstance(value, IArrayCore):
        return BackendKind.FOREIGN
    if isinstance(value, Iterable) and not isinstance(value, dict):
        return BackendKind.SEQUENCE
    return BackendKind.SCALAR
