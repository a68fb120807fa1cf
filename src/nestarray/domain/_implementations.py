"""
Process-wide registry of array implementations.

Backends announce themselves once, at import time, with an implementation key
and the minimum dimensionality they can represent. Generic code consults the
registry afterwards to find an implementation able to hold a result of a
given dimensionality. There is no runtime API beyond registration and lookup.
"""

from __future__ import annotations

import threading
import warnings
from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class ImplementationRecord:
    """
    Registry entry describing one array implementation.

    Attributes
    ----------
    key : str
        Unique implementation key (e.g. ``"nested"``).
    implementation : Any
        The implementation object (usually the array class).
    min_dimensionality : int
        Smallest dimensionality the implementation can represent.
    """

    key: str
    implementation: Any
    min_dimensionality: int


_REGISTRY_LOCK = threading.Lock()
_REGISTRY: Dict[str, ImplementationRecord] = {}


def register_implementation(
    key: str, implementation: Any, min_dimensionality: int = 1
) -> ImplementationRecord:
    """
    Register `implementation` under `key`.

    Parameters
    ----------
    key : str
        Implementation key.
    implementation : Any
        The implementation object.
    min_dimensionality : int, optional
        Minimum supported dimensionality. Defaults to 1.

    Returns
    -------
    ImplementationRecord
        The stored record.

    Notes
    -----
    Registering an existing key replaces the previous entry and emits a
    `RuntimeWarning`.
    """
    if min_dimensionality < 0:
        raise ValueError(
            f"min_dimensionality must be non-negative, got {min_dimensionality}"
        )
    record = ImplementationRecord(str(key), implementation, int(min_dimensionality))
    with _REGISTRY_LOCK:
        previous = _REGISTRY.get(record.key)
        _REGISTRY[record.key] = record
    if previous is not None and previous.implementation is not implementation:
        warnings.warn(
            f"Implementation {record.key!r} was already registered; replacing it.",
            RuntimeWarning,
            stacklevel=2,
        )
    return record


def get_implementation(key: str) -> Any:
    """
    Return the implementation registered under `key`.

    Raises
    ------
    KeyError
        If no implementation is registered under `key`.
    """
    with _REGISTRY_LOCK:
        record = _REGISTRY.get(key)
    if record is None:
        raise KeyError(f"No array implementation registered under {key!r}")
    return record.implementation


def list_implementations() -> Tuple[ImplementationRecord, ...]:
    """Return all registered records, ordered by key."""
    with _REGISTRY_LOCK:
        return tuple(_REGISTRY[k] for k in sorted(_REGISTRY))


def implementations_supporting(dims: int) -> Tuple[ImplementationRecord, ...]:
    """Return the records whose minimum dimensionality is at most `dims`."""
    return tuple(r for r in list_implementations() if r.min_dimensionality <= dims)
