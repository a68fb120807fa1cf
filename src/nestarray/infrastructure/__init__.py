"""
Infrastructure layer: the nested-array backend and foreign-backend adapters.

Importing this package performs all registrations: the `NestedArray`
implementation, its control paths, and the capability paths for sequences,
foreign arrays and numpy arrays.
"""

from . import _capabilities as capabilities
from .nested import NestedArray
from . import foreign

__all__ = [
    "capabilities",
    NestedArray.__name__,
]
