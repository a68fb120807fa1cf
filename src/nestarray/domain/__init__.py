"""
Domain layer: capability protocols, backend classification, errors,
configuration and the implementation registry.

Nothing in this package imports the infrastructure layer.
"""

from ._array import IArray, IArrayCore
from ._backend import BackendKind, kind_of
from ._config import ZERO_NORM_POLICIES, set_zero_norm_policy, zero_norm_policy
from ._errors import (
    ArrayIndexError,
    NestedArrayError,
    ShapeError,
    UpdateError,
    ValidationError,
)
from ._implementations import (
    ImplementationRecord,
    get_implementation,
    implementations_supporting,
    list_implementations,
    register_implementation,
)

__all__ = [
    IArray.__name__,
    IArrayCore.__name__,
    BackendKind.__name__,
    kind_of.__name__,
    "ZERO_NORM_POLICIES",
    set_zero_norm_policy.__name__,
    zero_norm_policy.__name__,
    ArrayIndexError.__name__,
    NestedArrayError.__name__,
    ShapeError.__name__,
    UpdateError.__name__,
    ValidationError.__name__,
    ImplementationRecord.__name__,
    get_implementation.__name__,
    implementations_supporting.__name__,
    list_implementations.__name__,
    register_implementation.__name__,
]
