"""
Process-wide configuration for nestarray.

Settings are held in a module-level state mapping that is seeded from
environment variables at import time and may be changed at runtime through
setter functions, which return the previous value so callers can restore it.

Environment variables
---------------------
NESTARRAY_ZERO_NORM
    Policy applied when normalising a vector of length zero:

    - ``"nan"`` (default): warn with `RuntimeWarning` and return NaN components.
    - ``"raise"``: raise `ZeroDivisionError`.
"""

import os
import threading

ZERO_NORM_POLICIES = ("nan", "raise")

_CONFIG_LOCK = threading.Lock()
_CONFIG_STATE = {
    "zero_norm": os.environ.get("NESTARRAY_ZERO_NORM", "nan").strip().lower()
    or "nan",
}


def _check_zero_norm_policy(policy: str) -> str:
    key = str(policy).strip().lower()
    if key not in ZERO_NORM_POLICIES:
        raise ValueError(
            f"Unknown zero-norm policy {policy!r}; expected one of {ZERO_NORM_POLICIES}"
        )
    return key


def zero_norm_policy() -> str:
    """Return the active zero-length normalisation policy."""
    return _check_zero_norm_policy(_CONFIG_STATE["zero_norm"])


def set_zero_norm_policy(policy: str) -> str:
    """
    Set the zero-length normalisation policy.

    Parameters
    ----------
    policy : str
        ``"nan"`` or ``"raise"`` (case-insensitive).

    Returns
    -------
    str
        The previous policy.

    Raises
    ------
    ValueError
        If `policy` is not a known policy name.
    """
    key = _check_zero_norm_policy(policy)
    with _CONFIG_LOCK:
        previous = _CONFIG_STATE["zero_norm"]
        _CONFIG_STATE["zero_norm"] = key
    return previous
