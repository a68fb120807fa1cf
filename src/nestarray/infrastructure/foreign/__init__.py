"""
Foreign array backends.

Importing this package registers the numpy control paths for the generic
capability functions.
"""

from ._numpy_backend import numpy_path

__all__ = [
    numpy_path.__name__,
]
