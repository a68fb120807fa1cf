"""
Construction and coercion into canonical nested-array form.

A value is *canonical* when it is a scalar, or a `NestedArray` whose elements
are all canonical and whose sibling elements share the shape of the first
element. `coerce` turns any supported input into canonical form:

- canonical values are returned unchanged (no copy)
- plain Python sequences are coerced element by element
- arrays of any other backend with dimensionality > 0 are asked to convert
  themselves with ``convert_to_nested_vectors`` and the result is coerced
- 0-dimensional arrays are unwrapped to their scalar value
- ``None`` and every other value are treated as opaque scalars

Notes
-----
`coerce` does not reject ragged plain sequences; explicit construction
entry points (`construct_matrix`) validate the result.
"""

from typing import Any, Callable, Sequence, Tuple

from .. import _capabilities as caps
from ...domain._backend import BackendKind, kind_of
from ._engine import map_identity_check, native


def check_vector_shape(v: Any, shape: Sequence[int]) -> bool:
    """Return True if the nested array `v` has exactly the given `shape`."""
    if kind_of(v) is not BackendKind.NESTED or len(v) != shape[0]:
        return False
    rest = tuple(shape[1:])
    if rest:
        return all(check_vector_shape(e, rest) for e in v)
    return all(kind_of(e) is not BackendKind.NESTED for e in v)


def is_canonical(x: Any) -> bool:
    """
    Return True if `x` is already in canonical nested-array form.

    Scalars are canonical. A `NestedArray` is canonical iff every element is
    canonical and every element has the shape of the first element.
    """
    kind = kind_of(x)
    if kind is BackendKind.SCALAR:
        return True
    if kind is not BackendKind.NESTED:
        return False
    return all(is_canonical(e) for e in x) and check_vector_shape(x, x.get_shape())


def coerce(x: Any) -> Any:
    """
    Convert `x` into canonical nested-array form.

    Parameters
    ----------
    x : Any
        A scalar, `NestedArray`, Python sequence, numpy array or foreign
        array implementing `IArrayCore`.

    Returns
    -------
    Any
        `x` itself when already canonical, otherwise a new `NestedArray`
        (or scalar for 0-dimensional input).

    Examples
    --------
    >>> coerce([[1, 2], (3, 4)])
    NestedArray([[1, 2], [3, 4]])
    """
    kind = kind_of(x)
    if kind is BackendKind.SCALAR:
        return x
    if kind is BackendKind.NESTED and is_canonical(x):
        return x
    if kind is BackendKind.SEQUENCE:
        return native()(coerce(e) for e in x)
    if caps.dimensionality(x) > 0:
        converted = caps.convert_to_nested_vectors(x)
        if kind_of(converted) is BackendKind.NESTED:
            return map_identity_check(coerce, converted)
        return native()(coerce(e) for e in caps.get_major_slice_seq(converted))
    return caps.get_0d(x)


def new_nd(dims: Sequence[int], fill: Any = 0.0) -> Any:
    """
    Build a nested array of shape `dims` filled with `fill`.

    An empty `dims` yields the bare `fill` value.
    """
    dims = tuple(int(d) for d in dims)
    if not dims:
        return fill
    NestedArray = native()
    result = NestedArray((fill,) * dims[-1])
    for d in reversed(dims[:-1]):
        result = NestedArray((result,) * d)
    return result


def construct_from_generator(
    shape: Sequence[int], generator_fn: Callable[[Tuple[int, ...]], Any]
) -> Any:
    """
    Build a nested array of `shape` whose leaves are ``generator_fn(coords)``.

    Leaves are generated in row-major order, so a stateful generator (for
    example a random number stream) fills the array deterministically.
    """
    shape = tuple(int(d) for d in shape)
    NestedArray = native()

    def build(prefix: Tuple[int, ...], dims: Tuple[int, ...]) -> Any:
        if not dims:
            return generator_fn(prefix)
        return NestedArray(build(prefix + (i,), dims[1:]) for i in range(dims[0]))

    return build((), shape)


def as_operand(x: Any) -> Any:
    """Coerce plain Python sequences; return every other value unchanged."""
    if kind_of(x) is BackendKind.SEQUENCE:
        return coerce(x)
    return x
