"""
Generic element-wise engine for nested arrays.

This module holds the recursive machinery underlying nearly every arithmetic
and transformation method of `NestedArray`:

- `mapmatrix`: map a function over matching structure of 1..N operands
- `map_in_place` / `map_indexed_in_place`: the "in place" variants, which
  mutate reachable mutable leaves and rebuild only the changed containers
- `map_indexed`: like `mapmatrix` but passing the coordinate of every leaf
- `common_shape` / `broadcast_compatible`: trailing-dimension broadcasting
- `inner_product`: generic contraction used as a linear-algebra fallback

Only the first operand of `mapmatrix` drives the recursion; every other
operand is accessed through the capability functions, so it may be any
backend. Results are always new nested arrays (or a scalar for 0-D input).

Notes
-----
Operands are assumed to have matching shapes. Callers broadcast first;
mismatched lengths are silently truncated to the shortest operand.
"""

from __future__ import annotations

from itertools import chain
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple

from .. import _capabilities as caps
from ...domain._backend import BackendKind, kind_of
from ...domain._errors import ShapeError
from ...domain._implementations import get_implementation

Index = Tuple[int, ...]


def native():
    """Return the registered nested-array implementation class."""
    return get_implementation("nested")


def scalar_coerce(x: Any) -> Any:
    """Return `x` if it is a scalar, otherwise its 0-dimensional value."""
    if kind_of(x) is BackendKind.SCALAR:
        return x
    return caps.get_0d(x)


def map_identity_check(f: Callable[[Any], Any], m: Any) -> Any:
    """
    Map `f` over the items of the nested array `m`.

    The result is `m` itself when `f` returns every item unchanged (by
    identity); otherwise only the top-level container is rebuilt.
    """
    items = tuple(f(x) for x in m)
    if all(y is x for x, y in zip(m, items)):
        return m
    return type(m)(items)


def mapmatrix(f: Callable[..., Any], m: Any, *more: Any) -> Any:
    """
    Map `f` over all leaves of `m` and the matching leaves of `more`.

    Parameters
    ----------
    f : Callable[..., Any]
        Function receiving one scalar per operand.
    m : Any
        The operand that drives the recursion.
    *more : Any
        Further operands of the same shape, of any backend.

    Returns
    -------
    Any
        A nested array of the same shape as `m`, or a scalar when `m` is
        0-dimensional.
    """
    dims = caps.dimensionality(m)
    if dims == 0:
        return f(scalar_coerce(m), *(scalar_coerce(x) for x in more))
    NestedArray = native()
    if dims == 1:
        seqs = [caps.element_seq(x) for x in more]
        return NestedArray(map(f, caps.element_seq(m), *seqs))
    slice_seqs = [caps.get_major_slice_seq(x) for x in more]
    return NestedArray(
        mapmatrix(f, *group)
        for group in zip(caps.get_major_slice_seq(m), *slice_seqs)
    )


def _prefixed(f: Callable[..., Any], prefix: Index) -> Callable[..., Any]:
    def g(index: Sequence[int], *xs: Any) -> Any:
        return f(prefix + tuple(index), *xs)

    return g


def map_indexed(
    f: Callable[..., Any], m: Any, *more: Any, prefix: Index = ()
) -> Any:
    """
    Map `f(index, x, *ys)` over all leaves of `m`.

    `index` is the full coordinate of the leaf as a tuple of ints, built by
    prefixing the current axis position as the recursion descends.
    """
    dims = caps.dimensionality(m)
    if dims == 0:
        return f(prefix, scalar_coerce(m), *(scalar_coerce(x) for x in more))
    NestedArray = native()
    if dims == 1:
        seqs = [caps.element_seq(x) for x in more]
        return NestedArray(
            f(prefix + (i,), *group)
            for i, group in enumerate(zip(caps.element_seq(m), *seqs))
        )
    slice_seqs = [caps.get_major_slice_seq(x) for x in more]
    return NestedArray(
        map_indexed(f, *group, prefix=prefix + (i,))
        for i, group in enumerate(zip(caps.get_major_slice_seq(m), *slice_seqs))
    )


def _rebuild(m: Any, items: Sequence[Any]) -> Any:
    if all(y is x for x, y in zip(m, items)):
        return m
    return type(m)(items)


def map_in_place(f: Callable[..., Any], m: Any, others: Sequence[Any]) -> Any:
    """
    In-place flavour of `mapmatrix` for a nested array `m`.

    Mutable leaves (foreign arrays reporting ``is_mutable``) are mapped in
    place. Everything else is mapped functionally, and only containers whose
    items changed are rebuilt. Callers must use the return value.
    """
    items = []
    for i, item in enumerate(m):
        slices = [caps.get_major_slice(o, i) for o in others]
        if kind_of(item) is BackendKind.NESTED:
            items.append(map_in_place(f, item, slices))
        elif caps.is_mutable(item):
            caps.element_map_(item, f, *slices)
            items.append(item)
        else:
            items.append(mapmatrix(f, item, *slices))
    return _rebuild(m, items)


def map_indexed_in_place(
    f: Callable[..., Any], m: Any, others: Sequence[Any], prefix: Index = ()
) -> Any:
    """In-place flavour of `map_indexed` (see `map_in_place`)."""
    items = []
    for i, item in enumerate(m):
        slices = [caps.get_major_slice(o, i) for o in others]
        here = prefix + (i,)
        if kind_of(item) is BackendKind.NESTED:
            items.append(map_indexed_in_place(f, item, slices, here))
        elif caps.is_mutable(item):
            caps.element_map_indexed_(item, _prefixed(f, here), *slices)
            items.append(item)
        else:
            items.append(map_indexed(f, item, *slices, prefix=here))
    return _rebuild(m, items)


def element_seq_of_slices(m: Any) -> Tuple[Any, ...]:
    """Concatenate the element sequences of the major slices of `m`."""
    return tuple(chain.from_iterable(caps.element_seq(s) for s in m))


def common_shape(shapes: Iterable[Sequence[int]]) -> Optional[Tuple[int, ...]]:
    """
    Return the broadcast shape of `shapes`, or None if they are incompatible.

    Shapes are compatible when every shape equals the trailing dimensions of
    the longest one.
    """
    shapes = [tuple(s) for s in shapes]
    if not shapes:
        return None
    longest = max(shapes, key=len)
    for s in shapes:
        if longest[len(longest) - len(s) :] != s:
            return None
    return longest


def broadcast_compatible(*arrays: Any) -> Tuple[Any, ...]:
    """
    Broadcast every operand to their common shape.

    Raises
    ------
    ShapeError
        If the shapes have no common broadcast shape.
    """
    shapes = [tuple(caps.shape(a)) for a in arrays]
    target = common_shape(shapes)
    if target is None:
        raise ShapeError(
            f"Incompatible shapes, cannot broadcast {shapes} to a common shape",
            shape=shapes[0],
            target=shapes[-1],
        )
    return tuple(
        a if s == target else caps.broadcast(a, target)
        for a, s in zip(arrays, shapes)
    )


def inner_product(a: Any, b: Any) -> Any:
    """
    Contract the last axis of `a` with the first axis of `b`.

    Scalars on either side degrade to scaling. Works for any backends by
    summing scaled major slices of `b`.

    Raises
    ------
    ShapeError
        If the contracted axes differ in length.
    """
    da = caps.dimensionality(a)
    if da == 0:
        return caps.pre_scale(b, scalar_coerce(a))
    if caps.dimensionality(b) == 0:
        return caps.scale(a, scalar_coerce(b))
    if da > 1:
        return native()(inner_product(s, b) for s in caps.get_major_slice_seq(a))
    xs = tuple(caps.element_seq(a))
    rows = caps.get_major_slice_seq(b)
    if len(xs) != len(rows):
        raise ShapeError(
            f"Mismatched sizes for inner product: {len(xs)} vs {len(rows)}",
            shape=caps.shape(a),
            target=caps.shape(b),
        )
    acc: Any = 0.0
    for i, (x, row) in enumerate(zip(xs, rows)):
        term = caps.pre_scale(row, x)
        acc = term if i == 0 else caps.matrix_add(acc, term)
    return acc
