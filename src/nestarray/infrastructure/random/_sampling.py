"""
Random sampling into nested arrays.

Every sampler builds its result with `NestedArray.construct_from_generator`,
drawing one value per leaf in row-major order from a `numpy.random.Generator`.
Passing the same seed therefore reproduces the same array.

Seeds
-----
``seed`` may be:

- ``None``: fresh OS entropy
- an ``int``: used directly as the generator seed
- a ``numpy.random.Generator``: used as-is (its state advances)
- any other object: its ``repr`` is hashed with SHA-256 into a 64-bit seed,
  which is stable across processes (unlike the built-in ``hash`` of ``str``)
"""

import hashlib
from numbers import Integral
from typing import Any, Iterator, Sequence, Tuple, Union

import numpy as np

from ...domain._implementations import get_implementation

Size = Union[int, Sequence[int]]


def to_generator(seed: Any = None) -> np.random.Generator:
    """
    Return a numpy `Generator` for `seed`.

    Parameters
    ----------
    seed : Any, optional
        See the module documentation for accepted values.

    Returns
    -------
    numpy.random.Generator
        A generator; `seed` itself when it already is one.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    if seed is None or isinstance(seed, Integral):
        return np.random.default_rng(None if seed is None else int(seed))
    digest = hashlib.sha256(repr(seed).encode("utf-8")).digest()
    return np.random.default_rng(int.from_bytes(digest[:8], "little"))


def _shape(size: Size) -> Tuple[int, ...]:
    if isinstance(size, Integral):
        return (int(size),)
    return tuple(int(d) for d in size)


def _build(size: Size, draw) -> Any:
    NestedArray = get_implementation("nested")
    return NestedArray.construct_from_generator(_shape(size), lambda _: draw())


def randoms(seed: Any = None) -> Iterator[float]:
    """Yield an endless stream of uniform samples on ``[0, 1)``."""
    rng = to_generator(seed)
    while True:
        yield float(rng.random())


def sample_uniform(size: Size, seed: Any = None) -> Any:
    """
    Return an array of uniform samples on ``[0, 1)``.

    Parameters
    ----------
    size : int | Sequence[int]
        Number of samples, or the shape of the result.
    seed : Any, optional
        Seed or generator (see `to_generator`).
    """
    rng = to_generator(seed)
    return _build(size, lambda: float(rng.random()))


def sample_normal(size: Size, seed: Any = None) -> Any:
    """Return an array of standard normal samples."""
    rng = to_generator(seed)
    return _build(size, lambda: float(rng.standard_normal()))


def sample_rand_int(size: Size, n: int, seed: Any = None) -> Any:
    """
    Return an array of random integers in ``[0, n)``.

    Raises
    ------
    ValueError
        If `n` is not positive.
    """
    n = int(n)
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    rng = to_generator(seed)
    return _build(size, lambda: int(rng.integers(0, n)))


def sample_binomial(size: Size, p: float, n: int = 1, seed: Any = None) -> Any:
    """
    Return an array of binomial samples.

    Each leaf counts the successes in `n` independent trials with success
    probability `p`. With the default ``n=1`` the samples are Bernoulli.

    Raises
    ------
    ValueError
        If `p` is outside ``[0, 1]`` or `n` is negative.
    """
    p, n = float(p), int(n)
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p must lie in [0, 1], got {p}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    rng = to_generator(seed)
    return _build(size, lambda: int(rng.binomial(n, p)))
