"""
Random Sources
==============

All entropy used by the samplers flows through a :class:`RandomSource`, a
seedable wrapper around :class:`numpy.random.Generator` whose draws are
serialized by a lock. Samplers accept the source as an explicit ``rng``
argument; when it is omitted they fall back to a lazily created process-wide
default.

Notes
-----
- A single source may be shared between threads; draws never interleave
  inside the generator state. For parallel work prefer :meth:`RandomSource.spawn`,
  which yields statistically independent children.
- The default source is seeded from :attr:`SamplingConfig.seed`.
- A :class:`numpy.random.Generator` passed as ``rng`` is wrapped once and the
  wrapper is kept for the life of the process.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import threading
from typing import TYPE_CHECKING

import numpy as np

from pysatl_variates.config import get_config

if TYPE_CHECKING:
    from typing import Any, TypeAlias

    import numpy.typing as npt

    RandomLike: TypeAlias = RandomSource | np.random.Generator | int | None

logger = logging.getLogger(__name__)


class RandomSource:
    """
    Lock-serialized pseudo-random number source.

    Parameters
    ----------
    seed : int | None, optional
        Seed for a fresh PCG64 generator. If ``None``, uses system entropy.
    generator : numpy.random.Generator, optional
        Existing generator to wrap instead of creating one. Mutually
        exclusive with ``seed``.
    """

    __slots__ = ("_generator", "_lock", "_seed")

    def __init__(
        self,
        seed: int | None = None,
        *,
        generator: np.random.Generator | None = None,
    ) -> None:
        if generator is not None and seed is not None:
            raise ValueError("Pass either a seed or a generator, not both")
        self._seed = seed
        self._generator = np.random.default_rng(seed) if generator is None else generator
        self._lock = threading.Lock()

    @property
    def seed(self) -> int | None:
        """Seed the source was created (or last reseeded) with."""
        return self._seed

    @property
    def generator(self) -> np.random.Generator:
        """Underlying numpy generator. Not protected by the lock."""
        return self._generator

    def reseed(self, seed: int | None = None) -> None:
        """
        Replace the generator state.

        Parameters
        ----------
        seed : int | None, optional
            New random seed. If ``None``, uses system entropy.
        """
        with self._lock:
            self._generator = np.random.default_rng(seed)
            self._seed = seed
        logger.debug("Random source %#x reseeded with %r", id(self), seed)

    def spawn(self, n_children: int) -> list[RandomSource]:
        """Create ``n_children`` independent random sources."""
        with self._lock:
            children = self._generator.spawn(n_children)
        return [RandomSource(generator=child) for child in children]

    def _draw(self, method: str, *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            return getattr(self._generator, method)(*args, **kwargs)

    def integers(self, low: int, high: int, size: int | None = None) -> Any:
        """Uniform integers from the inclusive range ``[low, high]``."""
        return self._draw("integers", low, high, size=size, endpoint=True)

    def standard_normal(self, size: int | None = None) -> Any:
        return self._draw("standard_normal", size=size)

    def normal(self, loc: float, scale: float, size: int | None = None) -> Any:
        return self._draw("normal", loc, scale, size=size)

    def exponential(self, scale: float, size: int | None = None) -> Any:
        return self._draw("exponential", scale, size=size)

    def poisson(self, lam: float, size: int | None = None) -> Any:
        return self._draw("poisson", lam, size=size)

    def gamma(self, shape: float, scale: float, size: int | None = None) -> Any:
        return self._draw("gamma", shape, scale, size=size)

    def random(self, size: int | None = None) -> float | npt.NDArray[np.float64]:
        """Uniform floats from ``[0, 1)``."""
        return self._draw("random", size=size)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(seed={self._seed!r})"


_default_source: RandomSource | None = None
_default_lock = threading.Lock()

# Wrappers of caller-owned generators, keyed by id. Each wrapper keeps its
# generator alive, so an id is never reused while its entry exists.
_wrapped_generators: dict[int, RandomSource] = {}


def default_random_source() -> RandomSource:
    """
    Return the process-wide random source, creating it on first use.

    The source is seeded from the active :class:`SamplingConfig`.
    """
    global _default_source

    with _default_lock:
        if _default_source is None:
            seed = get_config().seed
            _default_source = RandomSource(seed)
            logger.debug("Created default random source with seed %r", seed)
        return _default_source


def reset_default_random_source(seed: int | None = None) -> None:
    """
    Drop the process-wide random source.

    Parameters
    ----------
    seed : int | None, optional
        If given, the replacement is created immediately with this seed;
        otherwise it is created lazily from the active configuration.
    """
    global _default_source

    with _default_lock:
        _default_source = None if seed is None else RandomSource(seed)
    logger.debug("Default random source reset (seed=%r)", seed)


def _wrap_generator(generator: np.random.Generator) -> RandomSource:
    """Return the one :class:`RandomSource` (and lock) shared by all users of ``generator``."""
    with _default_lock:
        source = _wrapped_generators.get(id(generator))
        if source is None:
            source = RandomSource(generator=generator)
            _wrapped_generators[id(generator)] = source
        return source


def resolve_random_source(rng: RandomLike = None) -> RandomSource:
    """
    Normalize the ``rng`` argument accepted by samplers.

    Parameters
    ----------
    rng : RandomSource | numpy.random.Generator | int | None
        ``None`` selects the process-wide default, an ``int`` seeds a fresh
        source. A generator is wrapped once; every later call with the same
        generator returns that wrapper, so concurrent users share its lock.

    Returns
    -------
    RandomSource

    Raises
    ------
    TypeError
        If ``rng`` has an unsupported type.
    """
    if rng is None:
        return default_random_source()
    if isinstance(rng, RandomSource):
        return rng
    if isinstance(rng, np.random.Generator):
        return _wrap_generator(rng)
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        return RandomSource(int(rng))
    raise TypeError(f"Unsupported random source: {type(rng).__name__}")


__all__ = [
    "RandomSource",
    "default_random_source",
    "reset_default_random_source",
    "resolve_random_source",
]
