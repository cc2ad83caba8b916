"""
Sampling Configuration
======================

Process-wide settings consulted by the samplers:

- :class:`SamplingConfig`: frozen settings record.
- :func:`get_config` / :func:`set_config`: read and replace the active record.
- :func:`config_context`: temporarily override fields.

Notes
-----
- Setting a configuration that carries a ``seed`` restarts the default random
  source from it, so subsequent draws without an explicit ``rng`` are
  reproducible. :func:`config_context` only does so when ``seed`` is overridden.
- Nothing is read from files or the environment.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SamplingConfig:
    """
    Settings shared by all samplers.

    Parameters
    ----------
    seed : int | None, default None
        Seed of the default random source. If ``None``, system entropy is used.
    check_symmetry : bool, default True
        If ``True``, the multivariate normal sampler rejects covariance
        matrices that are not symmetric within the tolerances below.
    symmetry_rtol : float, default 1e-9
        Relative tolerance of the symmetry check.
    symmetry_atol : float, default 1e-12
        Absolute tolerance of the symmetry check.

    Raises
    ------
    ValueError
        If a tolerance is negative or the seed is negative.
    """

    seed: int | None = None
    check_symmetry: bool = True
    symmetry_rtol: float = 1e-9
    symmetry_atol: float = 1e-12

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"Seed must be non-negative, got {self.seed}")
        if self.symmetry_rtol < 0 or self.symmetry_atol < 0:
            raise ValueError("Symmetry tolerances must be non-negative")


_active_config = SamplingConfig()


def get_config() -> SamplingConfig:
    """Return the active sampling configuration."""
    return _active_config


def _install(config: SamplingConfig, *, reseed: bool) -> SamplingConfig:
    global _active_config

    previous = _active_config
    _active_config = config
    logger.debug("Sampling configuration set to %r", config)

    if reseed:
        from pysatl_variates.rng import reset_default_random_source

        reset_default_random_source(config.seed)
    return previous


def set_config(config: SamplingConfig) -> SamplingConfig:
    """
    Replace the active sampling configuration.

    A config carrying a seed always restarts the default random source from
    that seed, even if the same seed was already active.

    Parameters
    ----------
    config : SamplingConfig
        New configuration.

    Returns
    -------
    SamplingConfig
        The previously active configuration.
    """
    reseed = config.seed is not None or _active_config.seed is not None
    return _install(config, reseed=reseed)


@contextmanager
def config_context(**overrides: Any) -> Iterator[SamplingConfig]:
    """
    Temporarily override fields of the active configuration.

    Examples
    --------
    >>> with config_context(check_symmetry=False):
    ...     ...
    """
    reseed = "seed" in overrides
    previous = _install(replace(_active_config, **overrides), reseed=reseed)
    try:
        yield _active_config
    finally:
        _install(previous, reseed=reseed)


def reset_config() -> None:
    """Restore the default configuration (test helper)."""
    set_config(SamplingConfig())


__all__ = [
    "SamplingConfig",
    "get_config",
    "set_config",
    "config_context",
    "reset_config",
]
