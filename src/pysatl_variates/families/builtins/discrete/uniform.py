"""
Discrete uniform distribution family implementation.

Contains the DiscreteUniform family over an inclusive integer range.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_variates.errors import InvalidRangeError
from pysatl_variates.families.builtins._utils import as_output, single_or_batch
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_variates.rng import RandomSource
    from pysatl_variates.types import NumericArray


def configure_discrete_uniform_family() -> None:
    """
    Configure and register the DiscreteUniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.DISCRETE_UNIFORM):
        return

    DISCRETE_UNIFORM_DOC = """
    Discrete uniform distribution.

    Every integer of the inclusive range [low, high] is equally likely.

    Probability mass function:
        p(k) = 1 / (high - low + 1) for integer k in [low, high]
    """

    def _count(parameters: _Range) -> int:
        return parameters.high - parameters.low + 1

    def pmf(parameters: Parametrization, k: NumericArray) -> Any:
        """
        Probability mass function for discrete uniform distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - low: int (smallest value)
            - high: int (largest value)
        k : NumericArray
            Points at which to evaluate the mass function

        Returns
        -------
        NumericArray
            1/(high - low + 1) at integers within the range, 0 elsewhere
        """
        parameters = cast(_Range, parameters)

        k = np.asarray(k, dtype=np.float64)
        inside = (k >= parameters.low) & (k <= parameters.high) & (k == np.floor(k))
        return as_output(np.where(inside, 1.0 / _count(parameters), 0.0))

    def cdf(parameters: Parametrization, k: NumericArray) -> Any:
        parameters = cast(_Range, parameters)

        k = np.asarray(k, dtype=np.float64)
        covered = np.floor(k) - parameters.low + 1
        return as_output(np.clip(covered / _count(parameters), 0.0, 1.0))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Range, parameters)
        return (parameters.low + parameters.high) / 2

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Range, parameters)
        return (_count(parameters) ** 2 - 1) / 12

    def sampler(parameters: Parametrization, n: int | None, source: RandomSource) -> Any:
        """Inclusive integer draws; a batch is one numpy draw of size ``n``."""
        parameters = cast(_Range, parameters)
        draws = source.integers(parameters.low, parameters.high, size=n)
        return single_or_batch(draws, n, scalar=int)

    DiscreteUniform = ParametricFamily(
        name=FamilyName.DISCRETE_UNIFORM,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["range"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SAMPLER: sampler,
        },
    )
    DiscreteUniform.__doc__ = DISCRETE_UNIFORM_DOC

    @parametrization(family=DiscreteUniform, name="range")
    class _Range(Parametrization):
        """
        Inclusive integer range.

        Parameters
        ----------
        low : int
            Smallest attainable value
        high : int
            Largest attainable value
        """

        low: int
        high: int

        @constraint(description="low and high are integers", error=TypeError)
        def check_integral(self) -> bool:
            return all(
                isinstance(v, (int, np.integer)) and not isinstance(v, bool)
                for v in (self.low, self.high)
            )

        @constraint(description="high >= low", error=InvalidRangeError)
        def check_range(self) -> bool:
            """Maximum cannot be smaller than minimum."""
            return self.high >= self.low

    ParametricFamilyRegister.register(DiscreteUniform)
