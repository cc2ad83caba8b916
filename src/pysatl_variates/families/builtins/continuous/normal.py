"""
Normal distribution family implementation.

Contains the Normal family with mean-std and mean-precision parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import ndtr

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
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_variates.rng import RandomSource
    from pysatl_variates.types import NumericArray


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    Continuous distribution defined by its mean (μ) and standard
    deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> Any:
        """Gaussian density evaluated elementwise; scalars give a ``float``."""
        parameters = cast(_MeanStd, parameters)

        sigma = parameters.sigma
        z = (np.asarray(x, dtype=np.float64) - parameters.mu) / sigma
        return as_output(np.exp(-0.5 * z**2) / (sigma * math.sqrt(2 * math.pi)))

    def cdf(parameters: Parametrization, x: NumericArray) -> Any:
        """Cumulative distribution function P(X ≤ x)."""
        parameters = cast(_MeanStd, parameters)
        return as_output(ndtr((np.asarray(x, dtype=np.float64) - parameters.mu) / parameters.sigma))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_MeanStd, parameters)
        return parameters.mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_MeanStd, parameters)
        return parameters.sigma**2

    def sampler(parameters: Parametrization, n: int | None, source: RandomSource) -> Any:
        """
        Draw ``n`` variates (or one, if ``n`` is None) as ``mu + sigma * Z``.

        A batch is a single numpy draw of size ``n``, equal in distribution to
        ``n`` independent single draws.
        """
        parameters = cast(_MeanStd, parameters)
        return single_or_batch(source.normal(parameters.mu, parameters.sigma, size=n), n)

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanPrec"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SAMPLER: sampler,
        },
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        sigma : float
            Standard deviation of the distribution
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        tau : float
            Precision parameter (inverse variance)
        """

        mu: float
        tau: float

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _MeanStd(mu=self.mu, sigma=math.sqrt(1 / self.tau))

    ParametricFamilyRegister.register(Normal)
