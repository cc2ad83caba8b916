"""
Exponential distribution family implementation.

Contains the Exponential family with mean and rate parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

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


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    Describes the waiting time between events of a Poisson process. The base
    parametrization uses the mean μ (the scale, 1/λ); the rate λ is accepted
    through the "rate" parametrization.

    Probability density function:
        f(x) = (1/μ) * exp(-x/μ) for x ≥ 0
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> Any:
        """
        Probability density function for exponential distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x, zero for x < 0
        """
        parameters = cast(_Mean, parameters)

        mu = parameters.mu
        x = np.asarray(x, dtype=np.float64)
        return as_output(np.where(x >= 0, np.exp(-np.maximum(x, 0.0) / mu) / mu, 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> Any:
        """Cumulative distribution function P(X ≤ x)."""
        parameters = cast(_Mean, parameters)

        x = np.asarray(x, dtype=np.float64)
        return as_output(np.where(x >= 0, -np.expm1(-np.maximum(x, 0.0) / parameters.mu), 0.0))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Mean, parameters)
        return parameters.mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Mean, parameters)
        return parameters.mu**2

    def sampler(parameters: Parametrization, n: int | None, source: RandomSource) -> Any:
        """Exponential variates; a batch is one numpy draw of size ``n``."""
        parameters = cast(_Mean, parameters)
        return single_or_batch(source.exponential(parameters.mu, size=n), n)

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["mean", "rate"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SAMPLER: sampler,
        },
    )
    Exponential.__doc__ = EXPONENTIAL_DOC

    @parametrization(family=Exponential, name="mean")
    class _Mean(Parametrization):
        """
        Mean (scale) parametrization of exponential distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution (μ = 1/λ)
        """

        mu: float

        @constraint(description="mu > 0")
        def check_mu_positive(self) -> bool:
            """Check that mean parameter is positive."""
            return self.mu > 0

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of exponential distribution.

        Parameters
        ----------
        lambda_ : float
            Rate parameter (λ = 1/μ)
        """

        lambda_: float

        @constraint(description="lambda_ > 0")
        def check_lambda_positive(self) -> bool:
            return self.lambda_ > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Mean(mu=1.0 / self.lambda_)

    ParametricFamilyRegister.register(Exponential)
