"""
Poisson distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln, pdtr, xlogy

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


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    Number of events in a fixed interval when events occur independently at a
    constant mean rate μ.

    Probability mass function:
        p(k) = μ^k * exp(-μ) / k! for k = 0, 1, 2, ...
    """

    def pmf(parameters: Parametrization, k: NumericArray) -> Any:
        """
        Probability mass function for Poisson distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
        k : NumericArray
            Counts at which to evaluate the mass function

        Returns
        -------
        NumericArray
            Probabilities P(X = k), zero for negative or non-integer k
        """
        parameters = cast(_Mean, parameters)

        mu = parameters.mu
        k = np.asarray(k, dtype=np.float64)
        valid = (k >= 0) & (k == np.floor(k))
        kk = np.where(valid, k, 0.0)
        log_mass = xlogy(kk, mu) - mu - gammaln(kk + 1.0)
        return as_output(np.where(valid, np.exp(log_mass), 0.0))

    def cdf(parameters: Parametrization, k: NumericArray) -> Any:
        parameters = cast(_Mean, parameters)

        k = np.asarray(k, dtype=np.float64)
        return as_output(
            np.where(k >= 0, pdtr(np.floor(np.maximum(k, 0.0)), parameters.mu), 0.0)
        )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Mean, parameters)
        return parameters.mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Mean, parameters)
        return parameters.mu

    def sampler(parameters: Parametrization, n: int | None, source: RandomSource) -> Any:
        """
        Draw exactly ``n`` counts (or a single ``int`` if ``n`` is None).

        A batch is a single numpy draw of size ``n``, equal in distribution to
        ``n`` independent single draws.
        """
        parameters = cast(_Mean, parameters)
        return single_or_batch(source.poisson(parameters.mu, size=n), n, scalar=int)

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["mean"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SAMPLER: sampler,
        },
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="mean")
    class _Mean(Parametrization):
        """
        Mean parametrization of Poisson distribution.

        Parameters
        ----------
        mu : float
            Expected number of events
        """

        mu: float

        @constraint(description="mu >= 0")
        def check_mu_non_negative(self) -> bool:
            return self.mu >= 0

    ParametricFamilyRegister.register(Poisson)
