"""
Gamma distribution family implementation.

Contains the Gamma family with shape-scale and shape-rate parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammainc, gammaln, xlogy

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


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    Continuous distribution on [0, ∞) with shape k and scale θ
    (rate β = 1/θ). Its mean is k·θ and its variance k·θ².

    Probability density function:
        f(x) = β^k * x^(k-1) * exp(-β x) / Γ(k) for x ≥ 0
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> Any:
        """
        Probability density function for gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape: float (k)
            - scale: float (θ)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x, zero for x < 0
        """
        parameters = cast(_ShapeScale, parameters)

        shape = parameters.shape
        rate = parameters.rate
        x = np.asarray(x, dtype=np.float64)
        xp = np.maximum(x, 0.0)
        with np.errstate(divide="ignore"):
            log_density = xlogy(shape - 1.0, xp) + shape * math.log(rate) - rate * xp - gammaln(shape)
        return as_output(np.where(x >= 0, np.exp(log_density), 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> Any:
        """Cumulative distribution function P(X ≤ x)."""
        parameters = cast(_ShapeScale, parameters)

        x = np.asarray(x, dtype=np.float64)
        return as_output(gammainc(parameters.shape, parameters.rate * np.maximum(x, 0.0)))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ShapeScale, parameters)
        return parameters.shape * parameters.scale

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_ShapeScale, parameters)
        return parameters.shape * parameters.scale**2

    def sampler(parameters: Parametrization, n: int | None, source: RandomSource) -> Any:
        """
        Draw gamma variates.

        The rate is derived from the scale first; numpy's primitive takes
        a scale, so it receives ``1 / rate``. A batch is a single numpy draw of
        size ``n``, equal in distribution to ``n`` independent single draws.
        """
        parameters = cast(_ShapeScale, parameters)
        rate = parameters.rate
        return single_or_batch(source.gamma(parameters.shape, 1.0 / rate, size=n), n)

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeScale", "shapeRate"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SAMPLER: sampler,
        },
    )
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k
        scale : float
            Scale parameter θ
        """

        shape: float
        scale: float

        @property
        def rate(self) -> float:
            """Rate parameter β = 1/θ."""
            return 1.0 / self.scale

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter k
        rate : float
            Rate parameter β
        """

        shape: float
        rate: float

        @constraint(description="shape > 0")
        def check_shape_positive(self) -> bool:
            return self.shape > 0

        @constraint(description="rate > 0")
        def check_rate_positive(self) -> bool:
            return self.rate > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _ShapeScale(shape=self.shape, scale=1.0 / self.rate)

    ParametricFamilyRegister.register(Gamma)
