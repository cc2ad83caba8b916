"""
Multivariate normal distribution family implementation.

Variates are produced by the reparameterization ``X = μ + L Z`` where ``L`` is
the lower Cholesky factor of the covariance ``Σ`` and ``Z`` is a vector of
independent standard normal draws taken from the Normal family.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_variates.config import get_config
from pysatl_variates.errors import DimensionMismatchError
from pysatl_variates.families.builtins.continuous.normal import configure_normal_family
from pysatl_variates.families.parametric_family import ParametricFamily
from pysatl_variates.families.parametrizations import Parametrization, parametrization
from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.linalg import (
    cholesky_lower_inplace,
    lower_triangular_matvec_inplace,
    lower_triangular_solve_inplace,
    validate_mean_covariance,
    working_copy,
)
from pysatl_variates.types import (
    CharacteristicName,
    FamilyName,
    MultivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    import numpy.typing as npt

    from pysatl_variates.families.distribution import ParametricFamilyDistribution
    from pysatl_variates.rng import RandomSource
    from pysatl_variates.types import FloatArray

logger = logging.getLogger(__name__)

_LOG_2PI = math.log(2 * math.pi)


def _factorize(cov: FloatArray) -> FloatArray:
    """Lower Cholesky factor of a private copy of ``cov``."""
    work = working_copy(cov)
    logger.debug("Factorizing %dx%d covariance", *work.shape)
    return cholesky_lower_inplace(work)


def _correlated_draw(
    mean: FloatArray,
    factor: FloatArray,
    standard: ParametricFamilyDistribution,
    source: RandomSource,
) -> FloatArray:
    """One variate ``mean + factor @ z`` built in a fresh vector."""
    result = lower_triangular_matvec_inplace(factor, standard.sample(mean.shape[0], rng=source))
    result += mean
    return result


def configure_multivariate_normal_family() -> None:
    """
    Configure and register the MultivariateNormal distribution family.

    Registers the Normal family first: standard normal draws are taken from it.
    """

    if ParametricFamilyRegister.contains(FamilyName.MULTIVARIATE_NORMAL):
        return

    configure_normal_family()

    MULTIVARIATE_NORMAL_DOC = """
    Multivariate normal (Gaussian) distribution.

    Continuous distribution on R^n defined by a mean vector μ and a symmetric
    positive-definite covariance matrix Σ.

    Probability density function:
        f(x) = (2π)^(-n/2) |Σ|^(-1/2) * exp(-(x-μ)ᵀ Σ⁻¹ (x-μ) / 2)
    """

    def logpdf(parameters: Parametrization, x: npt.ArrayLike) -> Any:
        """
        Log-density of the multivariate normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mean: FloatArray (n,)
            - cov: FloatArray (n, n)
        x : ArrayLike
            A point of shape (n,) or a batch of points of shape (m, n)

        Returns
        -------
        float or FloatArray
            Log-density at the point, or an array of m values

        Raises
        ------
        DimensionMismatchError
            If the points do not have n coordinates.
        NonPositiveDefiniteCovarianceError
            If the covariance cannot be factorized.
        """
        parameters = cast(_MeanCov, parameters)

        points = np.asarray(x, dtype=np.float64)
        single = np.ndim(x) <= 1
        points = np.atleast_2d(points)
        dimension = parameters.mean.shape[0]
        if points.ndim != 2 or points.shape[1] != dimension:
            raise DimensionMismatchError(
                f"Expected points with {dimension} coordinates, got shape {np.shape(x)}"
            )

        factor = _factorize(parameters.cov)
        log_det = 2.0 * float(np.sum(np.log(np.diag(factor))))

        values = np.empty(points.shape[0], dtype=np.float64)
        for i, point in enumerate(points):
            residual = point - parameters.mean
            lower_triangular_solve_inplace(factor, residual)
            values[i] = -0.5 * (dimension * _LOG_2PI + log_det + float(residual @ residual))

        return float(values[0]) if single else values

    def pdf(parameters: Parametrization, x: npt.ArrayLike) -> Any:
        """Density of the multivariate normal distribution (see ``logpdf``)."""
        values = logpdf(parameters, x)
        return np.exp(values) if isinstance(values, np.ndarray) else math.exp(values)

    def mean_func(parameters: Parametrization, _: Any) -> FloatArray:
        parameters = cast(_MeanCov, parameters)
        return parameters.mean.copy()

    def var_func(parameters: Parametrization, _: Any) -> FloatArray:
        """Marginal variances (the covariance diagonal)."""
        parameters = cast(_MeanCov, parameters)
        return np.diag(parameters.cov).copy()

    def sampler(parameters: Parametrization, n: int | None, source: RandomSource) -> FloatArray:
        """
        Draw one vector of shape (d,), or ``n`` vectors as an array (n, d).

        The covariance is factorized once per call on a private copy; each
        vector uses its own independent standard normal draws.
        """
        parameters = cast(_MeanCov, parameters)

        factor = _factorize(parameters.cov)
        standard = ParametricFamilyRegister.get(FamilyName.NORMAL).distribution(mu=0.0, sigma=1.0)

        if n is None:
            return _correlated_draw(parameters.mean, factor, standard, source)

        out = np.empty((n, parameters.mean.shape[0]), dtype=np.float64)
        for i in range(n):
            out[i] = _correlated_draw(parameters.mean, factor, standard, source)
        return out

    MultivariateNormal = ParametricFamily(
        name=FamilyName.MULTIVARIATE_NORMAL,
        distr_type=lambda params: MultivariateContinuous(
            cast(_MeanCov, params).mean.shape[0]
        ),
        distr_parametrizations=["meanCov"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SAMPLER: sampler,
        },
    )
    MultivariateNormal.__doc__ = MULTIVARIATE_NORMAL_DOC

    @parametrization(family=MultivariateNormal, name="meanCov")
    @dataclass(slots=True, frozen=True, eq=False)
    class _MeanCov(Parametrization):
        """
        Mean-covariance parametrization of multivariate normal distribution.

        Parameters
        ----------
        mean : FloatArray
            Mean vector μ of shape (n,)
        cov : FloatArray
            Covariance matrix Σ of shape (n, n)

        Notes
        -----
        Both arrays are copied into read-only float64 storage, so later changes
        to the caller's arrays do not affect the distribution.
        """

        mean: FloatArray
        cov: FloatArray

        def __post_init__(self) -> None:
            for name in ("mean", "cov"):
                arr = np.array(getattr(self, name), dtype=np.float64, copy=True)
                arr.setflags(write=False)
                object.__setattr__(self, name, arr)

        def validate(self) -> None:
            """
            Check shapes and symmetry.

            Raises
            ------
            DimensionMismatchError
                If the mean is not a vector matching the square covariance.
            AsymmetricCovarianceError
                If symmetry checking is enabled and the covariance is not
                symmetric.
            """
            config = get_config()
            validate_mean_covariance(
                self.mean,
                self.cov,
                check_symmetry=config.check_symmetry,
                rtol=config.symmetry_rtol,
                atol=config.symmetry_atol,
            )

    ParametricFamilyRegister.register(MultivariateNormal)
