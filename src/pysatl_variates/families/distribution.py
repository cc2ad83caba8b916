"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_variates.families.registry import ParametricFamilyRegister
from pysatl_variates.rng import resolve_random_source
from pysatl_variates.types import CharacteristicName, Kind

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any

    from pysatl_variates.families.parametric_family import ParametricFamily
    from pysatl_variates.families.parametrizations import Parametrization
    from pysatl_variates.rng import RandomLike
    from pysatl_variates.types import (
        EuclideanDistributionType,
        GenericCharacteristicName,
    )


@dataclass(slots=True)
class ParametricFamilyDistribution:
    """
    A specific distribution instance from a parametric family.

    Binds parameter values once; repeated :meth:`sample` and :meth:`pdf`
    calls behave exactly like passing the same parameters to the family on
    every call.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    distribution_type : EuclideanDistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values for this distribution.
    """

    family_name: str
    distribution_type: EuclideanDistributionType
    parameters: Parametrization
    _computations: dict[GenericCharacteristicName, Callable[..., Any]] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def family(self) -> ParametricFamily:
        """The parametric family of this distribution."""
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        return self.parameters.name

    @property
    def computations(self) -> Mapping[GenericCharacteristicName, Callable[..., Any]]:
        """Characteristics bound to this distribution's parameters (built once)."""
        if self._computations is None:
            self._computations = self.family.build_computations(self.parameters)
        return self._computations

    def query_method(self, characteristic_name: GenericCharacteristicName) -> Callable[..., Any]:
        """
        Fetch the bound implementation of a characteristic.

        Raises
        ------
        RuntimeError
            If the family does not provide the characteristic.
        """
        try:
            return self.computations[characteristic_name]
        except KeyError:
            raise RuntimeError(
                f"Family {self.family_name} provides no '{characteristic_name}' characteristic."
            ) from None

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def pdf(self, x: Any) -> Any:
        """
        Density at ``x``.

        For discrete distributions this is the probability mass function.
        """
        if self.distribution_type.kind == Kind.DISCRETE:
            return self.calculate_characteristic(CharacteristicName.PMF, x)
        return self.calculate_characteristic(CharacteristicName.PDF, x)

    def pmf(self, k: Any) -> Any:
        return self.calculate_characteristic(CharacteristicName.PMF, k)

    def cdf(self, x: Any) -> Any:
        return self.calculate_characteristic(CharacteristicName.CDF, x)

    def logpdf(self, x: Any) -> Any:
        return self.calculate_characteristic(CharacteristicName.LOGPDF, x)

    @property
    def mean(self) -> Any:
        return self.calculate_characteristic(CharacteristicName.MEAN, None)

    @property
    def var(self) -> Any:
        return self.calculate_characteristic(CharacteristicName.VAR, None)

    def sample(self, n: int | None = None, *, rng: RandomLike = None) -> Any:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int, optional
            Number of samples to generate. If ``None``, a single variate is
            returned (a scalar, or a vector for multivariate families).
        rng : RandomSource | numpy.random.Generator | int | None, optional
            Source of randomness; defaults to the process-wide source.

        Returns
        -------
        Any
            A scalar/vector variate, or an array with ``n`` rows.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        """
        if n is not None and n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")
        sampler = self.query_method(CharacteristicName.SAMPLER)
        return sampler(n, resolve_random_source(rng))
