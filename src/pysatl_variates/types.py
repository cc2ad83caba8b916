"""
Core Type Definitions
=====================

Fundamental types and data structures shared by the PySATL variates package.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeAlias

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """
    Base class for distribution type descriptors.

    Subclasses are expected to be dataclasses; their fields are exposed as
    features through :attr:`features`.
    """

    __slots__ = ()

    @property
    def features(self) -> Mapping[str, Any]:
        """Public dataclass fields of the descriptor."""
        fields = getattr(self, "__dataclass_fields__", None)
        if fields is None:
            return {}
        return {name: getattr(self, name) for name in fields}


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Spatial dimension (1 for univariate).
    """

    kind: Kind
    dimension: int

    @property
    def is_univariate(self) -> bool:
        return self.dimension == 1


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""


def MultivariateContinuous(dimension: int) -> EuclideanDistributionType:
    """Type for continuous distributions on ``R^dimension``."""
    return EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=dimension)


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

FloatArray = NDArray[np.float64]
"""Type alias for float64 arrays (vectors and matrices)."""

GenericCharacteristicName: TypeAlias = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

ParametrizationName: TypeAlias = str
"""Type alias for parametrization names."""


class CharacteristicName(StrEnum):
    """
    Enumeration of distribution characteristics known to the families.

    ``SAMPLER`` is not a mathematical characteristic: it names the variate
    generator ``(parameters, n, random_source) -> array`` of a family.
    """

    PDF = "pdf"
    PMF = "pmf"
    CDF = "cdf"
    LOGPDF = "logpdf"
    MEAN = "mean"
    VAR = "var"
    SAMPLER = "sampler"


class FamilyName(StrEnum):
    DISCRETE_UNIFORM = "DiscreteUniform"
    EXPONENTIAL = "Exponential"
    NORMAL = "Normal"
    POISSON = "Poisson"
    GAMMA = "Gamma"
    MULTIVARIATE_NORMAL = "MultivariateNormal"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "MultivariateContinuous",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "FloatArray",
    "GenericCharacteristicName",
    "ParametrizationName",
    "CharacteristicName",
    "FamilyName",
]
