"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of the PySATL variates
package:

- ``DiscreteUniform``: integers of an inclusive range.
- ``Exponential``: mean and rate parameterizations.
- ``Normal``: mean-std and mean-precision parameterizations.
- ``Poisson``: mean parametrization.
- ``Gamma``: shape-scale and shape-rate parameterizations.
- ``MultivariateNormal``: mean vector and covariance matrix.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration is idempotent; :func:`reset_families_register` clears it.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache
from typing import TYPE_CHECKING

from pysatl_variates.families.builtins import (
    configure_discrete_uniform_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_multivariate_normal_family,
    configure_normal_family,
    configure_poisson_family,
)
from pysatl_variates.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from pysatl_variates.families.parametric_family import ParametricFamily


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all built-in families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_discrete_uniform_family()
    configure_exponential_family()
    configure_normal_family()
    configure_poisson_family()
    configure_gamma_family()
    configure_multivariate_normal_family()
    return ParametricFamilyRegister()


def get_family(name: str) -> ParametricFamily:
    """
    Fetch a built-in family by name, registering the built-ins on first use.

    Raises
    ------
    ValueError
        If no family with the given name exists.
    """
    return configure_families_register().get(name)


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
