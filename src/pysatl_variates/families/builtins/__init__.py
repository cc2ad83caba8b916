"""
Built-in distribution families for PySATL variates.

This package contains implementations of standard statistical distribution families
that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.continuous import (
    configure_exponential_family,
    configure_gamma_family,
    configure_normal_family,
)
from pysatl_variates.families.builtins.discrete import (
    configure_discrete_uniform_family,
    configure_poisson_family,
)
from pysatl_variates.families.builtins.multivariate import configure_multivariate_normal_family

__all__ = [
    "configure_discrete_uniform_family",
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_multivariate_normal_family",
    "configure_normal_family",
    "configure_poisson_family",
]
