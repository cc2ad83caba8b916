"""
Built-in continuous distribution families.

This module contains implementations of univariate continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.continuous.exponential import configure_exponential_family
from pysatl_variates.families.builtins.continuous.gamma import configure_gamma_family
from pysatl_variates.families.builtins.continuous.normal import configure_normal_family

__all__ = [
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_normal_family",
]
