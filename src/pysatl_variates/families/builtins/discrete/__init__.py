"""
Built-in discrete distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.discrete.poisson import configure_poisson_family
from pysatl_variates.families.builtins.discrete.uniform import configure_discrete_uniform_family

__all__ = [
    "configure_discrete_uniform_family",
    "configure_poisson_family",
]
