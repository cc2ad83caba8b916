"""
Built-in multivariate distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_variates.families.builtins.multivariate.normal import (
    configure_multivariate_normal_family,
)

__all__ = [
    "configure_multivariate_normal_family",
]
