"""
Errors
======

Exception taxonomy of the variates package.

Every concrete error also derives from the builtin exception a caller would
expect for the same failure (``ValueError`` for bad arguments,
``ZeroDivisionError`` for degenerate reductions), so generic handlers keep
working.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class VariatesError(Exception):
    """Base class for all errors raised by :mod:`pysatl_variates`."""


class InvalidRangeError(VariatesError, ValueError):
    """Discrete uniform sampling requested with an upper bound below the lower one."""


class DimensionMismatchError(VariatesError, ValueError):
    """Mean vector and covariance matrix shapes are incompatible."""


class NonPositiveDefiniteCovarianceError(VariatesError, ValueError):
    """
    Covariance matrix is not symmetric positive-definite.

    Parameters
    ----------
    message : str
        Human-readable description.
    pivot : int or None, optional
        Index of the diagonal pivot at which the Cholesky factorization
        failed, when known.
    """

    def __init__(self, message: str, pivot: int | None = None) -> None:
        super().__init__(message)
        self.pivot = pivot


class AsymmetricCovarianceError(NonPositiveDefiniteCovarianceError):
    """Covariance matrix is not symmetric within the configured tolerance."""


class DegenerateNormalisationError(VariatesError, ZeroDivisionError):
    """Reduction over an empty sequence or normalisation by a zero sum."""


__all__ = [
    "VariatesError",
    "InvalidRangeError",
    "DimensionMismatchError",
    "NonPositiveDefiniteCovarianceError",
    "AsymmetricCovarianceError",
    "DegenerateNormalisationError",
]
