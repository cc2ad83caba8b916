"""
Dense Linear Algebra Kernels
============================

Small in-place kernels used by the multivariate normal family:

- :func:`cholesky_lower_inplace`: lower Cholesky factorization overwriting
  its argument.
- :func:`lower_triangular_matvec_inplace`: ``x <- L @ x`` for a lower
  triangular ``L`` (no transpose, non-unit diagonal).
- :func:`lower_triangular_solve_inplace`: ``x <- L^{-1} @ x``.
- :func:`validate_mean_covariance`: shape and symmetry checks.

Notes
-----
All kernels work on float64 numpy arrays and call LAPACK (``dpotrf``) and BLAS
(``dtrmv``) through :mod:`scipy.linalg`. Row-major matrices are handed over
transposed, so no second matrix is allocated.
Callers that must keep their matrix intact pass a copy (see
:func:`working_copy`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np
from scipy.linalg import blas, lapack, solve_triangular

from pysatl_variates.errors import (
    AsymmetricCovarianceError,
    DimensionMismatchError,
    NonPositiveDefiniteCovarianceError,
)

if TYPE_CHECKING:
    import numpy.typing as npt

    from pysatl_variates.types import FloatArray


def working_copy(matrix: npt.ArrayLike) -> FloatArray:
    """Return a private, writable float64 copy of ``matrix``."""
    return np.array(matrix, dtype=np.float64, copy=True)


def _fortran_view(a: FloatArray) -> tuple[FloatArray, bool]:
    """
    Column-major view of ``a`` for LAPACK/BLAS.

    A C-ordered matrix is passed as its transpose, so the routine must be told
    to use the opposite triangle. The flag is ``True`` in that case.
    """
    if a.flags.f_contiguous:
        return a, False
    return a.T, True


def cholesky_lower_inplace(a: FloatArray) -> FloatArray:
    """
    Overwrite ``a`` with its lower Cholesky factor ``L`` (``L @ L.T == a``).

    Only the lower triangle of ``a`` is read; the strict upper triangle is
    zeroed on success.

    Parameters
    ----------
    a : FloatArray
        Square symmetric positive-definite matrix, modified in place.

    Returns
    -------
    FloatArray
        ``a`` itself, now holding ``L``.

    Raises
    ------
    NonPositiveDefiniteCovarianceError
        If a pivot is not strictly positive (or not finite). ``a`` is left
        partially factorized.
    """
    target, transposed = _fortran_view(a)
    # The lower triangle of ``a`` is the upper triangle of its transpose
    factor, info = lapack.dpotrf(target, lower=0 if transposed else 1, clean=1, overwrite_a=1)
    if factor is not target:
        target[...] = factor
    if info < 0:
        raise ValueError(f"dpotrf: argument {-info} has an illegal value")
    if info > 0:
        pivot = info - 1
        raise NonPositiveDefiniteCovarianceError(
            f"Matrix is not positive definite: pivot {pivot} is not positive", pivot=pivot
        )
    bad = np.flatnonzero(~np.isfinite(np.diag(a)))
    if bad.size:
        pivot = int(bad[0])
        raise NonPositiveDefiniteCovarianceError(
            f"Matrix is not positive definite: pivot {pivot} is not finite", pivot=pivot
        )
    return a


def lower_triangular_matvec_inplace(lower: FloatArray, x: FloatArray) -> FloatArray:
    """Overwrite ``x`` with ``lower @ x`` using only the lower triangle of ``lower``."""
    matrix, transposed = _fortran_view(lower)
    if transposed:
        result = blas.dtrmv(matrix, x, lower=0, trans=1, diag=0, overwrite_x=1)
    else:
        result = blas.dtrmv(matrix, x, lower=1, trans=0, diag=0, overwrite_x=1)
    if result is not x:
        x[...] = result
    return x


def lower_triangular_solve_inplace(lower: FloatArray, x: FloatArray) -> FloatArray:
    """Overwrite ``x`` with the solution ``y`` of ``lower @ y == x``."""
    x[...] = solve_triangular(lower, x, lower=True, overwrite_b=True, check_finite=False)
    return x


def validate_mean_covariance(
    mean: FloatArray,
    cov: FloatArray,
    *,
    check_symmetry: bool = True,
    rtol: float = 1e-9,
    atol: float = 1e-12,
) -> int:
    """
    Check that ``mean`` and ``cov`` describe an ``n``-dimensional Gaussian.

    Returns
    -------
    int
        The dimension ``n``.

    Raises
    ------
    DimensionMismatchError
        If ``mean`` is not a non-empty vector, ``cov`` is not square, or their
        sizes differ.
    AsymmetricCovarianceError
        If ``check_symmetry`` is set and ``cov`` differs from its transpose.
    """
    if mean.ndim != 1 or mean.shape[0] == 0:
        raise DimensionMismatchError(f"Mean must be a non-empty vector, got shape {mean.shape}")
    if cov.ndim != 2 or cov.shape[0] != cov.shape[1]:
        raise DimensionMismatchError(f"Covariance must be a square matrix, got shape {cov.shape}")
    n = mean.shape[0]
    if cov.shape[0] != n:
        raise DimensionMismatchError(
            f"Mean has dimension {n} but covariance is {cov.shape[0]}x{cov.shape[1]}"
        )
    if check_symmetry and not np.allclose(cov, cov.T, rtol=rtol, atol=atol):
        raise AsymmetricCovarianceError("Covariance matrix is not symmetric")
    return n


__all__ = [
    "working_copy",
    "cholesky_lower_inplace",
    "lower_triangular_matvec_inplace",
    "lower_triangular_solve_inplace",
    "validate_mean_covariance",
]
