"""
Tests for the in-place dense linear algebra kernels.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_variates.errors import (
    AsymmetricCovarianceError,
    DimensionMismatchError,
    NonPositiveDefiniteCovarianceError,
)
from pysatl_variates.linalg import (
    cholesky_lower_inplace,
    lower_triangular_matvec_inplace,
    lower_triangular_solve_inplace,
    validate_mean_covariance,
    working_copy,
)

SPD = np.array(
    [
        [4.0, 2.0, 0.6],
        [2.0, 2.0, 0.5],
        [0.6, 0.5, 3.0],
    ]
)


class TestCholesky:
    def test_reconstructs_matrix(self) -> None:
        factor = cholesky_lower_inplace(working_copy(SPD))
        np.testing.assert_allclose(factor @ factor.T, SPD, atol=1e-12)

    def test_matches_numpy(self) -> None:
        factor = cholesky_lower_inplace(working_copy(SPD))
        np.testing.assert_allclose(factor, np.linalg.cholesky(SPD), atol=1e-12)

    def test_is_lower_triangular_and_in_place(self) -> None:
        work = working_copy(SPD)
        factor = cholesky_lower_inplace(work)
        assert factor is work
        np.testing.assert_array_equal(np.triu(factor, k=1), np.zeros_like(SPD))

    def test_column_major_input_in_place(self) -> None:
        work = np.asfortranarray(SPD)
        factor = cholesky_lower_inplace(work)
        assert factor is work
        np.testing.assert_allclose(work, np.linalg.cholesky(SPD), atol=1e-12)

    def test_reads_only_lower_triangle(self) -> None:
        work = np.tril(SPD) + np.triu(np.full_like(SPD, 50.0), k=1)
        np.testing.assert_allclose(
            cholesky_lower_inplace(work), np.linalg.cholesky(SPD), atol=1e-12
        )

    def test_working_copy_leaves_original(self) -> None:
        original = SPD.copy()
        cholesky_lower_inplace(working_copy(original))
        np.testing.assert_array_equal(original, SPD)

    def test_one_by_one(self) -> None:
        factor = cholesky_lower_inplace(np.array([[9.0]]))
        assert factor[0, 0] == pytest.approx(3.0)

    def test_negative_diagonal(self) -> None:
        with pytest.raises(NonPositiveDefiniteCovarianceError) as exc_info:
            cholesky_lower_inplace(np.array([[1.0, 0.0], [0.0, -1.0]]))
        assert exc_info.value.pivot == 1

    def test_singular_matrix(self) -> None:
        with pytest.raises(NonPositiveDefiniteCovarianceError):
            cholesky_lower_inplace(np.array([[1.0, 1.0], [1.0, 1.0]]))

    def test_indefinite_matrix(self) -> None:
        with pytest.raises(NonPositiveDefiniteCovarianceError):
            cholesky_lower_inplace(np.array([[1.0, 2.0], [2.0, 1.0]]))

    def test_failing_pivot_index_is_reported(self) -> None:
        cov = SPD.copy()
        cov[2, 2] = -1.0
        with pytest.raises(NonPositiveDefiniteCovarianceError) as exc_info:
            cholesky_lower_inplace(cov)
        assert exc_info.value.pivot == 2

    def test_nan_pivot(self) -> None:
        with pytest.raises(NonPositiveDefiniteCovarianceError) as exc_info:
            cholesky_lower_inplace(np.array([[np.nan]]))
        assert exc_info.value.pivot == 0


class TestTriangularKernels:
    def test_matvec_matches_dense_product(self) -> None:
        factor = np.linalg.cholesky(SPD)
        x = np.array([0.3, -1.2, 2.0])
        expected = factor @ x
        result = lower_triangular_matvec_inplace(factor, x)
        assert result is x
        np.testing.assert_allclose(x, expected)

    def test_matvec_ignores_upper_triangle(self) -> None:
        lower = np.array([[2.0, 99.0], [1.0, 3.0]])
        x = np.array([1.0, 1.0])
        np.testing.assert_allclose(lower_triangular_matvec_inplace(lower, x), [2.0, 4.0])

    def test_matvec_column_major_factor(self) -> None:
        factor = np.asfortranarray(np.linalg.cholesky(SPD))
        x = np.array([0.3, -1.2, 2.0])
        expected = factor @ x
        assert lower_triangular_matvec_inplace(factor, x) is x
        np.testing.assert_allclose(x, expected)

    def test_solve_inverts_matvec(self) -> None:
        factor = np.linalg.cholesky(SPD)
        x = np.array([1.0, 2.0, 3.0])
        y = lower_triangular_matvec_inplace(factor, x.copy())
        np.testing.assert_allclose(lower_triangular_solve_inplace(factor, y), x)


class TestValidateMeanCovariance:
    def test_returns_dimension(self) -> None:
        assert validate_mean_covariance(np.zeros(3), SPD) == 3

    @pytest.mark.parametrize(
        "mean, cov",
        [
            (np.zeros(2), SPD),
            (np.zeros((3, 1)), SPD),
            (np.zeros(0), np.zeros((0, 0))),
            (np.zeros(3), np.zeros((3, 2))),
            (np.zeros(3), np.zeros(3)),
        ],
    )
    def test_dimension_mismatch(self, mean: np.ndarray, cov: np.ndarray) -> None:
        with pytest.raises(DimensionMismatchError):
            validate_mean_covariance(mean, cov)

    def test_asymmetric(self) -> None:
        cov = np.array([[1.0, 0.5], [0.0, 1.0]])
        with pytest.raises(AsymmetricCovarianceError):
            validate_mean_covariance(np.zeros(2), cov)
        assert issubclass(AsymmetricCovarianceError, NonPositiveDefiniteCovarianceError)

    def test_asymmetric_allowed_when_disabled(self) -> None:
        cov = np.array([[1.0, 0.5], [0.0, 1.0]])
        assert validate_mean_covariance(np.zeros(2), cov, check_symmetry=False) == 2
