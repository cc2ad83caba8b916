"""
Tests for Multivariate Normal Distribution Family

This module tests correlated sampling through the Cholesky factor, covariance
validation and the log-density.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import multivariate_normal, norm

from pysatl_variates.config import config_context
from pysatl_variates.errors import (
    AsymmetricCovarianceError,
    DimensionMismatchError,
    NonPositiveDefiniteCovarianceError,
)
from pysatl_variates.families.configuration import configure_families_register
from pysatl_variates.rng import RandomSource
from pysatl_variates.types import FamilyName, Kind

from ..base import BaseDistributionTest


class TestMultivariateNormalFamily(BaseDistributionTest):
    """Test suite for MultivariateNormal distribution family."""

    MEAN = np.array([1.0, -2.0, 0.5])
    COV = np.array(
        [
            [4.0, 1.2, 0.4],
            [1.2, 2.0, -0.3],
            [0.4, -0.3, 1.0],
        ]
    )

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.mvn_family = registry.get(FamilyName.MULTIVARIATE_NORMAL)
        self.mvn_dist_example = self.mvn_family(mean=self.MEAN, cov=self.COV)

    def test_distribution_type_has_mean_dimension(self):
        distribution_type = self.mvn_dist_example.distribution_type
        assert distribution_type.kind == Kind.CONTINUOUS
        assert distribution_type.dimension == 3
        assert not distribution_type.is_univariate

    def test_single_sample_is_vector(self, rng: RandomSource):
        draw = self.mvn_dist_example.sample(rng=rng)
        assert draw.shape == (3,)

    @pytest.mark.parametrize("n", [0, 1, 7])
    def test_batch_shape(self, n: int, rng: RandomSource):
        assert self.mvn_dist_example.sample(n, rng=rng).shape == (n, 3)

    def test_identity_covariance_moments(self, rng: RandomSource):
        draws = self.mvn_family.sample(
            n=self.MONTE_CARLO_SIZE, mean=np.zeros(2), cov=np.eye(2), rng=rng
        )

        np.testing.assert_allclose(draws.mean(axis=0), np.zeros(2), atol=0.05)
        np.testing.assert_allclose(np.cov(draws, rowvar=False), np.eye(2), atol=0.05)

    def test_correlated_covariance_moments(self, rng: RandomSource):
        draws = self.mvn_dist_example.sample(self.MONTE_CARLO_SIZE, rng=rng)

        np.testing.assert_allclose(draws.mean(axis=0), self.MEAN, atol=0.1)
        np.testing.assert_allclose(np.cov(draws, rowvar=False), self.COV, atol=0.15)

    def test_one_dimensional_matches_normal_family(self):
        a = self.mvn_family.sample(
            n=5, mean=np.array([1.0]), cov=np.array([[4.0]]), rng=RandomSource(11)
        )
        b = configure_families_register().get(FamilyName.NORMAL).sample(
            n=5, mu=0.0, sigma=1.0, rng=RandomSource(11)
        )
        np.testing.assert_allclose(a[:, 0], 1.0 + 2.0 * b)

    def test_negative_diagonal_is_not_positive_definite(self, rng: RandomSource):
        with pytest.raises(NonPositiveDefiniteCovarianceError) as excinfo:
            self.mvn_family.sample(mean=np.zeros(2), cov=np.diag([1.0, -1.0]), rng=rng)
        assert excinfo.value.pivot == 1

    def test_singular_covariance_is_not_positive_definite(self, rng: RandomSource):
        with pytest.raises(NonPositiveDefiniteCovarianceError):
            self.mvn_family.sample(mean=np.zeros(2), cov=np.ones((2, 2)), rng=rng)

    @pytest.mark.parametrize(
        "mean, cov",
        [
            (np.zeros(3), np.eye(2)),
            (np.zeros((2, 2)), np.eye(2)),
            (np.zeros(2), np.zeros((2, 3))),
            (np.zeros(0), np.zeros((0, 0))),
        ],
    )
    def test_dimension_mismatch(self, mean, cov):
        with pytest.raises(DimensionMismatchError):
            self.mvn_family(mean=mean, cov=cov)

    def test_asymmetric_covariance_is_rejected(self):
        cov = np.array([[2.0, 0.5], [0.0, 1.0]])
        with pytest.raises(AsymmetricCovarianceError):
            self.mvn_family(mean=np.zeros(2), cov=cov)

    def test_asymmetric_covariance_accepted_without_symmetry_check(self, rng: RandomSource):
        cov = np.array([[2.0, 0.5], [0.0, 1.0]])
        with config_context(check_symmetry=False):
            draw = self.mvn_family.sample(mean=np.zeros(2), cov=cov, rng=rng)
        assert draw.shape == (2,)

    def test_inputs_are_not_mutated(self, rng: RandomSource):
        mean = self.MEAN.copy()
        cov = self.COV.copy()

        first = self.mvn_family.sample(mean=mean, cov=cov, rng=RandomSource(5))
        second = self.mvn_family.sample(mean=mean, cov=cov, rng=RandomSource(5))

        np.testing.assert_array_equal(mean, self.MEAN)
        np.testing.assert_array_equal(cov, self.COV)
        np.testing.assert_array_equal(first, second)

    def test_parameters_are_read_only_copies(self):
        cov = self.COV.copy()
        dist = self.mvn_family(mean=self.MEAN, cov=cov)
        cov[0, 0] = 100.0

        assert dist.parameters.cov[0, 0] == 4.0
        assert not dist.parameters.cov.flags.writeable

    def test_logpdf_matches_scipy(self):
        points = np.array([[1.0, -2.0, 0.5], [0.0, 0.0, 0.0], [3.0, -1.0, 2.0]])
        expected = multivariate_normal(mean=self.MEAN, cov=self.COV).logpdf(points)

        self.assert_arrays_almost_equal(self.mvn_dist_example.logpdf(points), expected)

    def test_pdf_of_single_point_is_float(self):
        value = self.mvn_dist_example.pdf(self.MEAN)
        expected = multivariate_normal(mean=self.MEAN, cov=self.COV).pdf(self.MEAN)

        assert isinstance(value, float)
        assert value == pytest.approx(expected)

    def test_scalar_point_on_one_dimensional_distribution(self):
        dist = self.mvn_family(mean=np.array([1.0]), cov=np.array([[4.0]]))

        value = dist.pdf(0.5)
        assert isinstance(value, float)
        assert value == pytest.approx(norm.pdf(0.5, loc=1.0, scale=2.0))
        assert isinstance(dist.logpdf(np.array([0.5])), float)

    def test_logpdf_wrong_point_dimension(self):
        with pytest.raises(DimensionMismatchError):
            self.mvn_dist_example.logpdf(np.zeros(2))

    def test_moments(self):
        np.testing.assert_array_equal(self.mvn_dist_example.mean, self.MEAN)
        np.testing.assert_array_equal(self.mvn_dist_example.var, np.diag(self.COV))

    def test_seeded_sampling_is_reproducible(self):
        a = self.mvn_dist_example.sample(4, rng=7)
        b = self.mvn_dist_example.sample(4, rng=7)
        np.testing.assert_array_equal(a, b)
