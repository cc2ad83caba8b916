"""
Tests for Poisson Distribution Family

This module tests the functionality of the Poisson distribution family,
including characteristics and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import poisson

from pysatl_variates.families.configuration import configure_families_register
from pysatl_variates.rng import RandomSource
from pysatl_variates.types import CharacteristicName, FamilyName

from ..base import BaseDistributionTest


class TestPoissonFamily(BaseDistributionTest):
    """Test suite for Poisson distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.poisson_family = registry.get(FamilyName.POISSON)
        self.poisson_dist_example = self.poisson_family(mu=3.5)

    def test_negative_mean_is_rejected(self):
        with pytest.raises(ValueError, match="mu >= 0"):
            self.poisson_family(mu=-0.1)

    @pytest.mark.parametrize(
        "char_name, scipy_func",
        [
            (CharacteristicName.PMF, poisson.pmf),
            (CharacteristicName.CDF, poisson.cdf),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, scipy_func):
        k = np.array([-1, 0, 1, 2, 3, 5, 8, 20])
        result = self.poisson_dist_example.calculate_characteristic(char_name, k)

        assert result.shape == k.shape
        self.assert_arrays_almost_equal(result, scipy_func(k, 3.5))

    def test_pmf_of_non_integer_is_zero(self):
        assert self.poisson_dist_example.pmf(1.5) == 0.0

    def test_zero_mean_is_point_mass(self, rng: RandomSource):
        assert self.poisson_family.pmf(0, mu=0.0) == 1.0
        assert (self.poisson_family.sample(n=20, mu=0.0, rng=rng) == 0).all()

    def test_moments(self):
        assert self.poisson_dist_example.mean == 3.5
        assert self.poisson_dist_example.var == 3.5

    @pytest.mark.parametrize("n", [0, 1, 2, 100])
    def test_batch_returns_exactly_n(self, n: int, rng: RandomSource):
        """
        A batch of ``n`` has exactly ``n`` counts.

        Known deviation: the batch form used to loop over an inclusive range and
        return ``n + 1`` counts. That off-by-one is not preserved.
        """
        draws = self.poisson_family.sample(n=n, mu=2.0, rng=rng)
        assert len(draws) == n

    def test_single_sample_is_non_negative_int(self, rng: RandomSource):
        value = self.poisson_dist_example.sample(rng=rng)
        assert isinstance(value, int)
        assert value >= 0

    def test_sample_mean(self, rng: RandomSource):
        draws = self.poisson_dist_example.sample(self.MONTE_CARLO_SIZE, rng=rng)
        tol = self.standard_error_bound(np.sqrt(3.5), self.MONTE_CARLO_SIZE)
        assert float(draws.mean()) == pytest.approx(3.5, abs=tol)
