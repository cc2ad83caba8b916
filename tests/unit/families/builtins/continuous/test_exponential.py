"""
Tests for Exponential Distribution Family

This module tests the functionality of the exponential distribution family,
including parameterizations, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import expon

from pysatl_variates.families.configuration import configure_families_register
from pysatl_variates.rng import RandomSource
from pysatl_variates.types import CharacteristicName, FamilyName

from ..base import BaseDistributionTest


class TestExponentialFamily(BaseDistributionTest):
    """Test suite for Exponential distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.exponential_family = registry.get(FamilyName.EXPONENTIAL)
        self.exponential_dist_example = self.exponential_family(mu=2.0)

    def test_family_properties(self):
        assert self.exponential_family.name == FamilyName.EXPONENTIAL
        assert set(self.exponential_family.parametrization_names) == {"mean", "rate"}
        assert self.exponential_family.base_parametrization_name == "mean"

    def test_parametrization_constraints(self):
        with pytest.raises(ValueError, match="mu > 0"):
            self.exponential_family(mu=-1.0)
        with pytest.raises(ValueError, match="lambda_ > 0"):
            self.exponential_family(parametrization_name="rate", lambda_=0.0)

    @pytest.mark.parametrize(
        "parametrization_name, params, expected_mu",
        [
            ("mean", {"mu": 2.0}, 2.0),
            ("rate", {"lambda_": 0.5}, 2.0),
        ],
    )
    def test_parametrization_conversions(self, parametrization_name, params, expected_mu):
        base_params = self.exponential_family.to_base(
            self.exponential_family.get_parametrization(parametrization_name)(**params)
        )
        assert abs(base_params.parameters["mu"] - expected_mu) < self.CALCULATION_PRECISION

    def test_moments(self):
        assert self.exponential_dist_example.mean == pytest.approx(2.0)
        assert self.exponential_dist_example.var == pytest.approx(4.0)

    @pytest.mark.parametrize(
        "char_name, scipy_func",
        [
            (CharacteristicName.PDF, expon.pdf),
            (CharacteristicName.CDF, expon.cdf),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, scipy_func):
        x = np.array([-1.0, 0.0, 1.0, 2.0, 3.0, 4.0])
        result = self.exponential_dist_example.calculate_characteristic(char_name, x)

        assert result.shape == x.shape
        self.assert_arrays_almost_equal(result, scipy_func(x, scale=2.0))

    def test_pdf_for_rate_parametrization(self):
        value = self.exponential_family.pdf(1.0, parametrization_name="rate", lambda_=0.5)
        assert value == pytest.approx(expon.pdf(1.0, scale=2.0))

    def test_samples_are_non_negative(self, rng: RandomSource):
        draws = self.exponential_family.sample(n=1000, mu=0.5, rng=rng)
        assert draws.shape == (1000,)
        assert (draws >= 0).all()

    def test_sample_mean(self, rng: RandomSource):
        draws = self.exponential_dist_example.sample(self.MONTE_CARLO_SIZE, rng=rng)
        tol = self.standard_error_bound(2.0, self.MONTE_CARLO_SIZE)
        assert float(draws.mean()) == pytest.approx(2.0, abs=tol)
