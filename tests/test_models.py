"""
Unit tests for parametric yield, carry and volatility curves.
"""

import numpy as np
import pytest

from termcurves.conventions import EPS
from termcurves.curves import (
    discount_nelson_siegel,
    discount_svensson,
    discount_vasicek,
    shape1,
    shape2,
    yield_nelson_siegel,
    yield_svensson,
    yield_vasicek,
)
from termcurves.vol import (
    carry_black,
    volatility_black,
    volatility_from_variance,
    volatility_hull_white,
)
from termcurves.errors import InvalidParameterError, OutOfDomainError


class TestNelsonSiegel:
    """Tests for Nelson-Siegel curves."""

    def setup_method(self):
        self.t0 = 1.5
        self.curve = yield_nelson_siegel(0.02, 0.04, 0.06, 0.05, self.t0)

    def test_value_at_initial_time(self):
        """gamma(t0) = c0 + c1."""
        assert abs(self.curve(self.t0) - 0.06) < 1e-15

    def test_closed_form(self):
        t = 4.5
        x = 0.05 * (t - self.t0)
        expected = 0.02 + 0.04 * (1 - np.exp(-x)) / x + 0.06 * (1 - np.exp(-x) * (1 + x)) / x
        assert abs(self.curve(t) - expected) < 1e-14

    def test_increasing_over_first_five_years(self):
        """Hump dominates the short-term decay for these parameters."""
        times = np.linspace(self.t0, self.t0 + 5.0, 26)
        values = self.curve.evaluate(times)
        assert np.all(np.diff(values) > 0)

    def test_long_run_level(self):
        """gamma -> c0 as t -> inf."""
        assert abs(self.curve(self.t0 + 1e4) - 0.02) < 1e-3
        assert abs(self.curve(self.t0 + 1e8) - 0.02) < 1e-7

    def test_zero_mean_reversion(self):
        """lambda = 0 is a flat curve at c0 + c1."""
        curve = yield_nelson_siegel(0.02, 0.04, 0.06, 0.0, self.t0)
        assert abs(curve(self.t0 + 3.0) - 0.06) < 1e-15

    def test_discount_curve(self):
        discount = discount_nelson_siegel(0.02, 0.04, 0.06, 0.05, self.t0)
        t = 3.0
        assert discount(self.t0) == 1.0
        assert abs(discount(t) - np.exp(-self.curve(t) * (t - self.t0))) < 1e-15

    def test_before_initial_time_rejected(self):
        with pytest.raises(OutOfDomainError):
            self.curve(1.0)

    def test_negative_mean_reversion_rejected(self):
        with pytest.raises(InvalidParameterError):
            yield_nelson_siegel(0.02, 0.04, 0.06, -0.05, self.t0)

    def test_repr(self):
        assert "NelsonSiegelYield" in repr(self.curve)


class TestSvensson:
    """Tests for Svensson curves."""

    def test_reduces_to_nelson_siegel(self):
        """c3 = 0 gives the Nelson-Siegel curve."""
        t0 = 1.5
        ns = yield_nelson_siegel(0.02, 0.04, 0.06, 0.05, t0)
        sv = yield_svensson(0.02, 0.04, 0.06, 0.0, 0.05, 0.3, t0)

        for t in [1.5, 2.0, 4.0, 10.0]:
            assert abs(sv(t) - ns(t)) < 1e-15

    def test_second_hump(self):
        t0 = 0.0
        sv = yield_svensson(0.02, 0.04, 0.06, 0.01, 0.05, 0.3, t0)
        ns = yield_nelson_siegel(0.02, 0.04, 0.06, 0.05, t0)

        assert abs(sv(4.0) - ns(4.0) - 0.01 * shape2(1.2)) < 1e-15

    def test_equal_mean_reversions_rejected(self):
        with pytest.raises(InvalidParameterError):
            yield_svensson(0.02, 0.04, 0.06, 0.01, 0.1, 0.1, 0.0)

    def test_negative_mean_reversion_rejected(self):
        with pytest.raises(InvalidParameterError):
            yield_svensson(0.02, 0.04, 0.06, 0.01, 0.1, -0.1, 0.0)

    def test_discount_curve(self):
        discount = discount_svensson(0.02, 0.04, 0.06, 0.01, 0.05, 0.3, 0.0)
        assert discount(0.0) == 1.0
        assert 0 < discount(5.0) < 1


class TestVasicek:
    """Tests for Vasicek curves."""

    def setup_method(self):
        self.t0 = 0.5
        self.theta = 0.004
        self.lam = 0.1
        self.sigma = 0.01
        self.r0 = 0.03
        self.curve = yield_vasicek(self.theta, self.lam, self.sigma, self.r0, self.t0)

    def test_short_rate_at_initial_time(self):
        """gamma(t0) = r0."""
        assert abs(self.curve(self.t0) - self.r0) < 1e-15

    def test_long_run_yield(self):
        """gamma -> theta/lambda - sigma^2 / (2 lambda^2)."""
        assert abs(self.curve.long_run_yield - 0.035) < 1e-15
        assert abs(self.curve(self.t0 + 1e4) - 0.035) < 1e-4

    def test_near_deterministic(self):
        """With tiny sigma the yield relaxes from r0 to theta/lambda."""
        curve = yield_vasicek(self.theta, self.lam, 1e-8, self.r0, self.t0)
        level = self.theta / self.lam

        for t in [1.0, 3.0, 10.0]:
            a = shape1(self.lam * (t - self.t0))
            expected = level + (self.r0 - level) * a
            assert abs(curve(t) - expected) < 1e-12

    def test_discount_curve(self):
        discount = discount_vasicek(self.theta, self.lam, self.sigma, self.r0, self.t0)
        t = 2.5
        assert discount(self.t0) == 1.0
        assert abs(discount(t) - np.exp(-self.curve(t) * (t - self.t0))) < 1e-15

    def test_invalid_parameters(self):
        with pytest.raises(InvalidParameterError):
            yield_vasicek(self.theta, 0.0, self.sigma, self.r0, self.t0)
        with pytest.raises(InvalidParameterError):
            yield_vasicek(self.theta, self.lam, 0.0, self.r0, self.t0)


class TestBlackCurves:
    """Tests for Black model carry and volatility curves."""

    def test_carry_closed_form(self):
        carry = carry_black(0.03, 0.5, 0.2, 1.0)
        expected = 0.03 * (1 - np.exp(-1.0)) + 0.02 * (1 - np.exp(-2.0)) / 2.0
        assert abs(carry(3.0) - expected) < 1e-14

    def test_carry_at_initial_time(self):
        """c(t0) = theta + sigma^2 / 2."""
        carry = carry_black(0.03, 0.5, 0.2, 1.0)
        assert abs(carry(1.0) - 0.05) < 1e-15

    def test_carry_zero_volatility_allowed(self):
        carry = carry_black(0.03, 0.5, 0.0, 1.0)
        assert abs(carry(3.0) - 0.03 * shape1(1.0)) < 1e-15

    def test_volatility_at_initial_time(self):
        vol = volatility_black(0.2, 0.5, 1.0)
        assert vol(1.0) == 0.2

    def test_volatility_decreasing(self):
        vol = volatility_black(0.2, 0.5, 1.0)
        values = vol.evaluate(np.linspace(1.0, 10.0, 20))
        assert np.all(np.diff(values) < 0)
        assert abs(vol(3.0) - 0.2 * np.sqrt((1 - np.exp(-2.0)) / 2.0)) < 1e-15

    def test_volatility_without_mean_reversion(self):
        vol = volatility_black(0.2, 0.0, 1.0)
        assert vol(5.0) == 0.2

    def test_invalid_parameters(self):
        with pytest.raises(InvalidParameterError):
            carry_black(0.03, -0.5, 0.2, 1.0)
        with pytest.raises(InvalidParameterError):
            carry_black(0.03, 0.5, -0.2, 1.0)
        with pytest.raises(InvalidParameterError):
            volatility_black(0.0, 0.5, 1.0)


class TestHullWhite:
    """Tests for Hull-White implied volatility."""

    def test_closed_form(self):
        sigma, lam = 0.01, 0.1
        hw = volatility_hull_white(sigma, lam, 0.0)

        factor = (1 - np.exp(-0.2)) / lam
        expected = sigma * factor * np.sqrt((1 - np.exp(-0.2)) / 0.2)
        assert abs(hw(1.0, 3.0) - expected) < 1e-15

    def test_zero_mean_reversion(self):
        """lambda = 0 gives sigma * (t - s)."""
        hw = volatility_hull_white(0.01, 0.0, 0.0)
        assert abs(hw(1.0, 3.0) - 0.02) < 1e-15
        assert abs(hw(0.0, 0.5) - 0.005) < 1e-15

    def test_small_mean_reversion_limit(self):
        """Continuous as lambda -> 0."""
        hw0 = volatility_hull_white(0.01, 0.0, 0.0)
        hw = volatility_hull_white(0.01, 1e-9, 0.0)
        assert abs(hw(1.0, 3.0) - hw0(1.0, 3.0)) < 1e-10

    def test_bond_factor(self):
        hw = volatility_hull_white(0.01, 0.1, 0.0)
        assert abs(hw.bond_factor(2.0) - (1 - np.exp(-0.2)) / 0.1) < 1e-14
        assert volatility_hull_white(0.01, 0.0, 0.0).bond_factor(2.0) == 2.0

    def test_domain(self):
        """Requires t0 <= s < t."""
        hw = volatility_hull_white(0.01, 0.1, 1.0)
        with pytest.raises(OutOfDomainError):
            hw(0.5, 3.0)
        with pytest.raises(OutOfDomainError):
            hw(3.0, 3.0)
        with pytest.raises(OutOfDomainError):
            hw(4.0, 3.0)

    def test_invalid_parameters(self):
        with pytest.raises(InvalidParameterError):
            volatility_hull_white(0.0, 0.1, 0.0)
        with pytest.raises(InvalidParameterError):
            volatility_hull_white(0.01, -0.1, 0.0)


class TestVolatilityFromVariance:
    """Tests for volatility from a variance curve."""

    def test_constant_volatility(self):
        variance = lambda t: 0.04 * (t - 1.0)
        vol = volatility_from_variance(variance, 1.0)

        for t in [1.5, 2.0, 7.0]:
            assert abs(vol(t) - 0.2) < 1e-14

    def test_initial_time_limit(self):
        """At t0 the variance is taken over EPS."""
        variance = lambda t: 0.04 * (t - 1.0)
        vol = volatility_from_variance(variance, 1.0)
        assert abs(vol(1.0) - 0.2) < 1e-6
        assert abs(vol(1.0 + EPS / 2) - 0.2) < 1e-6

    def test_before_initial_time_rejected(self):
        vol = volatility_from_variance(lambda t: 0.04 * (t - 1.0), 1.0)
        with pytest.raises(OutOfDomainError):
            vol(0.5)
