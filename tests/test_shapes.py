"""
Unit tests for shape functions.
"""

import numpy as np
import pytest

from termcurves.conventions import EPS
from termcurves.curves import (
    shape1,
    shape2,
    scaled_shape1,
    yield_shape1,
    yield_shape2,
)
from termcurves.errors import InvalidParameterError, OutOfDomainError


class TestShapeFunctions:
    """Tests for shape1 / shape2."""

    def test_values_at_zero(self):
        """shape1(0) = 1 and shape2(0) = 0."""
        assert shape1(0.0) == 1.0
        assert shape2(0.0) == 0.0

    def test_closed_form(self):
        """Test against the closed form away from zero."""
        assert abs(shape1(1.0) - (1 - np.exp(-1.0))) < 1e-14
        assert abs(shape2(1.0) - (1 - 2 * np.exp(-1.0))) < 1e-14
        assert abs(shape1(3.0) - (1 - np.exp(-3.0)) / 3.0) < 1e-14
        assert abs(shape2(3.0) - (1 - 4 * np.exp(-3.0)) / 3.0) < 1e-14

    def test_continuity_across_threshold(self):
        """Taylor branch matches the closed form on both sides of EPS."""
        below = 0.5 * EPS
        above = 2.0 * EPS

        assert abs(shape1(below) - shape1(above)) < 1e-9
        assert abs(shape2(below) - shape2(above)) < 1e-9
        assert abs(shape1(EPS) - shape1(EPS * (1 + 1e-6))) < 1e-9

    def test_small_arguments_accurate(self):
        """Closed form stays accurate just above the threshold."""
        x = 1e-8
        assert abs(shape1(x) - (1 - x / 2 + x * x / 6)) < 1e-14
        assert abs(shape2(x) - (x / 2 - x * x / 3)) < 1e-14

    def test_shape1_decreasing(self):
        """shape1 decreases from 1 toward 0."""
        xs = np.linspace(0.0, 20.0, 50)
        values = [shape1(x) for x in xs]
        assert all(a > b for a, b in zip(values, values[1:]))
        assert 0 < values[-1] < 0.06

    def test_negative_argument_rejected(self):
        """Negative arguments are outside the domain."""
        with pytest.raises(OutOfDomainError):
            shape1(-0.1)
        with pytest.raises(OutOfDomainError):
            shape2(-1e-12)


class TestScaledShape:
    """Tests for the time-difference shape family."""

    def test_zero_argument_gives_time_difference(self):
        """scaled_shape1(0, dt) = dt."""
        assert scaled_shape1(0.0, 2.0) == 2.0
        assert scaled_shape1(0.0, 0.0) == 0.0

    def test_closed_form(self):
        """(1 - e^-x) / (x / dt)."""
        lam, dt = 0.1, 2.0
        expected = (1 - np.exp(-lam * dt)) / lam
        assert abs(scaled_shape1(lam * dt, dt) - expected) < 1e-14

    def test_equals_scaled_shape1(self):
        """scaled_shape1(x, dt) = dt * shape1(x)."""
        for x in [1e-12, 0.01, 0.5, 4.0]:
            assert abs(scaled_shape1(x, 3.0) - 3.0 * shape1(x)) < 1e-12

    def test_zero_time_difference(self):
        """dt = 0 gives 0 on both branches."""
        assert scaled_shape1(1.0, 0.0) == 0.0
        assert scaled_shape1(EPS / 2, 0.0) == 0.0

    def test_negative_rejected(self):
        with pytest.raises(OutOfDomainError):
            scaled_shape1(-1.0, 1.0)
        with pytest.raises(OutOfDomainError):
            scaled_shape1(1.0, -1.0)


class TestYieldShapeCurves:
    """Tests for the yield shape curves."""

    def test_values_at_initial_time(self):
        assert yield_shape1(0.05, 2.0)(2.0) == 1.0
        assert yield_shape2(0.05, 2.0)(2.0) == 0.0

    def test_matches_shape_function(self):
        curve = yield_shape1(0.05, 2.0)
        assert abs(curve(6.0) - shape1(0.05 * 4.0)) < 1e-15

        curve = yield_shape2(0.05, 2.0)
        assert abs(curve(6.0) - shape2(0.05 * 4.0)) < 1e-15

    def test_before_initial_time_rejected(self):
        with pytest.raises(OutOfDomainError):
            yield_shape1(0.05, 2.0)(1.9)

    def test_negative_mean_reversion_rejected(self):
        with pytest.raises(InvalidParameterError):
            yield_shape1(-0.05, 2.0)

    def test_curves_are_immutable(self):
        curve = yield_shape1(0.05, 2.0)
        with pytest.raises(AttributeError):
            curve.mean_reversion = 0.1
