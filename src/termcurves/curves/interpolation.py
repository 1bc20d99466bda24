"""
Interpolated curves built from discrete market points.

Provides:
- YieldLinearDiscountCurve: linear interpolation of yields, returns discount factors
- LogLinearDiscountCurve: linear interpolation of log discount factors
- VarianceLinearVolatilityCurve: volatility curve from market volatilities
- CarryLinearForwardCurve: linear interpolation of cost-of-carry rates,
  returns forward prices

All curves share one scheme. Market times t_1 < ... < t_M lie strictly
after t0. For t in [t0, t_M] we find the first i with t_i >= t, bracket t by
(t_{i-1}, t_i) (or (t0, t_1) when i = 0), interpolate the transformed values
and map back. Transformed node values are computed once, on construction,
and the transform is never evaluated at t0 itself: the left value on the
first interval is a boundary value supplied by each curve.
"""

import logging
from typing import Optional, Sequence, Tuple
import numpy as np

from ..conventions import EPS
from ..errors import InvalidParameterError, MalformedSeriesError
from .base import Curve, as_series
from .conversion import cost_of_carry, yield_from_point


logger = logging.getLogger(__name__)


class PiecewiseCurve(Curve):
    """
    Base class for curves interpolated between market points.

    Attributes:
        times: Market times (read-only)
        values: Market values (read-only)
        initial_time: Anchor t0 < times[0]
    """

    min_points = 1

    def __init__(
        self,
        times: Sequence[float],
        values: Sequence[float],
        initial_time: float
    ):
        self.initial_time = float(initial_time)
        self.times, self.values = as_series(
            times, values, initial_time=self.initial_time, min_points=self.min_points
        )

        logger.debug(
            "Built %s on %d points over [%s, %s]",
            type(self).__name__, len(self.times), self.initial_time, self.times[-1]
        )

    @property
    def max_time(self) -> float:
        return float(self.times[-1])

    def bracket(self, t: float) -> Tuple[int, float, float, float]:
        """
        Locate the interpolation interval of t.

        Args:
            t: Time in [t0, times[-1]]

        Returns:
            (i, x0, x1, w): index of the first market time >= t, bracket
            ends and the weight of the right end
        """
        i = int(np.searchsorted(self.times, t, side='left'))
        x0 = float(self.times[i - 1]) if i > 0 else self.initial_time
        x1 = float(self.times[i])
        w = (t - x0) / (x1 - x0)
        return i, x0, x1, w

    @staticmethod
    def _check_positive(values: np.ndarray, name: str) -> None:
        if np.any(values <= 0):
            raise MalformedSeriesError(f"{name} must be positive")

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(t0={self.initial_time}, "
                f"points={len(self.times)}, last={self.max_time})")


class YieldLinearDiscountCurve(PiecewiseCurve):
    """
    Discount curve from linear interpolation of market yields.

    1. Market discount factors are converted to yields.
    2. Yields are interpolated linearly, starting from the short rate at t0.
    3. The interpolated yield is turned back into a discount factor.
    """

    def __init__(
        self,
        times: Sequence[float],
        discount_factors: Sequence[float],
        short_rate: float,
        initial_time: float
    ):
        super().__init__(times, discount_factors, initial_time)
        self._check_positive(self.values, "Discount factors")
        if self.times[0] <= self.initial_time + EPS:
            raise MalformedSeriesError(
                f"First time {self.times[0]} too close to initial time {self.initial_time}"
            )
        self.short_rate = float(short_rate)

        to_yield = yield_from_point(self.initial_time)
        yields = np.array([to_yield(t, df) for t, df in zip(self.times, self.values)])
        yields.flags.writeable = False
        self.yields = yields

    def value(self, t: float) -> float:
        i, _, _, w = self.bracket(t)
        y0 = self.yields[i - 1] if i > 0 else self.short_rate
        y1 = self.yields[i]
        return float(np.exp(-(y0 + w * (y1 - y0)) * (t - self.initial_time)))


class LogLinearDiscountCurve(PiecewiseCurve):
    """
    Discount curve from log-linear interpolation of market discount factors.

    Equivalent to piecewise constant forward rates; D(t0) = 1.
    """

    def __init__(
        self,
        times: Sequence[float],
        discount_factors: Sequence[float],
        initial_time: float
    ):
        super().__init__(times, discount_factors, initial_time)
        self._check_positive(self.values, "Discount factors")

        log_df = np.log(self.values)
        log_df.flags.writeable = False
        self.log_df = log_df

    def value(self, t: float) -> float:
        i, _, _, w = self.bracket(t)
        v0 = self.log_df[i - 1] if i > 0 else 0.0
        v1 = self.log_df[i]
        return float(np.exp(v0 + w * (v1 - v0)))


class VarianceLinearVolatilityCurve(PiecewiseCurve):
    """
    Volatility curve from market volatilities.

    On [t0, times[1]] the curve is flat at vols[1]: the plateau covers both
    the first market interval and the segment before it. Beyond times[1] the
    market volatilities themselves are interpolated linearly.
    """

    min_points = 2

    def __init__(
        self,
        times: Sequence[float],
        vols: Sequence[float],
        initial_time: float
    ):
        super().__init__(times, vols, initial_time)
        if np.any(self.values < 0):
            raise MalformedSeriesError("Volatilities must be non-negative")

    def value(self, t: float) -> float:
        if t <= self.times[1]:
            return float(self.values[1])
        i, _, _, w = self.bracket(t)
        v0 = self.values[i - 1]
        v1 = self.values[i]
        return float(v0 + w * (v1 - v0))


class CarryLinearForwardCurve(PiecewiseCurve):
    """
    Forward price curve from linear interpolation of cost-of-carry rates.

        F(t) = S0 exp(q(t) (t - t0)),  t in [t0, t_M]

    The market rates q(t_i) = ln(F(t_i)/S0)/(t_i - t0) are interpolated
    linearly; on the first interval [t0, t_1] the rate is flat at q(t_1).
    """

    def __init__(
        self,
        spot: float,
        times: Sequence[float],
        forward_prices: Sequence[float],
        initial_time: float
    ):
        super().__init__(times, forward_prices, initial_time)
        self._check_positive(self.values, "Forward prices")
        if spot <= 0:
            raise InvalidParameterError(f"Spot price must be positive, got {spot}")
        self.spot = float(spot)

        to_carry = cost_of_carry(self.spot, self.initial_time)
        rates = np.array([to_carry(f, t) for t, f in zip(self.times, self.values)])
        rates.flags.writeable = False
        self.carry_rates = rates

    def value(self, t: float) -> float:
        i, _, _, w = self.bracket(t)
        if i == 0:
            q = self.carry_rates[0]
        else:
            q0 = self.carry_rates[i - 1]
            q1 = self.carry_rates[i]
            q = q0 + w * (q1 - q0)
        return float(self.spot * np.exp(q * (t - self.initial_time)))


def discount_yield_lin_interp(
    times: Sequence[float],
    discount_factors: Sequence[float],
    short_rate: float,
    initial_time: float
) -> YieldLinearDiscountCurve:
    """
    Discount curve by linear interpolation of market yields.

    Args:
        times: Maturities of market discount factors, times[0] > t0
        discount_factors: Market discount factors
        short_rate: Initial short-term rate, the yield at t0
        initial_time: t0

    Returns:
        Discount curve on [t0, times[-1]]
    """
    return YieldLinearDiscountCurve(times, discount_factors, short_rate, initial_time)


def discount_log_lin_interp(
    times: Sequence[float],
    discount_factors: Sequence[float],
    initial_time: float
) -> LogLinearDiscountCurve:
    """
    Discount curve by log-linear interpolation of market discount factors.

    Args:
        times: Maturities of market discount factors, times[0] > t0
        discount_factors: Market discount factors
        initial_time: t0

    Returns:
        Discount curve on [t0, times[-1]]
    """
    return LogLinearDiscountCurve(times, discount_factors, initial_time)


def volatility_var_lin_interp(
    times: Sequence[float],
    vols: Sequence[float],
    initial_time: float
) -> VarianceLinearVolatilityCurve:
    """
    Volatility curve from market implied volatilities.

    Args:
        times: Maturities of market volatilities (at least two), times[0] > t0
        vols: Market implied volatilities
        initial_time: t0

    Returns:
        Volatility curve on [t0, times[-1]], constant on [t0, times[1]]
    """
    return VarianceLinearVolatilityCurve(times, vols, initial_time)


def forward_carry_lin_interp(
    spot: float,
    times: Sequence[float],
    forward_prices: Sequence[float],
    initial_time: float
) -> CarryLinearForwardCurve:
    """
    Forward curve by linear interpolation of market cost-of-carry rates.

    Args:
        spot: Spot price S0
        times: Delivery times of market forwards, times[0] > t0
        forward_prices: Market forward prices
        initial_time: t0

    Returns:
        Forward price curve on [t0, times[-1]]
    """
    return CarryLinearForwardCurve(spot, times, forward_prices, initial_time)


def build_discount_curve(
    method: str,
    times: Sequence[float],
    discount_factors: Sequence[float],
    initial_time: float,
    short_rate: Optional[float] = None
) -> PiecewiseCurve:
    """
    Factory function to build an interpolated discount curve by name.

    Args:
        method: One of "linear_yield", "log_linear"
        times: Maturities of market discount factors
        discount_factors: Market discount factors
        initial_time: t0
        short_rate: Yield at t0, required for "linear_yield"

    Returns:
        Interpolated discount curve
    """
    method = method.lower().replace("-", "_").replace(" ", "_")

    if method in ("linear_yield", "yield_linear", "linear"):
        if short_rate is None:
            raise InvalidParameterError("Linear yield interpolation requires a short rate")
        return YieldLinearDiscountCurve(times, discount_factors, short_rate, initial_time)
    elif method in ("log_linear", "loglinear"):
        return LogLinearDiscountCurve(times, discount_factors, initial_time)
    else:
        raise ValueError(f"Unknown interpolation method: {method}")


__all__ = [
    "PiecewiseCurve",
    "YieldLinearDiscountCurve",
    "LogLinearDiscountCurve",
    "VarianceLinearVolatilityCurve",
    "CarryLinearForwardCurve",
    "discount_yield_lin_interp",
    "discount_log_lin_interp",
    "volatility_var_lin_interp",
    "forward_carry_lin_interp",
    "build_discount_curve",
]
