"""
Conversions between yields, discount factors and cost-of-carry rates.

    D(t) = exp(-gamma(t) (t - t0)),  t >= t0
    F(t) = S0 exp(c(t) (t - t0)),    t >= t0

Yields and carry rates have a 0/0 singularity at t = t0. The conversions
below replace it with a finite difference over EPS instead of evaluating
the log ratio at t0 itself.
"""

from typing import Optional
import numpy as np

from ..conventions import EPS
from ..errors import InvalidParameterError, OutOfDomainError
from .base import BivariateCurve, Curve, CurveLike, upper_bound_of


class YieldFromDiscountFactor(BivariateCurve):
    """Continuously compounded yield as a function of (maturity, discount factor)."""

    def __init__(self, initial_time: float):
        self.initial_time = float(initial_time)

    def __call__(self, maturity: float, discount_factor: float) -> float:
        if maturity <= self.initial_time + EPS:
            raise OutOfDomainError(
                maturity, self.initial_time + EPS, None,
                f"Maturity {maturity} must exceed initial time {self.initial_time} by more than EPS"
            )
        if discount_factor <= 0:
            raise OutOfDomainError(
                discount_factor, 0.0, None,
                f"Discount factor must be positive, got {discount_factor}"
            )
        return float(-np.log(discount_factor) / (maturity - self.initial_time))

    def __repr__(self) -> str:
        return f"YieldFromDiscountFactor(t0={self.initial_time})"


class YieldCurveFromDiscount(Curve):
    """Yield curve gamma(t) = -ln D(t) / (t - t0) of a discount curve."""

    def __init__(self, discount: CurveLike, initial_time: float):
        self.discount = discount
        self.initial_time = float(initial_time)

    @property
    def max_time(self) -> float:
        return upper_bound_of(self.discount)

    def value(self, t: float) -> float:
        if t < self.initial_time + EPS:
            return (1.0 - self.discount(self.initial_time + EPS)) / EPS
        return float(-np.log(self.discount(t)) / (t - self.initial_time))


class DiscountCurveFromYield(Curve):
    """Discount curve D(t) = exp(-gamma(t) (t - t0)) of a yield curve."""

    def __init__(self, yield_curve: CurveLike, initial_time: float):
        self.yield_curve = yield_curve
        self.initial_time = float(initial_time)

    @property
    def max_time(self) -> float:
        return upper_bound_of(self.yield_curve)

    def value(self, t: float) -> float:
        return float(np.exp(-self.yield_curve(t) * (t - self.initial_time)))


class CostOfCarryFromForward(BivariateCurve):
    """Cost-of-carry rate as a function of (forward price, delivery time)."""

    def __init__(self, spot: float, initial_time: float):
        if spot <= 0:
            raise InvalidParameterError(f"Spot price must be positive, got {spot}")
        self.spot = float(spot)
        self.initial_time = float(initial_time)

    def __call__(self, forward_price: float, t: float) -> float:
        if t < self.initial_time:
            raise OutOfDomainError(t, self.initial_time, None)
        if forward_price <= 0:
            raise OutOfDomainError(
                forward_price, 0.0, None,
                f"Forward price must be positive, got {forward_price}"
            )
        dt = max(t - self.initial_time, EPS)
        return float(np.log(forward_price / self.spot) / dt)

    def __repr__(self) -> str:
        return f"CostOfCarryFromForward(spot={self.spot}, t0={self.initial_time})"


def yield_from_point(initial_time: float) -> YieldFromDiscountFactor:
    """
    Yield from a single (maturity, discount factor) point.

    Args:
        initial_time: Anchor t0

    Returns:
        Function (T, d) -> -ln(d) / (T - t0), defined for T > t0 + EPS
    """
    return YieldFromDiscountFactor(initial_time)


def yield_from_curve(discount: CurveLike, initial_time: float) -> YieldCurveFromDiscount:
    """
    Yield curve of a discount curve.

    Within EPS of t0 the yield is (1 - D(t0 + EPS)) / EPS.

    Args:
        discount: Discount curve D
        initial_time: Anchor t0

    Returns:
        Yield curve gamma(t), t >= t0
    """
    return YieldCurveFromDiscount(discount, initial_time)


def discount_from_yield(
    yield_curve: CurveLike,
    initial_time: Optional[float] = None
) -> DiscountCurveFromYield:
    """
    Discount curve of a yield curve.

    Args:
        yield_curve: Yield curve gamma
        initial_time: Anchor t0 (defaults to the yield curve's own)

    Returns:
        Discount curve exp(-gamma(t) (t - t0)), t >= t0
    """
    if initial_time is None:
        initial_time = getattr(yield_curve, "initial_time", None)
        if initial_time is None:
            raise InvalidParameterError("Initial time required for a yield curve without one")
    return DiscountCurveFromYield(yield_curve, initial_time)


def cost_of_carry(spot: float, initial_time: float) -> CostOfCarryFromForward:
    """
    Cost-of-carry rate from a forward price.

    Args:
        spot: Spot price S0
        initial_time: Anchor t0

    Returns:
        Function (F, t) -> ln(F / S0) / (t - t0), the divisor floored at EPS
    """
    return CostOfCarryFromForward(spot, initial_time)


__all__ = [
    "YieldFromDiscountFactor",
    "YieldCurveFromDiscount",
    "DiscountCurveFromYield",
    "CostOfCarryFromForward",
    "yield_from_point",
    "yield_from_curve",
    "discount_from_yield",
    "cost_of_carry",
]
