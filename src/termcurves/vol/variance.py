"""
Volatility curve from a variance curve V(t) = Sigma(t)^2 (t - t0).
"""

import numpy as np

from ..conventions import EPS
from ..curves.base import Curve, CurveLike, upper_bound_of


class VolatilityFromVariance(Curve):
    """Sigma(t) = sqrt(V(t) / (t - t0)), the limit over EPS at t0."""

    def __init__(self, variance: CurveLike, initial_time: float):
        self.variance = variance
        self.initial_time = float(initial_time)

    @property
    def max_time(self) -> float:
        return upper_bound_of(self.variance)

    def value(self, t: float) -> float:
        if t - self.initial_time < EPS:
            return float(np.sqrt(self.variance(self.initial_time + EPS) / EPS))
        return float(np.sqrt(self.variance(t) / (t - self.initial_time)))


def volatility_from_variance(variance: CurveLike, initial_time: float) -> VolatilityFromVariance:
    """
    Volatility curve from a variance curve.

    Args:
        variance: Variance curve V(t)
        initial_time: t0

    Returns:
        Volatility curve Sigma(t), t >= t0
    """
    return VolatilityFromVariance(variance, initial_time)


__all__ = [
    "VolatilityFromVariance",
    "volatility_from_variance",
]
