"""
Stationary implied volatility of zero-coupon bond options in the
Hull-White (Vasicek) model:

    Sigma(s, t) = sigma * (1 - exp(-lambda (t - s))) / lambda
                  * sqrt(shape1(2 lambda (s - t0))),   t0 <= s < t,

where s is the option maturity and t the bond maturity.
"""

from dataclasses import dataclass
import numpy as np

from ..curves.base import BivariateCurve
from ..curves.shapes import scaled_shape1, shape1
from ..errors import InvalidParameterError, OutOfDomainError


@dataclass(frozen=True)
class HullWhiteVolatility(BivariateCurve):
    """Hull-White implied volatility as a function of (option maturity, bond maturity)."""
    sigma: float
    mean_reversion: float
    initial_time: float

    def __post_init__(self):
        if self.sigma <= 0:
            raise InvalidParameterError(f"Volatility must be positive, got {self.sigma}")
        if self.mean_reversion < 0:
            raise InvalidParameterError(
                f"Mean-reversion rate must be non-negative, got {self.mean_reversion}"
            )

    def bond_factor(self, tau: float) -> float:
        """
        Volatility loading (1 - exp(-lambda tau)) / lambda of a bond with
        remaining life tau. Equals tau when lambda = 0.
        """
        lam = self.mean_reversion
        if lam > 0:
            return float(-np.expm1(-lam * tau) / lam)
        # lambda = 0: series branch, exact
        return scaled_shape1(lam * tau, tau)

    def __call__(self, s: float, t: float) -> float:
        if s < self.initial_time or s >= t:
            raise OutOfDomainError(
                s, self.initial_time, t,
                f"Option maturity {s} must satisfy {self.initial_time} <= s < {t}"
            )
        x = self.mean_reversion * (s - self.initial_time)
        return float(self.sigma * self.bond_factor(t - s) * np.sqrt(shape1(2 * x)))


def volatility_hull_white(
    sigma: float,
    mean_reversion: float,
    initial_time: float
) -> HullWhiteVolatility:
    """
    Stationary implied volatility curve in the Hull-White model.

    Args:
        sigma: Short-rate volatility > 0
        mean_reversion: lambda >= 0
        initial_time: t0

    Returns:
        Function (s, t) -> Sigma(s, t) of option maturity s and bond maturity t
    """
    return HullWhiteVolatility(sigma, mean_reversion, initial_time)


__all__ = [
    "HullWhiteVolatility",
    "volatility_hull_white",
]
