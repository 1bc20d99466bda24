"""
Black model curves: cost-of-carry rate and stationary implied volatility.

The log spot price is log S_t = log S(t0) + X_t, where X is an
Ornstein-Uhlenbeck process

    dX_t = (theta - lambda X_t) dt + sigma dB_t,  X(t0) = 0.

The forward curve F(t) = S(t0) exp(c(t)(t - t0)) = E[S_t] has the
cost-of-carry rate

    c(t) = theta * shape1(lambda (t - t0)) + (sigma^2/2) * shape1(2 lambda (t - t0)),

and the stationary implied volatility is

    Sigma(t) = sigma * sqrt(shape1(2 lambda (t - t0))).
"""

from dataclasses import dataclass
import numpy as np

from ..curves.base import Curve
from ..curves.shapes import shape1
from ..errors import InvalidParameterError


@dataclass(frozen=True)
class BlackCarryCurve(Curve):
    """Cost-of-carry rate curve of the Black model."""
    theta: float
    mean_reversion: float
    sigma: float
    initial_time: float

    def __post_init__(self):
        if self.mean_reversion < 0:
            raise InvalidParameterError(
                f"Mean-reversion rate must be non-negative, got {self.mean_reversion}"
            )
        if self.sigma < 0:
            raise InvalidParameterError(f"Volatility must be non-negative, got {self.sigma}")

    def value(self, t: float) -> float:
        x = self.mean_reversion * (t - self.initial_time)
        return self.theta * shape1(x) + (self.sigma ** 2 / 2) * shape1(2 * x)


@dataclass(frozen=True)
class BlackVolatilityCurve(Curve):
    """Stationary implied volatility curve of the Black model."""
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

    def value(self, t: float) -> float:
        x = self.mean_reversion * (t - self.initial_time)
        return float(self.sigma * np.sqrt(shape1(2 * x)))


def carry_black(
    theta: float,
    mean_reversion: float,
    sigma: float,
    initial_time: float
) -> BlackCarryCurve:
    """
    Cost-of-carry rate curve for the Black model.

    Args:
        theta: Drift term
        mean_reversion: lambda >= 0
        sigma: Volatility >= 0
        initial_time: t0

    Returns:
        Cost-of-carry rate curve c(t), t >= t0
    """
    return BlackCarryCurve(theta, mean_reversion, sigma, initial_time)


def volatility_black(
    sigma: float,
    mean_reversion: float,
    initial_time: float
) -> BlackVolatilityCurve:
    """Stationary implied volatility curve for the Black model."""
    return BlackVolatilityCurve(sigma, mean_reversion, initial_time)


__all__ = [
    "BlackCarryCurve",
    "BlackVolatilityCurve",
    "carry_black",
    "volatility_black",
]
