"""
Vasicek yield and discount curves.

The short rate is an Ornstein-Uhlenbeck process

    dr_t = (theta - lambda r_t) dt + sigma dB_t,

and the discount curve D(t) = E[exp(-int_{t0}^t r_s ds)] has yield

    gamma(t) = r0 A(t) + (theta/lambda)(1 - A(t))
               - (sigma^2 / (2 lambda^2)) (1 - 2A(t) + B(t)),

with A(t) = shape1(lambda (t - t0)) and B(t) = shape1(2 lambda (t - t0)).

The formula divides by lambda, so lambda = 0 (pure diffusion) is rejected.
"""

from dataclasses import dataclass

from ..errors import InvalidParameterError
from .base import Curve
from .conversion import DiscountCurveFromYield, discount_from_yield
from .shapes import shape1


@dataclass(frozen=True)
class VasicekYield(Curve):
    """Vasicek yield curve."""
    theta: float
    mean_reversion: float
    sigma: float
    r0: float
    initial_time: float

    def __post_init__(self):
        if self.mean_reversion <= 0:
            raise InvalidParameterError(
                f"Mean-reversion rate must be positive, got {self.mean_reversion}"
            )
        if self.sigma <= 0:
            raise InvalidParameterError(f"Volatility must be positive, got {self.sigma}")

    @property
    def long_run_yield(self) -> float:
        """Limit of gamma(t) as t -> inf."""
        lam = self.mean_reversion
        return self.theta / lam - self.sigma ** 2 / (2 * lam ** 2)

    def value(self, t: float) -> float:
        lam = self.mean_reversion
        x = lam * (t - self.initial_time)
        a = shape1(x)
        b = shape1(2 * x)
        half_var = self.sigma ** 2 / 2

        return (self.r0 * a +
                (self.theta / lam) * (1 - a) -
                (half_var / lam ** 2) * (1 - 2 * a + b))


def yield_vasicek(
    theta: float,
    mean_reversion: float,
    sigma: float,
    r0: float,
    initial_time: float
) -> VasicekYield:
    """
    Vasicek yield curve.

    Args:
        theta: Drift
        mean_reversion: lambda > 0
        sigma: Volatility > 0
        r0: Initial short rate r(t0)
        initial_time: t0

    Returns:
        Yield curve gamma(t), t >= t0
    """
    return VasicekYield(theta, mean_reversion, sigma, r0, initial_time)


def discount_vasicek(
    theta: float,
    mean_reversion: float,
    sigma: float,
    r0: float,
    initial_time: float
) -> DiscountCurveFromYield:
    """Vasicek discount curve exp(-gamma(t) (t - t0))."""
    return discount_from_yield(
        yield_vasicek(theta, mean_reversion, sigma, r0, initial_time),
        initial_time
    )


__all__ = [
    "VasicekYield",
    "yield_vasicek",
    "discount_vasicek",
]
