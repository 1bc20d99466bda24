"""
Shape functions of short-rate and Nelson-Siegel type models.

    shape1(x) = (1 - e^(-x)) / x
    shape2(x) = (1 - e^(-x)(1 + x)) / x

Both have a removable singularity at x = 0. Direct evaluation loses all
precision there (catastrophic cancellation), so for x <= EPS a Taylor
expansion is used instead:

    shape1(x) ~ 1 - x/2 + x^2/6
    shape2(x) ~ x/2 - x^2/3

Above EPS, 1 - e^(-x) is computed with expm1.
"""

from dataclasses import dataclass
import numpy as np

from ..conventions import EPS
from ..errors import InvalidParameterError, OutOfDomainError
from .base import Curve


def shape1(x: float) -> float:
    """
    Compute (1 - e^(-x)) / x for x >= 0.

    Args:
        x: Non-negative argument, typically lambda * (t - t0)

    Returns:
        Shape value in (0, 1]
    """
    if x < 0:
        raise OutOfDomainError(x, 0.0, None, f"Shape argument must be non-negative, got {x}")
    if x > EPS:
        return float(-np.expm1(-x) / x)
    return 1.0 - x / 2.0 + x * x / 6.0


def shape2(x: float) -> float:
    """
    Compute (1 - e^(-x)(1 + x)) / x for x >= 0.

    Args:
        x: Non-negative argument, typically lambda * (t - t0)

    Returns:
        Shape value, zero at x = 0
    """
    if x < 0:
        raise OutOfDomainError(x, 0.0, None, f"Shape argument must be non-negative, got {x}")
    if x > EPS:
        return float((-np.expm1(-x) - x * np.exp(-x)) / x)
    return x / 2.0 - x * x / 3.0


def scaled_shape1(x: float, dt: float) -> float:
    """
    Compute dt * shape1(x) = (1 - e^(-x)) dt / x.

    With x = lambda * dt this is (1 - e^(-lambda dt)) / lambda, the bond
    volatility factor of the Hull-White model. Near x = 0 the series is
    carried to third order so that lambda = 0 gives exactly dt.

    Args:
        x: Non-negative argument
        dt: Non-negative time difference

    Returns:
        Scaled shape value
    """
    if x < 0 or dt < 0:
        raise OutOfDomainError(
            x, 0.0, None, f"Shape arguments must be non-negative, got x={x}, dt={dt}"
        )
    if x > EPS:
        return float(-np.expm1(-x) * dt / x)
    return dt * (1.0 - x / 2.0 + x * x / 6.0 - x ** 3 / 24.0)


@dataclass(frozen=True)
class ShapeCurve(Curve):
    """Curve t -> shape(lambda * (t - t0)) for one of the two shapes."""
    mean_reversion: float
    initial_time: float
    order: int = 1

    def __post_init__(self):
        if self.mean_reversion < 0:
            raise InvalidParameterError(
                f"Mean-reversion rate must be non-negative, got {self.mean_reversion}"
            )
        if self.order not in (1, 2):
            raise InvalidParameterError(f"Shape order must be 1 or 2, got {self.order}")

    def value(self, t: float) -> float:
        x = self.mean_reversion * (t - self.initial_time)
        return shape1(x) if self.order == 1 else shape2(x)


def yield_shape1(mean_reversion: float, initial_time: float) -> ShapeCurve:
    """First yield shape (1 - e^(-lambda(t-t0))) / (lambda(t-t0)), t >= t0."""
    return ShapeCurve(mean_reversion, initial_time, order=1)


def yield_shape2(mean_reversion: float, initial_time: float) -> ShapeCurve:
    """Second yield shape, the first shape minus e^(-lambda(t-t0)), t >= t0."""
    return ShapeCurve(mean_reversion, initial_time, order=2)


__all__ = [
    "shape1",
    "shape2",
    "scaled_shape1",
    "ShapeCurve",
    "yield_shape1",
    "yield_shape2",
]
