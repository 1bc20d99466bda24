"""
Nelson-Siegel and Svensson yield curves.

Nelson-Siegel:

    gamma(t) = c0 + c1 * shape1(lambda (t - t0)) + c2 * shape2(lambda (t - t0))

Svensson adds a second hump with its own mean-reversion rate:

    gamma(t) = NS(t) + c3 * shape2(lambda2 (t - t0))

Parameters:
    c0: Long-term level (gamma -> c0 as t -> inf when lambda > 0)
    c1: Short-term component (gamma(t0) = c0 + c1)
    c2: Medium-term hump
    c3: Second hump (Svensson extension)
    lambda: Mean-reversion rate(s), lambda >= 0

Parameters are given, not fitted: calibration is outside this package.
The zero mean-reversion case is handled by the Taylor branch of the shapes.
"""

from dataclasses import dataclass

from ..errors import InvalidParameterError
from .base import Curve
from .conversion import DiscountCurveFromYield, discount_from_yield
from .shapes import shape1, shape2


@dataclass(frozen=True)
class NelsonSiegelYield(Curve):
    """Nelson-Siegel yield curve."""
    c0: float
    c1: float
    c2: float
    mean_reversion: float
    initial_time: float

    def __post_init__(self):
        if self.mean_reversion < 0:
            raise InvalidParameterError(
                f"Mean-reversion rate must be non-negative, got {self.mean_reversion}"
            )

    def value(self, t: float) -> float:
        x = self.mean_reversion * (t - self.initial_time)
        return self.c0 + self.c1 * shape1(x) + self.c2 * shape2(x)

    def __repr__(self) -> str:
        return (f"NelsonSiegelYield(c0={self.c0:.4f}, c1={self.c1:.4f}, "
                f"c2={self.c2:.4f}, λ={self.mean_reversion:.4f}, t0={self.initial_time})")


@dataclass(frozen=True)
class SvenssonYield(Curve):
    """Svensson yield curve: Nelson-Siegel with a second hump."""
    c0: float
    c1: float
    c2: float
    c3: float
    mean_reversion1: float
    mean_reversion2: float
    initial_time: float

    def __post_init__(self):
        if self.mean_reversion1 < 0 or self.mean_reversion2 < 0:
            raise InvalidParameterError(
                f"Mean-reversion rates must be non-negative, got "
                f"{self.mean_reversion1} and {self.mean_reversion2}"
            )
        if self.mean_reversion1 == self.mean_reversion2:
            raise InvalidParameterError(
                f"Mean-reversion rates must differ, both are {self.mean_reversion1}"
            )

    def value(self, t: float) -> float:
        dt = t - self.initial_time
        x1 = self.mean_reversion1 * dt
        x2 = self.mean_reversion2 * dt
        return (self.c0 +
                self.c1 * shape1(x1) +
                self.c2 * shape2(x1) +
                self.c3 * shape2(x2))

    def __repr__(self) -> str:
        return (f"SvenssonYield(c0={self.c0:.4f}, c1={self.c1:.4f}, c2={self.c2:.4f}, "
                f"c3={self.c3:.4f}, λ₁={self.mean_reversion1:.4f}, "
                f"λ₂={self.mean_reversion2:.4f}, t0={self.initial_time})")


def yield_nelson_siegel(
    c0: float,
    c1: float,
    c2: float,
    mean_reversion: float,
    initial_time: float
) -> NelsonSiegelYield:
    """
    Nelson-Siegel yield curve.

    Args:
        c0: First constant
        c1: Second constant
        c2: Third constant
        mean_reversion: lambda >= 0
        initial_time: t0

    Returns:
        Yield curve gamma(t), t >= t0
    """
    return NelsonSiegelYield(c0, c1, c2, mean_reversion, initial_time)


def discount_nelson_siegel(
    c0: float,
    c1: float,
    c2: float,
    mean_reversion: float,
    initial_time: float
) -> DiscountCurveFromYield:
    """Nelson-Siegel discount curve exp(-gamma(t) (t - t0))."""
    return discount_from_yield(
        yield_nelson_siegel(c0, c1, c2, mean_reversion, initial_time),
        initial_time
    )


def yield_svensson(
    c0: float,
    c1: float,
    c2: float,
    c3: float,
    mean_reversion1: float,
    mean_reversion2: float,
    initial_time: float
) -> SvenssonYield:
    """
    Svensson yield curve.

    Args:
        c0: First constant
        c1: Second constant
        c2: Third constant
        c3: Fourth constant
        mean_reversion1: lambda1 >= 0
        mean_reversion2: lambda2 >= 0, lambda2 != lambda1
        initial_time: t0

    Returns:
        Yield curve gamma(t), t >= t0
    """
    return SvenssonYield(c0, c1, c2, c3, mean_reversion1, mean_reversion2, initial_time)


def discount_svensson(
    c0: float,
    c1: float,
    c2: float,
    c3: float,
    mean_reversion1: float,
    mean_reversion2: float,
    initial_time: float
) -> DiscountCurveFromYield:
    """Svensson discount curve exp(-gamma(t) (t - t0))."""
    return discount_from_yield(
        yield_svensson(c0, c1, c2, c3, mean_reversion1, mean_reversion2, initial_time),
        initial_time
    )


__all__ = [
    "NelsonSiegelYield",
    "SvenssonYield",
    "yield_nelson_siegel",
    "discount_nelson_siegel",
    "yield_svensson",
    "discount_svensson",
]
