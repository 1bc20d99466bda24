"""
Curve abstractions.

A curve is an immutable function of time built once from market data or
model parameters. Every curve knows the interval on which it is defined and
rejects evaluations outside it; the numerical work lives in ``value``.

Any plain callable ``t -> float`` can stand in for a curve wherever one is
taken as a dependency (e.g. the discount curve of a forward builder).
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence, Tuple, Union
import numpy as np

from ..errors import MalformedSeriesError, OutOfDomainError


CurveLike = Callable[[float], float]


class Curve(ABC):
    """
    Abstract base class for single-argument curves.

    Anchored curves carry an ``initial_time`` attribute (t0) and are defined
    for t >= t0; curves without one are unbounded below.
    """

    @property
    def min_time(self) -> float:
        """Smallest time at which the curve may be evaluated."""
        return getattr(self, "initial_time", -np.inf)

    @property
    def max_time(self) -> float:
        """Largest time at which the curve may be evaluated."""
        return np.inf

    @abstractmethod
    def value(self, t: float) -> float:
        """
        Evaluate the curve without domain checks.

        Args:
            t: Time (year fraction)

        Returns:
            Curve value at t
        """
        pass

    def check_domain(self, t: float) -> None:
        """Raise OutOfDomainError unless min_time <= t <= max_time."""
        if t < self.min_time or t > self.max_time:
            raise OutOfDomainError(t, self.min_time, self.max_time)

    def __call__(self, t: float) -> float:
        self.check_domain(t)
        return self.value(t)

    def evaluate(self, times: Union[Sequence[float], np.ndarray]) -> np.ndarray:
        """Evaluate the curve at each of the given times."""
        return np.array([self(float(t)) for t in times], dtype=np.float64)


class BivariateCurve(ABC):
    """Abstract base class for two-argument curves."""

    @abstractmethod
    def __call__(self, a: float, b: float) -> float:
        pass


def upper_bound_of(curve: CurveLike) -> float:
    """Last time at which a dependency curve is defined (inf if unknown)."""
    return getattr(curve, "max_time", np.inf)


def lower_bound_of(curve: CurveLike) -> float:
    """First time at which a dependency curve is defined (-inf if unknown)."""
    return getattr(curve, "min_time", getattr(curve, "initial_time", -np.inf))


def as_series(
    times: Sequence[float],
    values: Sequence[float],
    initial_time: Optional[float] = None,
    strict: bool = True,
    min_points: int = 1
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Validate a market point series and freeze it as read-only arrays.

    Args:
        times: Ascending times
        values: Values paired with times
        initial_time: If given, the first time must be strictly after it
        strict: Require strictly increasing times (else non-decreasing)
        min_points: Minimum number of points

    Returns:
        (times, values) as read-only float arrays
    """
    t = np.array(times, dtype=np.float64)
    v = np.array(values, dtype=np.float64)

    if t.ndim != 1 or v.ndim != 1:
        raise MalformedSeriesError("Times and values must be one-dimensional")
    if len(t) != len(v):
        raise MalformedSeriesError(
            f"Times and values must have same length ({len(t)} != {len(v)})"
        )
    if len(t) < min_points:
        raise MalformedSeriesError(f"Need at least {min_points} points, got {len(t)}")

    steps = np.diff(t)
    if strict and np.any(steps <= 0):
        raise MalformedSeriesError("Times must be strictly increasing")
    if not strict and np.any(steps < 0):
        raise MalformedSeriesError("Times must be sorted ascending")

    if initial_time is not None and t[0] <= initial_time:
        raise MalformedSeriesError(
            f"First time {t[0]} must be strictly after initial time {initial_time}"
        )

    t.flags.writeable = False
    v.flags.writeable = False
    return t, v


__all__ = [
    "Curve",
    "BivariateCurve",
    "CurveLike",
    "as_series",
    "upper_bound_of",
    "lower_bound_of",
]
