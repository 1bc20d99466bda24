"""
Forward swap rates and forward LIBORs.

Forward swap rate of a swap starting at t with N payments every dt:

    S(t) = (D(t) - D(t + N dt)) / (dt * sum_{i=1..N} D(t + i dt))

Forward LIBOR for the period [t, t + dt]:

    L(t) = (D(t) / D(t + dt) - 1) / dt

with D(t + dt) and dt floored at EPS.
"""

import logging

from ..conventions import EPS
from ..curves.base import Curve, CurveLike, lower_bound_of, upper_bound_of
from ..errors import InvalidParameterError


logger = logging.getLogger(__name__)


class ForwardSwapRateCurve(Curve):
    """Curve of forward par swap rates."""

    def __init__(self, period: float, n_payments: int, discount: CurveLike):
        if period <= 0:
            raise InvalidParameterError(f"Period must be positive, got {period}")
        if int(n_payments) != n_payments:
            raise InvalidParameterError(
                f"Number of payments must be an integer, got {n_payments}"
            )
        if n_payments < 1:
            raise InvalidParameterError(f"Need at least one payment, got {n_payments}")
        self.period = float(period)
        self.n_payments = int(n_payments)
        self.discount = discount

    @property
    def min_time(self) -> float:
        return lower_bound_of(self.discount)

    @property
    def max_time(self) -> float:
        return upper_bound_of(self.discount) - self.n_payments * self.period

    def annuity(self, t: float) -> float:
        """Value at t0 of 1 paid per unit time on the fixed leg starting at t."""
        return self.period * sum(
            self.discount(t + (i + 1) * self.period) for i in range(self.n_payments)
        )

    def value(self, t: float) -> float:
        end = t + self.n_payments * self.period
        return (self.discount(t) - self.discount(end)) / self.annuity(t)

    def __repr__(self) -> str:
        return f"ForwardSwapRateCurve(period={self.period}, payments={self.n_payments})"


class ForwardLiborCurve(Curve):
    """Curve of forward LIBORs L(t, t + dt)."""

    def __init__(self, period: float, discount: CurveLike):
        if period < 0:
            raise InvalidParameterError(f"LIBOR period must be non-negative, got {period}")
        self.period = float(period)
        self.discount = discount

    @property
    def min_time(self) -> float:
        return lower_bound_of(self.discount)

    @property
    def max_time(self) -> float:
        return upper_bound_of(self.discount) - self.period

    def value(self, t: float) -> float:
        df_end = self.discount(t + self.period)
        if df_end < EPS:
            logger.warning(
                "Discount factor %.3e at %s floored at EPS in forward LIBOR",
                df_end, t + self.period
            )
            df_end = EPS
        ratio = self.discount(t) / df_end
        return (ratio - 1) / max(self.period, EPS)

    def __repr__(self) -> str:
        return f"ForwardLiborCurve(period={self.period})"


def forward_swap_rate(period: float, n_payments: int, discount: CurveLike) -> ForwardSwapRateCurve:
    """
    Curve of forward swap rates.

    Args:
        period: Time between swap payments
        n_payments: Number of payments
        discount: Discount curve

    Returns:
        Forward swap rate S(t) of the swap starting at t
    """
    return ForwardSwapRateCurve(period, n_payments, discount)


def forward_libor(period: float, discount: CurveLike) -> ForwardLiborCurve:
    """
    Curve of forward LIBORs.

    Args:
        period: LIBOR period dt
        discount: Discount curve

    Returns:
        Forward LIBOR L(t, t + dt)
    """
    return ForwardLiborCurve(period, discount)


__all__ = [
    "ForwardSwapRateCurve",
    "ForwardLiborCurve",
    "forward_swap_rate",
    "forward_libor",
]
