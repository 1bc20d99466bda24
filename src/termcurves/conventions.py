"""
Numerical and cash-flow conventions shared by all curve builders.

Provides:
- EPS: threshold for removable singularities and epsilon floors
- PriceType: clean/dirty quotation of coupon instruments
- CashFlowSchedule: fixed-leg schedule (rate, period, maturity, notional)

Times are year fractions on a common axis; every curve is anchored at an
initial time t0 on that axis.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from .errors import InvalidParameterError


EPS = 1e-10


class PriceType(Enum):
    """Quotation convention for forward prices of coupon instruments."""
    CLEAN = "Clean"
    DIRTY = "Dirty"

    @classmethod
    def from_string(cls, s: str) -> "PriceType":
        """Parse price type from string representation."""
        key = s.strip().upper()
        if key == "CLEAN":
            return cls.CLEAN
        if key == "DIRTY":
            return cls.DIRTY
        raise ValueError(f"Unknown price type: {s}")

    @classmethod
    def coerce(cls, value: Union["PriceType", str, bool]) -> "PriceType":
        """Accept a PriceType, its name, or a bool meaning 'clean'."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        return cls.CLEAN if value else cls.DIRTY


@dataclass(frozen=True)
class CashFlowSchedule:
    """
    Fixed-leg schedule paying rate * period * notional every period.

    Payment dates are obtained by stepping backward from maturity, so the
    first coupon period may be short:

        t_M = maturity, t_{i} = t_{i+1} - period

    Attributes:
        rate: Coupon rate (per unit time)
        period: Time between payments
        maturity: Last payment time
        notional: Notional amount (paid at maturity for bonds)
    """
    rate: float
    period: float
    maturity: float
    notional: float = 1.0

    def __post_init__(self):
        if self.period <= 0:
            raise InvalidParameterError(f"Period must be positive, got {self.period}")
        if self.notional < 0:
            raise InvalidParameterError(f"Notional must be non-negative, got {self.notional}")

    @property
    def coupon(self) -> float:
        """Amount paid on each payment date."""
        return self.notional * self.rate * self.period

    def payment_times(self, t: float) -> List[float]:
        """
        Payment times strictly after t, in ascending order.

        Args:
            t: Evaluation time

        Returns:
            Payment times t_i > t
        """
        times = []
        k = 0
        pay_time = self.maturity
        while pay_time > t:
            times.append(pay_time)
            k += 1
            pay_time = self.maturity - k * self.period
        times.reverse()
        return times

    def last_payment_time(self, t: float) -> float:
        """
        First date reached by stepping backward from maturity that is <= t.

        When t precedes the first payment this is the start of the first
        (possibly short) coupon period, which may lie before t0.
        """
        k = 0
        pay_time = self.maturity
        while pay_time > t:
            k += 1
            pay_time = self.maturity - k * self.period
        return pay_time

    def accrued(self, t: float) -> float:
        """Accrued interest at time t since the last payment."""
        return self.notional * self.rate * (t - self.last_payment_time(t))


__all__ = [
    "EPS",
    "PriceType",
    "CashFlowSchedule",
]
