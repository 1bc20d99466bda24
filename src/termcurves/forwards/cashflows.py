"""
Forward prices of fixed cash flows, coupon bonds and annuities.

The buyer of a forward contract pays F(t) at delivery time t and receives
the payments scheduled strictly after t:

    F(t) = sum_{t_i > t} P_i D(t_i) / D(t)

Coupon bonds and annuities pay q * dt on dates stepped backward from
maturity; the bond also repays the notional at maturity. Clean prices
subtract the interest accrued since the last payment date.
"""

import logging
from typing import Sequence, Union
import numpy as np

from ..conventions import CashFlowSchedule, PriceType
from ..curves.base import Curve, CurveLike, as_series, lower_bound_of


logger = logging.getLogger(__name__)


class CashFlowForwardCurve(Curve):
    """Forward price curve of a fixed cash flow."""

    def __init__(
        self,
        payments: Sequence[float],
        payment_times: Sequence[float],
        discount: CurveLike
    ):
        self.payment_times, self.payments = as_series(payment_times, payments, strict=False)
        self.discount = discount

        logger.debug(
            "Built cash flow forward on %d payments up to %s",
            len(self.payments), self.payment_times[-1]
        )

    @property
    def min_time(self) -> float:
        return lower_bound_of(self.discount)

    @property
    def max_time(self) -> float:
        return float(self.payment_times[-1])

    def value(self, t: float) -> float:
        first = int(np.searchsorted(self.payment_times, t, side='right'))
        pv = sum(
            p * self.discount(float(ti))
            for p, ti in zip(self.payments[first:], self.payment_times[first:])
        )
        return pv / self.discount(t)


class FixedLegForwardCurve(Curve):
    """
    Forward price curve of a coupon bond (with notional) or an annuity.

    Attributes:
        schedule: Coupon schedule
        discount: Discount curve
        price_type: CLEAN or DIRTY
        include_notional: Whether the notional is repaid at maturity
    """

    def __init__(
        self,
        schedule: CashFlowSchedule,
        discount: CurveLike,
        price_type: PriceType = PriceType.DIRTY,
        include_notional: bool = True
    ):
        self.schedule = schedule
        self.discount = discount
        self.price_type = price_type
        self.include_notional = include_notional

    @property
    def min_time(self) -> float:
        return lower_bound_of(self.discount)

    @property
    def max_time(self) -> float:
        return self.schedule.maturity

    def value(self, t: float) -> float:
        schedule = self.schedule
        annuity = sum(self.discount(ti) for ti in schedule.payment_times(t))
        pv = schedule.coupon * annuity
        if self.include_notional:
            pv += schedule.notional * self.discount(schedule.maturity)

        price = pv / self.discount(t)
        if self.price_type == PriceType.CLEAN:
            price -= schedule.accrued(t)
        return price

    def __repr__(self) -> str:
        kind = "CouponBond" if self.include_notional else "Annuity"
        return (f"{kind}Forward(rate={self.schedule.rate}, period={self.schedule.period}, "
                f"maturity={self.schedule.maturity}, {self.price_type.value})")


def forward_cash_flow(
    payments: Sequence[float],
    payment_times: Sequence[float],
    discount: CurveLike
) -> CashFlowForwardCurve:
    """
    Forward price curve for a cash flow.

    Args:
        payments: Payment amounts P_i
        payment_times: Payment times t_i, sorted ascending
        discount: Discount curve

    Returns:
        Forward prices F(t) for t up to the last payment time
    """
    return CashFlowForwardCurve(payments, payment_times, discount)


def forward_coupon_bond(
    rate: float,
    period: float,
    maturity: float,
    discount: CurveLike,
    clean: Union[bool, str, PriceType] = False,
    notional: float = 1.0
) -> FixedLegForwardCurve:
    """
    Forward price curve ("clean" or "dirty") for a coupon bond.

    Args:
        rate: Coupon rate q
        period: Time between coupons
        maturity: Maturity T (last coupon and notional repayment)
        discount: Discount curve
        clean: Clean prices if true (or CLEAN), dirty otherwise
        notional: Notional N

    Returns:
        Forward price curve for t <= T
    """
    schedule = CashFlowSchedule(rate, period, maturity, notional)
    return FixedLegForwardCurve(schedule, discount, PriceType.coerce(clean), include_notional=True)


def forward_annuity(
    rate: float,
    period: float,
    maturity: float,
    discount: CurveLike,
    clean: Union[bool, str, PriceType] = False,
    notional: float = 1.0
) -> FixedLegForwardCurve:
    """
    Forward price curve ("clean" or "dirty") for an annuity.

    Same schedule as a coupon bond without the notional repayment.
    """
    schedule = CashFlowSchedule(rate, period, maturity, notional)
    return FixedLegForwardCurve(schedule, discount, PriceType.coerce(clean), include_notional=False)


__all__ = [
    "CashFlowForwardCurve",
    "FixedLegForwardCurve",
    "forward_cash_flow",
    "forward_coupon_bond",
    "forward_annuity",
]
