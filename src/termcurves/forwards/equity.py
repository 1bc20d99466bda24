"""
Forward prices of a dividend paying stock.

The buyer pays F(t) at delivery time t and receives the stock; a dividend
paid exactly at t goes to the buyer. Entering the contract at t0 costs
nothing, so

    F(t) = S0 / D(t) - sum_{t_i <= t} d_i D(t_i) / D(t).
"""

import logging
from typing import Sequence
import numpy as np

from ..curves.base import Curve, CurveLike, as_series, lower_bound_of
from ..errors import InvalidParameterError


logger = logging.getLogger(__name__)


class StockDividendForwardCurve(Curve):
    """Forward price curve of a stock paying discrete dividends."""

    def __init__(
        self,
        spot: float,
        dividend_times: Sequence[float],
        dividends: Sequence[float],
        discount: CurveLike
    ):
        if spot <= 0:
            raise InvalidParameterError(f"Spot price must be positive, got {spot}")
        self.spot = float(spot)
        self.dividend_times, self.dividends = as_series(dividend_times, dividends, strict=False)
        self.discount = discount

        logger.debug(
            "Built stock forward with %d dividends up to %s",
            len(self.dividends), self.dividend_times[-1]
        )

    @property
    def min_time(self) -> float:
        return lower_bound_of(self.discount)

    @property
    def max_time(self) -> float:
        return float(self.dividend_times[-1])

    def value(self, t: float) -> float:
        df = self.discount(t)
        paid = int(np.searchsorted(self.dividend_times, t, side='right'))
        carried = sum(
            d * self.discount(float(ti)) / df
            for d, ti in zip(self.dividends[:paid], self.dividend_times[:paid])
        )
        return self.spot / df - carried


def forward_stock_dividends(
    spot: float,
    dividend_times: Sequence[float],
    dividends: Sequence[float],
    discount: CurveLike
) -> StockDividendForwardCurve:
    """
    Forward price curve for a dividend paying stock.

    Args:
        spot: Spot price S0
        dividend_times: Dividend times, sorted ascending
        dividends: Dividend amounts
        discount: Discount curve

    Returns:
        Forward prices F(t) for t up to the last dividend time
    """
    return StockDividendForwardCurve(spot, dividend_times, dividends, discount)


__all__ = [
    "StockDividendForwardCurve",
    "forward_stock_dividends",
]
