"""
Forward-pricing curves derived from discount curves.

Provides forward prices of cash flows, coupon bonds, annuities and dividend
paying stocks, and forward swap rates, LIBORs and exchange rates.
"""

from .cashflows import (
    CashFlowForwardCurve,
    FixedLegForwardCurve,
    forward_cash_flow,
    forward_coupon_bond,
    forward_annuity,
)
from .equity import StockDividendForwardCurve, forward_stock_dividends
from .rates import ForwardSwapRateCurve, ForwardLiborCurve, forward_swap_rate, forward_libor
from .fx import FXForwardFromDiscountFactors, FXForwardCurve, forward_fx, forward_fx_curve

__all__ = [
    "CashFlowForwardCurve",
    "FixedLegForwardCurve",
    "forward_cash_flow",
    "forward_coupon_bond",
    "forward_annuity",
    "StockDividendForwardCurve",
    "forward_stock_dividends",
    "ForwardSwapRateCurve",
    "ForwardLiborCurve",
    "forward_swap_rate",
    "forward_libor",
    "FXForwardFromDiscountFactors",
    "FXForwardCurve",
    "forward_fx",
    "forward_fx_curve",
]
