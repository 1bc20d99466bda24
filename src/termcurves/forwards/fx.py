"""
Forward exchange rates (units of domestic currency per unit of foreign):

    F(t) = S0 * D_for(t) / D_dom(t)

The domestic discount factor is floored at EPS.
"""

import logging

from ..conventions import EPS
from ..curves.base import BivariateCurve, Curve, CurveLike, lower_bound_of, upper_bound_of
from ..errors import InvalidParameterError


logger = logging.getLogger(__name__)


def _fx_forward(spot: float, domestic_df: float, foreign_df: float) -> float:
    if domestic_df < EPS:
        logger.warning("Domestic discount factor %.3e floored at EPS", domestic_df)
        domestic_df = EPS
    return spot * foreign_df / domestic_df


class FXForwardFromDiscountFactors(BivariateCurve):
    """Forward FX rate as a function of (domestic, foreign) discount factors."""

    def __init__(self, spot: float):
        if spot <= 0:
            raise InvalidParameterError(f"Spot FX rate must be positive, got {spot}")
        self.spot = float(spot)

    def __call__(self, domestic_df: float, foreign_df: float) -> float:
        return _fx_forward(self.spot, domestic_df, foreign_df)

    def __repr__(self) -> str:
        return f"FXForwardFromDiscountFactors(spot={self.spot})"


class FXForwardCurve(Curve):
    """Forward FX rate curve from domestic and foreign discount curves."""

    def __init__(self, spot: float, domestic: CurveLike, foreign: CurveLike):
        if spot <= 0:
            raise InvalidParameterError(f"Spot FX rate must be positive, got {spot}")
        self.spot = float(spot)
        self.domestic = domestic
        self.foreign = foreign

    @property
    def min_time(self) -> float:
        return max(lower_bound_of(self.domestic), lower_bound_of(self.foreign))

    @property
    def max_time(self) -> float:
        return min(upper_bound_of(self.domestic), upper_bound_of(self.foreign))

    def value(self, t: float) -> float:
        return _fx_forward(self.spot, self.domestic(t), self.foreign(t))


def forward_fx(spot: float) -> FXForwardFromDiscountFactors:
    """
    Forward FX rate from spot and a pair of discount factors.

    Args:
        spot: Spot exchange rate S0

    Returns:
        Function (domestic_df, foreign_df) -> forward exchange rate
    """
    return FXForwardFromDiscountFactors(spot)


def forward_fx_curve(spot: float, domestic: CurveLike, foreign: CurveLike) -> FXForwardCurve:
    """
    Forward exchange rate curve.

    Args:
        spot: Spot exchange rate S0
        domestic: Domestic discount curve
        foreign: Foreign discount curve

    Returns:
        Forward exchange rate curve F(t)
    """
    return FXForwardCurve(spot, domestic, foreign)


__all__ = [
    "FXForwardFromDiscountFactors",
    "FXForwardCurve",
    "forward_fx",
    "forward_fx_curve",
]
