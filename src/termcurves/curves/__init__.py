"""
Curves package - yield, discount and interpolated curve construction.

Provides:
- Curve / BivariateCurve: abstractions shared by every curve
- Shape functions of Nelson-Siegel type models
- Yield <-> discount conversions
- Nelson-Siegel, Svensson and Vasicek model curves
- Interpolated discount, volatility and forward curves
"""

from .base import Curve, BivariateCurve, as_series
from .shapes import (
    shape1,
    shape2,
    scaled_shape1,
    ShapeCurve,
    yield_shape1,
    yield_shape2,
)
from .conversion import (
    YieldFromDiscountFactor,
    YieldCurveFromDiscount,
    DiscountCurveFromYield,
    CostOfCarryFromForward,
    yield_from_point,
    yield_from_curve,
    discount_from_yield,
    cost_of_carry,
)
from .nss import (
    NelsonSiegelYield,
    SvenssonYield,
    yield_nelson_siegel,
    discount_nelson_siegel,
    yield_svensson,
    discount_svensson,
)
from .vasicek import VasicekYield, yield_vasicek, discount_vasicek
from .interpolation import (
    PiecewiseCurve,
    YieldLinearDiscountCurve,
    LogLinearDiscountCurve,
    VarianceLinearVolatilityCurve,
    CarryLinearForwardCurve,
    discount_yield_lin_interp,
    discount_log_lin_interp,
    volatility_var_lin_interp,
    forward_carry_lin_interp,
    build_discount_curve,
)

__all__ = [
    "Curve",
    "BivariateCurve",
    "as_series",
    "shape1",
    "shape2",
    "scaled_shape1",
    "ShapeCurve",
    "yield_shape1",
    "yield_shape2",
    "YieldFromDiscountFactor",
    "YieldCurveFromDiscount",
    "DiscountCurveFromYield",
    "CostOfCarryFromForward",
    "yield_from_point",
    "yield_from_curve",
    "discount_from_yield",
    "cost_of_carry",
    "NelsonSiegelYield",
    "SvenssonYield",
    "yield_nelson_siegel",
    "discount_nelson_siegel",
    "yield_svensson",
    "discount_svensson",
    "VasicekYield",
    "yield_vasicek",
    "discount_vasicek",
    "PiecewiseCurve",
    "YieldLinearDiscountCurve",
    "LogLinearDiscountCurve",
    "VarianceLinearVolatilityCurve",
    "CarryLinearForwardCurve",
    "discount_yield_lin_interp",
    "discount_log_lin_interp",
    "volatility_var_lin_interp",
    "forward_carry_lin_interp",
    "build_discount_curve",
]
