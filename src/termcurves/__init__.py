"""
TermCurves: Closed-form Term Structure Curves for Fixed Income & Derivatives

A library of curve builders, each returning an immutable function of time:
- Yield and discount curves (Nelson-Siegel, Svensson, Vasicek)
- Interpolated curves from market points (linear yield, log-linear
  discount, volatility, cost-of-carry)
- Volatility and carry curves (Black, Hull-White)
- Forward-pricing curves (cash flows, coupon bonds, annuities, stocks,
  swap rates, FX, LIBOR) built on any discount curve

Scope: closed-form construction only; no calibration or root-finding.
"""

__version__ = "0.1.0"

# Core modules
from .conventions import EPS, PriceType, CashFlowSchedule
from .errors import (
    CurveError,
    InvalidParameterError,
    MalformedSeriesError,
    OutOfDomainError,
)

# Curves
from .curves import (
    Curve,
    BivariateCurve,
    shape1,
    shape2,
    yield_shape1,
    yield_shape2,
    yield_from_point,
    yield_from_curve,
    discount_from_yield,
    cost_of_carry,
    yield_nelson_siegel,
    discount_nelson_siegel,
    yield_svensson,
    discount_svensson,
    yield_vasicek,
    discount_vasicek,
    discount_yield_lin_interp,
    discount_log_lin_interp,
    volatility_var_lin_interp,
    forward_carry_lin_interp,
    build_discount_curve,
)

# Volatility
from .vol import (
    carry_black,
    volatility_black,
    volatility_hull_white,
    volatility_from_variance,
)

# Forwards
from .forwards import (
    forward_cash_flow,
    forward_coupon_bond,
    forward_annuity,
    forward_stock_dividends,
    forward_swap_rate,
    forward_libor,
    forward_fx,
    forward_fx_curve,
)

# Reporting
from .reporting import CurveFormatter, curve_table, series_table, export_to_csv

__all__ = [
    # Version
    "__version__",
    # Conventions
    "EPS",
    "PriceType",
    "CashFlowSchedule",
    # Errors
    "CurveError",
    "InvalidParameterError",
    "MalformedSeriesError",
    "OutOfDomainError",
    # Curves
    "Curve",
    "BivariateCurve",
    "shape1",
    "shape2",
    "yield_shape1",
    "yield_shape2",
    "yield_from_point",
    "yield_from_curve",
    "discount_from_yield",
    "cost_of_carry",
    "yield_nelson_siegel",
    "discount_nelson_siegel",
    "yield_svensson",
    "discount_svensson",
    "yield_vasicek",
    "discount_vasicek",
    "discount_yield_lin_interp",
    "discount_log_lin_interp",
    "volatility_var_lin_interp",
    "forward_carry_lin_interp",
    "build_discount_curve",
    # Volatility
    "carry_black",
    "volatility_black",
    "volatility_hull_white",
    "volatility_from_variance",
    # Forwards
    "forward_cash_flow",
    "forward_coupon_bond",
    "forward_annuity",
    "forward_stock_dividends",
    "forward_swap_rate",
    "forward_libor",
    "forward_fx",
    "forward_fx_curve",
    # Reporting
    "CurveFormatter",
    "curve_table",
    "series_table",
    "export_to_csv",
]
