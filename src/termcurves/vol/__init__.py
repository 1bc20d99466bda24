"""
Volatility and cost-of-carry curves of Black and Hull-White models.
"""

from .black import BlackCarryCurve, BlackVolatilityCurve, carry_black, volatility_black
from .hull_white import HullWhiteVolatility, volatility_hull_white
from .variance import VolatilityFromVariance, volatility_from_variance

__all__ = [
    "BlackCarryCurve",
    "BlackVolatilityCurve",
    "carry_black",
    "volatility_black",
    "HullWhiteVolatility",
    "volatility_hull_white",
    "VolatilityFromVariance",
    "volatility_from_variance",
]
