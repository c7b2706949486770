"""
Mortality and discount providers.

The core consumes these through the MortalityProvider and DiscountProvider
interfaces; the concrete classes here are in-memory reference providers.
"""

from .base import DiscountProvider, MortalityProvider
from .discount import (
    ConstantRate,
    DiscountModel,
    DiscountVector,
    InterpolationMethod,
    YieldCurve,
    YieldCurveLoader,
)
from .mortality import (
    FractionalAssumption,
    MortalityLoader,
    MortalityTable,
)

__all__ = [
    # Interfaces
    "MortalityProvider",
    "DiscountProvider",
    # Mortality
    "FractionalAssumption",
    "MortalityTable",
    "MortalityLoader",
    # Discount
    "DiscountModel",
    "ConstantRate",
    "DiscountVector",
    "YieldCurve",
    "YieldCurveLoader",
    "InterpolationMethod",
]
