"""
Domain models and value objects.

Contains fundamental domain entities like CaratType, PriceInputs,
PricingResult, MeasurementTriple, DateRange.
"""

from src.core.domain.carat import (
    CARAT_ORDER,
    DEFAULT_CARAT,
    DEFAULT_PURITIES,
    CaratType,
    CustomPrices,
    PriceInputs,
)
from src.core.domain.date_range import DateDifference, DateRange
from src.core.domain.measurement import MeasurementTriple, MeasurementType
from src.core.domain.pricing_result import PricingResult

__all__ = [
    # Carat module
    "CaratType",
    "CARAT_ORDER",
    "DEFAULT_CARAT",
    "DEFAULT_PURITIES",
    "CustomPrices",
    "PriceInputs",
    # Pricing result
    "PricingResult",
    # Measurement
    "MeasurementType",
    "MeasurementTriple",
    # Dates
    "DateRange",
    "DateDifference",
]
