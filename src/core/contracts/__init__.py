"""
Contract Validation Module

Валидация сохраняемых значений (базовая цена, пользовательские цены)
по JSON Schema контрактам.
"""

from .validators import (
    BasePriceValidator,
    ContractValidator,
    CustomPricesValidator,
    SchemaLoader,
)

__all__ = [
    "SchemaLoader",
    "ContractValidator",
    "BasePriceValidator",
    "CustomPricesValidator",
]
