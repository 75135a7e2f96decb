"""
Calculators — состояние экранов калькулятора поверх расчётного ядра.

- GoldCalculator: цены каратов и стоимость изделия (три варианта работы)
- AdvancedCalculator: обратный расчёт, конвертер веса, разница дат
"""

from .advanced_calculator import (
    AdvancedCalculator,
    AdvancedCalculatorConfig,
    DateField,
    ScreenMode,
)
from .formatting import (
    build_rate_sheet,
    format_date_label,
    format_price,
    format_short_date,
)
from .gold_calculator import GoldCalculator, GoldCalculatorConfig

__all__ = [
    "GoldCalculator",
    "GoldCalculatorConfig",
    "AdvancedCalculator",
    "AdvancedCalculatorConfig",
    "ScreenMode",
    "DateField",
    "build_rate_sheet",
    "format_date_label",
    "format_price",
    "format_short_date",
]
