"""
Core math modules для калькулятора цен золота

Расчётные примитивы: очистка ввода, цены каратов, прямой и обратный
расчёт стоимости, конвертация единиц веса, разница дат.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Safe division
    safe_divide,
    # NaN/Inf sanitization
    is_valid_float,
    sanitize_float,
    # Rounding
    round_half_up,
    # Utilities
    clamp,
    # Validation
    validate_non_negative,
)

# Numeric Input Sanitizer
from src.core.math.input_sanitizer import (
    MIN_VALUE,
    parse_leading_float,
    sanitize_text,
    to_number,
)

# Price Engine
from src.core.math.carat_prices import (
    MAX_PURITY,
    carat_price,
    compute_all_carat_prices,
    compute_carat_price,
    effective_carat_price,
    price_inputs_from_text,
    resolve_purity,
)

# Forward / Reverse Pricing
from src.core.math.pricing import (
    DEFAULT_GST_PERCENT,
    DEFAULT_MAKING_CHARGE_PERCENTS,
    GRAMS_PER_PRICE_UNIT,
    calculate_final_price,
    calculate_price_tiers,
    calculate_weight_from_price,
    percent_to_fraction,
)

# Unit Converter
from src.core.math.unit_conversion import (
    CARAT_GRAMS,
    DISPLAY_DECIMALS,
    RATTI_GRAMS,
    convert_measurement,
    format_measurement,
    from_carat,
    from_ratti,
    from_weight,
)

# Date Difference
from src.core.math.date_difference import (
    add_months_rollover,
    calculate_date_difference,
    calculate_range_difference,
    days_in_year,
    is_leap_year,
    truncate_to_date,
)

__all__ = [
    # Numerical Safeguards — Functions
    "safe_divide",
    "is_valid_float",
    "sanitize_float",
    "round_half_up",
    "clamp",
    "validate_non_negative",
    # Input Sanitizer
    "MIN_VALUE",
    "parse_leading_float",
    "sanitize_text",
    "to_number",
    # Price Engine
    "MAX_PURITY",
    "carat_price",
    "compute_all_carat_prices",
    "compute_carat_price",
    "effective_carat_price",
    "price_inputs_from_text",
    "resolve_purity",
    # Pricing — Constants
    "DEFAULT_GST_PERCENT",
    "DEFAULT_MAKING_CHARGE_PERCENTS",
    "GRAMS_PER_PRICE_UNIT",
    # Pricing — Functions
    "calculate_final_price",
    "calculate_price_tiers",
    "calculate_weight_from_price",
    "percent_to_fraction",
    # Unit Converter
    "CARAT_GRAMS",
    "DISPLAY_DECIMALS",
    "RATTI_GRAMS",
    "convert_measurement",
    "format_measurement",
    "from_carat",
    "from_ratti",
    "from_weight",
    # Date Difference
    "add_months_rollover",
    "calculate_date_difference",
    "calculate_range_difference",
    "days_in_year",
    "is_leap_year",
    "truncate_to_date",
]
