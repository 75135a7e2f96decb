"""
PriceEngine — Цены каратов из базовой цены 24K

Цена карата за 10 г выводится из цены 24K и процента чистоты:
    carat_price = round_half_up(base_price * purity / 100)

Пользовательская цена (override), если она разбирается в положительное
число, всегда имеет приоритет над вычисленной. Правило одинаково для
всех четырёх каратов.

Ограничение чистоты диапазоном [0, 100] — политика вызывающего кода
(resolve_purity(clamp=...)), а не часть формулы.
"""

from typing import Final, Mapping

from src.core.domain.carat import (
    CARAT_ORDER,
    DEFAULT_PURITIES,
    CaratType,
    CustomPrices,
    PriceInputs,
)
from src.core.math.input_sanitizer import MIN_VALUE, to_number
from src.core.math.numerical_safeguards import clamp, is_valid_float, round_half_up

# =============================================================================
# CONSTANTS
# =============================================================================

# Максимальная чистота (%), 24K
MAX_PURITY: Final[float] = 100.0


# =============================================================================
# PURITY
# =============================================================================


def resolve_purity(text: str | None, default: float, clamp_purity: bool = True) -> float:
    """
    Чистота карата из текста поля.

    Args:
        text: Текст поля чистоты
        default: Чистота по умолчанию для невалидного ввода
        clamp_purity: Ограничивать ли результат диапазоном [0, 100]

    Returns:
        Чистота в процентах

    Examples:
        >>> resolve_purity("150", 92.0)
        100.0
        >>> resolve_purity("150", 92.0, clamp_purity=False)
        150.0
        >>> resolve_purity("", 92.0)
        92.0
    """
    value = to_number(text, default)
    if clamp_purity:
        return clamp(value, MIN_VALUE, MAX_PURITY)
    return value


# =============================================================================
# CARAT PRICES
# =============================================================================


def compute_carat_price(base_price: float, purity_percent: float) -> int:
    """
    Вычисленная цена карата за 10 г.

    Args:
        base_price: Цена 24K за 10 г (>= 0)
        purity_percent: Чистота карата (%)

    Returns:
        round_half_up(base_price * purity_percent / 100); 0 для NaN/Inf

    Examples:
        >>> compute_carat_price(70000, 92)
        64400
        >>> compute_carat_price(1005, 50)
        503
    """
    raw = base_price * purity_percent / 100
    if not is_valid_float(raw):
        return 0
    return round_half_up(raw)


def effective_carat_price(computed: int, custom_override: str | None) -> int | float:
    """
    Итоговая цена карата с учётом пользовательской цены.

    Args:
        computed: Вычисленная цена (compute_carat_price)
        custom_override: Текст пользовательской цены (или None)

    Returns:
        Пользовательская цена, если она > 0, иначе computed

    Examples:
        >>> effective_carat_price(64400, "65000")
        65000.0
        >>> effective_carat_price(64400, "0")
        64400
        >>> effective_carat_price(64400, None)
        64400
    """
    custom = to_number(custom_override or "", 0.0)
    if custom > 0:
        return custom
    return computed


def carat_price(inputs: PriceInputs, carat: CaratType) -> int | float:
    """
    Цена одного карата за 10 г с учётом override.

    Args:
        inputs: Базовая цена, чистоты и пользовательские цены
        carat: Карат

    Returns:
        Цена за 10 г
    """
    computed = compute_carat_price(inputs.base_price, inputs.purity(carat))
    return effective_carat_price(computed, inputs.custom_prices.get(carat))


def compute_all_carat_prices(inputs: PriceInputs) -> dict[CaratType, int | float]:
    """
    Цены всех каратов за 10 г в порядке отображения.

    Args:
        inputs: Базовая цена, чистоты и пользовательские цены

    Returns:
        {CaratType: цена за 10 г}
    """
    return {carat: carat_price(inputs, carat) for carat in CARAT_ORDER}


def price_inputs_from_text(
    base_price_text: str,
    purity_texts: Mapping[CaratType, str],
    custom_prices: CustomPrices,
    default_purities: Mapping[CaratType, float] = DEFAULT_PURITIES,
    clamp_purity: bool = True,
) -> PriceInputs:
    """
    PriceInputs из текста полей калькулятора.

    Args:
        base_price_text: Текст поля цены 24K (невалидный → 0)
        purity_texts: Текст полей чистоты по каратам
        custom_prices: Пользовательские цены
        default_purities: Чистота по умолчанию для невалидного ввода
        clamp_purity: Ограничивать ли чистоту диапазоном [0, 100]

    Returns:
        PriceInputs
    """
    purities = {
        carat: resolve_purity(
            purity_texts.get(carat), default_purities[carat], clamp_purity=clamp_purity
        )
        for carat in CARAT_ORDER
    }
    return PriceInputs(
        base_price=to_number(base_price_text, 0.0),
        purity_9k=purities[CaratType.K9],
        purity_18k=purities[CaratType.K18],
        purity_20k=purities[CaratType.K20],
        purity_22k=purities[CaratType.K22],
        custom_prices=custom_prices,
    )
