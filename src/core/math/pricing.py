"""
Pricing — Прямой и обратный расчёт цены золотого изделия

ПРЯМОЙ РАСЧЁТ (вес → цена), каждый шаг округляется до следующего:
    price_per_gram = carat_price_per_10g / 10          (без округления)
    gold_price     = round(price_per_gram * weight)
    making_charges = round(gold_price * making% / 100)
    subtotal       = gold_price + making_charges       (точная сумма целых)
    gst_amount     = round(subtotal * gst% / 100)
    total          = subtotal + gst_amount

ОБРАТНЫЙ РАСЧЁТ (цена → вес), без промежуточного округления:
    price_before_gst = final / (1 + gst% / 100)
    gold_price_real  = price_before_gst / (1 + making% / 100)
    weight           = gold_price_real / (carat_price_per_10g / 10)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Асимметрия округления сохраняется: forward → reverse не возвращает
   исходный вес точно (только в пределах малой толерантности)
2. Ни один расчёт не бросает исключение: вырожденный ввод → нулевой результат
3. total == gold_price + making_charges + gst_amount точно
"""

from typing import Final

from src.core.domain.pricing_result import PricingResult
from src.core.math.numerical_safeguards import (
    is_valid_float,
    round_half_up,
    safe_divide,
)

# =============================================================================
# CONSTANTS
# =============================================================================

# Цены каратов задаются за 10 грамм
GRAMS_PER_PRICE_UNIT: Final[float] = 10.0

# Значения по умолчанию калькуляторов
DEFAULT_MAKING_CHARGE_PERCENTS: Final[tuple[float, float, float]] = (10.0, 12.0, 15.0)
DEFAULT_GST_PERCENT: Final[float] = 3.0


def percent_to_fraction(percent: float) -> float:
    """
    Конверсия процента в дробь.

    Args:
        percent: Процент (например, 3 = 3%)

    Returns:
        Дробь (например, 3 → 0.03)
    """
    return percent / 100.0


# =============================================================================
# ПРЯМОЙ РАСЧЁТ
# =============================================================================


def calculate_final_price(
    weight_grams: float,
    carat_price_per_10g: float,
    making_charge_percent: float,
    gst_percent: float,
) -> PricingResult:
    """
    Цена изделия по весу, цене карата, проценту работы и GST.

    Args:
        weight_grams: Вес изделия (г, >= 0)
        carat_price_per_10g: Цена выбранного карата за 10 г (>= 0)
        making_charge_percent: Стоимость работы (% от стоимости золота)
        gst_percent: GST (% от стоимости золота + работы)

    Returns:
        PricingResult; нулевой результат при невалидной цене карата
        или невалидном промежуточном значении

    Examples:
        >>> r = calculate_final_price(10, 64400, 10, 3)
        >>> (r.gold_price, r.making_charges, r.gst_amount, r.total)
        (64400, 6440, 2125, 72965)
    """
    if not is_valid_float(carat_price_per_10g) or carat_price_per_10g < 0:
        return PricingResult.zero()

    price_per_gram = carat_price_per_10g / GRAMS_PER_PRICE_UNIT

    raw_gold = price_per_gram * weight_grams
    if not is_valid_float(raw_gold):
        return PricingResult.zero()
    gold_price = round_half_up(raw_gold)

    raw_making = gold_price * making_charge_percent / 100
    if not is_valid_float(raw_making):
        return PricingResult.zero()
    making_charges = round_half_up(raw_making)

    subtotal = gold_price + making_charges

    raw_gst = subtotal * gst_percent / 100
    if not is_valid_float(raw_gst):
        return PricingResult.zero()
    gst_amount = round_half_up(raw_gst)

    if min(gold_price, making_charges, gst_amount) < 0:
        # Отрицательный вес или процент → нулевой результат
        return PricingResult.zero()

    return PricingResult(
        gold_price=gold_price,
        making_charges=making_charges,
        gst_amount=gst_amount,
        total=subtotal + gst_amount,
    )


def calculate_price_tiers(
    weight_grams: float,
    carat_price_per_10g: float,
    making_charge_percents: tuple[float, ...],
    gst_percent: float,
) -> list[PricingResult]:
    """
    Прямой расчёт для нескольких вариантов стоимости работы.

    Args:
        weight_grams: Вес изделия (г)
        carat_price_per_10g: Цена карата за 10 г
        making_charge_percents: Варианты стоимости работы (%)
        gst_percent: GST (%)

    Returns:
        Список PricingResult в порядке making_charge_percents
    """
    return [
        calculate_final_price(weight_grams, carat_price_per_10g, making, gst_percent)
        for making in making_charge_percents
    ]


# =============================================================================
# ОБРАТНЫЙ РАСЧЁТ
# =============================================================================


def calculate_weight_from_price(
    final_price: float,
    making_charge_percent: float,
    gst_percent: float,
    carat_price_per_10g: float,
) -> float:
    """
    Вес изделия по итоговой цене (обратный к calculate_final_price).

    Промежуточного округления нет, поэтому результат не совпадает с весом,
    из которого была получена final_price прямым расчётом, точно.

    Args:
        final_price: Итоговая цена с работой и GST (>= 0)
        making_charge_percent: Стоимость работы (%)
        gst_percent: GST (%)
        carat_price_per_10g: Цена карата за 10 г (>= 0)

    Returns:
        Вес в граммах (без округления); 0 для вырожденного ввода

    Examples:
        >>> round(calculate_weight_from_price(72965, 10, 3, 64400), 3)
        10.0
        >>> calculate_weight_from_price(0, 10, 3, 64400)
        0.0
    """
    if final_price == 0 or carat_price_per_10g == 0:
        return 0.0

    price_before_gst = safe_divide(final_price, 1 + percent_to_fraction(gst_percent))
    gold_price_real = safe_divide(
        price_before_gst, 1 + percent_to_fraction(making_charge_percent)
    )
    price_per_gram = carat_price_per_10g / GRAMS_PER_PRICE_UNIT
    weight = safe_divide(gold_price_real, price_per_gram)

    if not is_valid_float(weight) or weight <= 0:
        return 0.0

    return weight
