"""
UnitConverter — Конверсия веса между граммами, каратами и ратти

Единственный допустимый способ преобразований между:
- weight (граммы)
- carat (метрический карат, 0.2 г)
- ratti (традиционная единица, 0.12125 г)

Ведущим за одно обновление является одно поле; два других пересчитываются
из него. Нулевое или невалидное ведущее значение очищает два других поля
(пустая строка, а не "0").
"""

from typing import Final

from src.core.domain.measurement import MeasurementTriple, MeasurementType
from src.core.math.input_sanitizer import sanitize_text, to_number

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Грамм в одном карате
CARAT_GRAMS: Final[float] = 0.2

# Грамм в одном ратти
RATTI_GRAMS: Final[float] = 0.12125

# Знаков после запятой для вычисленных полей дисплея
DISPLAY_DECIMALS: Final[int] = 4


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def from_weight(grams: float) -> tuple[float, float]:
    """
    Конверсия: граммы → (караты, ратти)

    Examples:
        >>> carat, ratti = from_weight(1.0)
        >>> carat, round(ratti, 4)
        (5.0, 8.2474)
    """
    return grams / CARAT_GRAMS, grams / RATTI_GRAMS


def from_carat(carats: float) -> tuple[float, float]:
    """
    Конверсия: караты → (граммы, ратти)

    Examples:
        >>> grams, ratti = from_carat(5.0)
        >>> grams, round(ratti, 4)
        (1.0, 8.2474)
    """
    grams = carats * CARAT_GRAMS
    return grams, grams / RATTI_GRAMS


def from_ratti(rattis: float) -> tuple[float, float]:
    """
    Конверсия: ратти → (граммы, караты)
    """
    grams = rattis * RATTI_GRAMS
    return grams, grams / CARAT_GRAMS


# =============================================================================
# КОНВЕРТЕР ДИСПЛЕЯ
# =============================================================================


def format_measurement(value: float) -> str:
    """Форматирование вычисленного поля (4 знака после запятой)"""
    return f"{value:.{DISPLAY_DECIMALS}f}"


def convert_measurement(measurement_type: MeasurementType, text: str) -> MeasurementTriple:
    """
    Пересчёт трёх полей конвертера по введённому полю.

    Args:
        measurement_type: Какое поле редактирует пользователь
        text: Текст, введённый в это поле

    Returns:
        MeasurementTriple: ведущее поле — очищенный текст, остальные —
        вычисленные значения (4 знака) или "" при значении <= 0

    Examples:
        >>> t = convert_measurement(MeasurementType.CARAT, "5")
        >>> (t.weight, t.carat, t.ratti)
        ('1.0000', '5', '8.2474')
    """
    sanitized = sanitize_text(text)
    value = to_number(sanitized, 0.0)

    if measurement_type == MeasurementType.WEIGHT:
        if value > 0:
            carat, ratti = from_weight(value)
            return MeasurementTriple(
                weight=sanitized,
                carat=format_measurement(carat),
                ratti=format_measurement(ratti),
                driving=measurement_type,
            )
        return MeasurementTriple(weight=sanitized, driving=measurement_type)

    if measurement_type == MeasurementType.CARAT:
        if value > 0:
            grams, ratti = from_carat(value)
            return MeasurementTriple(
                weight=format_measurement(grams),
                carat=sanitized,
                ratti=format_measurement(ratti),
                driving=measurement_type,
            )
        return MeasurementTriple(carat=sanitized, driving=measurement_type)

    if value > 0:
        grams, carat = from_ratti(value)
        return MeasurementTriple(
            weight=format_measurement(grams),
            carat=format_measurement(carat),
            ratti=sanitized,
            driving=measurement_type,
        )
    return MeasurementTriple(ratti=sanitized, driving=measurement_type)
