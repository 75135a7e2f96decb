"""Форматирование текстов калькулятора: сводка курсов и подписи дат.

Названия дней и месяцев фиксированы (английские), независимо от локали
процесса.
"""

from datetime import date
from typing import Final, Mapping

from src.core.domain.carat import CARAT_ORDER, CaratType

CURRENCY_SYMBOL: Final[str] = "₹"

_DAY_NAMES: Final[tuple[str, ...]] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_MONTH_NAMES: Final[tuple[str, ...]] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_price(value: float) -> str:
    """Цена без лишней дробной части: 64400.0 → "64400", 61000.5 → "61000.5"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_short_date(value: date) -> str:
    """Дата вида "05 Mar 2025"."""
    return f"{value.day:02d} {_MONTH_NAMES[value.month - 1]} {value.year}"


def format_date_label(value: date) -> str:
    """Подпись даты калькулятора.

    Examples:
        >>> format_date_label(date(2024, 1, 1))
        'Monday - 01 Jan 2024 (01/01/2024)'
    """
    day_name = _DAY_NAMES[value.weekday()]
    return (
        f"{day_name} - {format_short_date(value)} "
        f"({value.day:02d}/{value.month:02d}/{value.year})"
    )


def build_rate_sheet(prices: Mapping[CaratType, float], on_date: date) -> str:
    """Текст сводки курсов каратов для отправки.

    Args:
        prices: Цены каратов за 10 г
        on_date: Дата сводки

    Returns:
        Многострочный текст: заголовок, цены всех каратов, дата
    """
    lines = ["Gold Rates", ""]
    for carat in CARAT_ORDER:
        lines.append(f"{carat.value}: {CURRENCY_SYMBOL}{format_price(prices[carat])} per 10g")
    lines.append("")
    lines.append(f"Date: {format_short_date(on_date)}")
    return "\n".join(lines)
