"""
NumericInputSanitizer — нормализация пользовательского текстового ввода

Каждое числовое поле калькулятора (цена, вес, проценты) приходит как
свободный текст. Модуль приводит его к двум формам:
- sanitize_text: синтаксически валидная числовая строка (возможно пустая)
- to_number: неотрицательное finite число или default

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не бросает исключение на любом входе
2. sanitize_text идемпотентна: sanitize_text(sanitize_text(x)) == sanitize_text(x)
3. to_number никогда не возвращает NaN/Inf или отрицательное значение
   (кроме случая, когда такой default передан явно)
"""

import re
from typing import Final

from src.core.math.numerical_safeguards import is_valid_float

# =============================================================================
# CONSTANTS
# =============================================================================

# Минимально допустимое значение любого числового поля
MIN_VALUE: Final[float] = 0.0

# Все символы, кроме цифр и десятичной точки
_NON_NUMERIC_RE: Final[re.Pattern[str]] = re.compile(r"[^0-9.]")

# Ведущий числовой префикс (parseFloat-совместимый разбор)
_LEADING_NUMBER_RE: Final[re.Pattern[str]] = re.compile(
    r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


# =============================================================================
# TEXT SANITIZATION
# =============================================================================


def sanitize_text(text: str) -> str:
    """
    Очистка текста до цифр и одной десятичной точки.

    Удаляет все символы, кроме цифр и '.'. Если точек больше одной,
    всё после первой точки склеивается в одну дробную часть.

    Args:
        text: Произвольный текст из поля ввода

    Returns:
        Числовая строка (возможно пустая)

    Examples:
        >>> sanitize_text("1.2.3")
        '1.23'
        >>> sanitize_text("₹ 4,500.50")
        '4500.50'
        >>> sanitize_text("abc")
        ''
    """
    if not isinstance(text, str):
        return ""

    cleaned = _NON_NUMERIC_RE.sub("", text)
    parts = cleaned.split(".")

    if len(parts) > 2:
        return parts[0] + "." + "".join(parts[1:])

    return cleaned


# =============================================================================
# NUMBER PARSING
# =============================================================================


def parse_leading_float(text: str) -> float | None:
    """
    Разбор ведущего числового префикса строки.

    Повторяет поведение parseFloat: пробелы по краям игнорируются,
    разбирается самый длинный числовой префикс, хвост отбрасывается.

    Args:
        text: Строка для разбора

    Returns:
        Разобранное значение (может быть inf) или None, если префикса нет

    Examples:
        >>> parse_leading_float("12abc")
        12.0
        >>> parse_leading_float("1.2.3")
        1.2
        >>> parse_leading_float("abc") is None
        True
    """
    match = _LEADING_NUMBER_RE.match(text.strip())
    if match is None:
        return None

    return float(match.group(0).replace("Infinity", "inf"))


def to_number(text: str | None, default: float = 0.0) -> float:
    """
    Конверсия текста поля в неотрицательное число.

    Пустая строка, только пробелы, неразбираемый текст, NaN, Inf и
    отрицательные значения заменяются на default.

    Args:
        text: Текст поля (обычно уже после sanitize_text)
        default: Значение по умолчанию для невалидного ввода

    Returns:
        Неотрицательное finite число или default

    Examples:
        >>> to_number("42.5")
        42.5
        >>> to_number("", default=38.0)
        38.0
        >>> to_number("-5", default=1.0)
        1.0
    """
    if not text or not isinstance(text, str):
        return default

    trimmed = text.strip()
    if not trimmed:
        return default

    parsed = parse_leading_float(trimmed)
    if parsed is None or not is_valid_float(parsed) or parsed < MIN_VALUE:
        return default

    return parsed
