"""
Numerical Safeguards — безопасные арифметические примитивы калькулятора

Все расчёты калькулятора работают по правилу "никогда не показывать мусор":
- Деление на ноль не выполняется (возвращается fallback)
- NaN/Inf не распространяются дальше (заменяются на fallback)
- Округление детерминировано: round half up (как на дисплее калькулятора),
  а не banker's rounding встроенного round()

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. round_half_up(x.5) всегда округляет вверх (к +inf)
2. safe_divide никогда не бросает исключение
3. Все операции детерминированы и воспроизводимы
"""

import math

# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение валидным числом (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Args:
        value: Исходное значение
        fallback: Значение для замены NaN/Inf (default: 0.0)

    Returns:
        value если валидное, иначе fallback

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(
    numerator: float,
    denominator: float,
    fallback: float = 0.0,
) -> float:
    """
    Безопасное деление с защитой от деления на ноль и NaN/Inf.

    В отличие от epsilon-защиты делителя, здесь нулевой делитель означает
    вырожденный ввод пользователя (например, цена карата = 0), поэтому
    результат заменяется на fallback, а не на огромное число.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        fallback: Значение при делении на ноль или невалидном результате

    Returns:
        Результат деления или fallback

    Examples:
        >>> safe_divide(10.0, 2.0)
        5.0
        >>> safe_divide(10.0, 0.0)
        0.0
        >>> safe_divide(float('nan'), 2.0, fallback=-1.0)
        -1.0
    """
    if not is_valid_float(numerator) or not is_valid_float(denominator):
        return fallback

    if denominator == 0.0:
        return fallback

    return sanitize_float(numerator / denominator, fallback=fallback)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(value: float) -> int:
    """
    Округление до ближайшего целого, половины округляются вверх.

    Семантика совпадает с округлением, которое пользователь видит в
    калькуляторе: floor(value + 0.5). Встроенный round() использует
    banker's rounding (round(2.5) == 2) и здесь не подходит.

    Args:
        value: Значение для округления (должно быть finite)

    Returns:
        Округлённое целое

    Raises:
        ValueError: Если value — NaN или Inf

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(2.4999)
        2
        >>> round_half_up(-2.5)
        -2
    """
    if not is_valid_float(value):
        raise ValueError(f"Cannot round non-finite value: {value}")

    return math.floor(value + 0.5)


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(105.0, 0.0, 100.0)
        100.0
        >>> clamp(-1.0, 0.0, 100.0)
        0.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
