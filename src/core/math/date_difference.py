"""
DateDifferenceCalculator — Разница между двумя календарными датами

Одно и то же количество дней раскладывается четырьмя независимыми способами:

1. total_days = floor((end - start) / 1 day)
2. weeks + week_days = divmod(|total_days|, 7), со знаком total_days
3. years + months + month_days — календарный обход от start к end:
   сначала целыми годами (не более YEAR_WALK_LIMIT шагов), затем целыми
   месяцами (не более MONTH_WALK_LIMIT шагов), пока следующий шаг не
   перескакивает end; остаток — точная разница в днях
4. total_months = |years*12 + months| и days_after_years = |total_days| минус
   365/366 дней за каждый целый год (григорианское правило високосности)

Шаг на месяц/год переносит "лишние" дни в следующий месяц:
31 января + 1 месяц = 3 марта (2 марта в високосный год),
29 февраля + 1 год = 1 марта.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Знак всех разложений совпадает со знаком total_days (или поле = 0)
2. include_to_date сдвигает конец интервала на +1 день до вычитания
3. Разложения 2-4 НЕ обязаны совпадать почленно
"""

import calendar
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from typing import Final

from src.core.domain.date_range import DateDifference, DateRange

# =============================================================================
# CONSTANTS
# =============================================================================

DAYS_PER_WEEK: Final[int] = 7
MONTHS_PER_YEAR: Final[int] = 12

# Ограничения календарного обхода
YEAR_WALK_LIMIT: Final[int] = 1000
MONTH_WALK_LIMIT: Final[int] = 100


# =============================================================================
# КАЛЕНДАРНАЯ АРИФМЕТИКА
# =============================================================================


def is_leap_year(year: int) -> bool:
    """
    Григорианское правило: делится на 4 и не делится на 100,
    либо делится на 400.
    """
    return calendar.isleap(year)


def days_in_year(year: int) -> int:
    """366 для високосного года, иначе 365"""
    return 366 if is_leap_year(year) else 365


def add_months_rollover(value: date, months: int) -> date | None:
    """
    Сдвиг даты на целое число месяцев с переносом лишних дней.

    День месяца, которого нет в целевом месяце, переносится вперёд
    (31 января + 1 месяц → 3 марта).

    Args:
        value: Исходная дата
        months: Количество месяцев (может быть отрицательным)

    Returns:
        Новая дата или None, если результат вне диапазона date

    Examples:
        >>> add_months_rollover(date(2023, 1, 31), 1)
        datetime.date(2023, 3, 3)
        >>> add_months_rollover(date(2020, 2, 29), 12)
        datetime.date(2021, 3, 1)
    """
    year, month_index = divmod(value.year * MONTHS_PER_YEAR + value.month - 1 + months, 12)
    if not MINYEAR <= year <= MAXYEAR:
        return None

    try:
        return date(year, month_index + 1, 1) + timedelta(days=value.day - 1)
    except OverflowError:
        return None


def truncate_to_date(value: date | datetime) -> date:
    """Отбрасывание времени суток"""
    if isinstance(value, datetime):
        return value.date()
    return value


# =============================================================================
# КАЛЕНДАРНЫЙ ОБХОД
# =============================================================================


def _walk(
    start: date,
    end: date,
    step_months: int,
    limit: int,
    forward: bool,
) -> tuple[date, int]:
    """
    Обход от start к end шагами по step_months месяцев.

    Шаг выполняется, только если он не перескакивает end.

    Returns:
        (достигнутая дата, количество выполненных шагов)
    """
    current = start
    steps = 0
    delta = step_months if forward else -step_months

    while steps < limit and (current < end if forward else current > end):
        candidate = add_months_rollover(current, delta)
        if candidate is None:
            break
        if (candidate > end) if forward else (candidate < end):
            break
        current = candidate
        steps += 1

    return current, steps


# =============================================================================
# DATE DIFFERENCE
# =============================================================================


def calculate_date_difference(
    from_date: date | datetime,
    to_date: date | datetime,
    include_to_date: bool = False,
) -> DateDifference:
    """
    Разница между датами во всех представлениях.

    Args:
        from_date: Начальная дата (время суток отбрасывается)
        to_date: Конечная дата (время суток отбрасывается)
        include_to_date: Включать конечную дату (+1 день к концу)

    Returns:
        DateDifference со знаковыми разложениями

    Raises:
        ValueError: Если include_to_date и to_date == date.max

    Examples:
        >>> d = calculate_date_difference(date(2024, 1, 1), date(2025, 3, 15))
        >>> (d.total_days, d.years, d.months, d.month_days, d.total_months)
        (439, 1, 2, 14, 14)
    """
    start = truncate_to_date(from_date)
    end = truncate_to_date(to_date)
    if include_to_date:
        if end == date.max:
            raise ValueError("to_date=date.max cannot be included (end overflows)")
        end = end + timedelta(days=1)

    total_days = (end - start).days
    is_negative = total_days < 0
    sign = -1 if is_negative else 1
    abs_days = abs(total_days)

    weeks, week_days = divmod(abs_days, DAYS_PER_WEEK)

    # Календарный обход: годы, затем месяцы от достигнутой даты
    after_years, year_steps = _walk(
        start, end, MONTHS_PER_YEAR, YEAR_WALK_LIMIT, forward=not is_negative
    )
    after_months, month_steps = _walk(
        after_years, end, 1, MONTH_WALK_LIMIT, forward=not is_negative
    )
    years = year_steps * sign
    months = month_steps * sign
    month_days = (end - after_months).days

    total_months = abs(years * MONTHS_PER_YEAR + months)

    days_after_years = abs_days
    for offset in range(abs(years)):
        year_to_check = start.year - offset if is_negative else start.year + offset
        days_after_years -= days_in_year(year_to_check)

    return DateDifference(
        total_days=total_days,
        weeks=weeks * sign,
        week_days=week_days * sign,
        years=years,
        months=months,
        month_days=month_days,
        total_months=total_months * sign,
        days_after_years=abs(days_after_years) * sign,
    )


def calculate_range_difference(date_range: DateRange) -> DateDifference:
    """Разница для DateRange модели"""
    return calculate_date_difference(
        date_range.from_date,
        date_range.to_date,
        include_to_date=date_range.include_to_date,
    )
