"""
Тесты для DateDifferenceCalculator

Проверяет:
1. total_days и разложение на недели
2. Календарный обход: годы → месяцы → дни
3. total_months и days_after_years (с учётом високосных)
4. Отрицательные интервалы (все поля со знаком total_days)
5. include_to_date (+1 день к концу)
6. Перенос лишних дней при шаге на месяц/год
"""

from datetime import date, datetime

import pytest

from src.core.domain.date_range import DateRange
from src.core.math.date_difference import (
    add_months_rollover,
    calculate_date_difference,
    calculate_range_difference,
    days_in_year,
    is_leap_year,
    truncate_to_date,
)

# =============================================================================
# КАЛЕНДАРНАЯ АРИФМЕТИКА
# =============================================================================


class TestCalendarArithmetic:
    """Тесты для is_leap_year, days_in_year, add_months_rollover"""

    def test_leap_years(self) -> None:
        """Григорианское правило високосности"""
        assert is_leap_year(2024)
        assert is_leap_year(2000)
        assert not is_leap_year(1900)
        assert not is_leap_year(2023)
        assert days_in_year(2024) == 366
        assert days_in_year(2023) == 365

    def test_month_step_rolls_over(self) -> None:
        """31 января + 1 месяц = 3 марта (2 марта в високосный год)"""
        assert add_months_rollover(date(2023, 1, 31), 1) == date(2023, 3, 3)
        assert add_months_rollover(date(2024, 1, 31), 1) == date(2024, 3, 2)

    def test_year_step_from_leap_day(self) -> None:
        """29 февраля + 1 год = 1 марта"""
        assert add_months_rollover(date(2020, 2, 29), 12) == date(2021, 3, 1)

    def test_backward_step(self) -> None:
        """Шаг назад с тем же правилом переноса"""
        assert add_months_rollover(date(2024, 3, 15), -12) == date(2023, 3, 15)
        assert add_months_rollover(date(2024, 3, 31), -1) == date(2024, 3, 2)

    def test_regular_step(self) -> None:
        """Обычный шаг без переноса"""
        assert add_months_rollover(date(2024, 1, 15), 1) == date(2024, 2, 15)
        assert add_months_rollover(date(2024, 11, 15), 2) == date(2025, 1, 15)

    def test_out_of_range(self) -> None:
        """Результат вне диапазона date → None"""
        assert add_months_rollover(date(9999, 12, 1), 1) is None
        assert add_months_rollover(date(1, 1, 1), -1) is None

    def test_truncate_to_date(self) -> None:
        """Время суток отбрасывается"""
        assert truncate_to_date(datetime(2024, 1, 1, 23, 59)) == date(2024, 1, 1)
        assert truncate_to_date(date(2024, 1, 1)) == date(2024, 1, 1)


# =============================================================================
# DATE DIFFERENCE
# =============================================================================


class TestCalculateDateDifference:
    """Тесты для calculate_date_difference"""

    def test_reference_interval(self) -> None:
        """2024-01-01 → 2025-03-15"""
        diff = calculate_date_difference(date(2024, 1, 1), date(2025, 3, 15))

        assert diff.total_days == 439
        assert (diff.weeks, diff.week_days) == (62, 5)
        assert (diff.years, diff.months, diff.month_days) == (1, 2, 14)
        assert diff.total_months == 14
        assert diff.days_after_years == 73  # 439 - 366 (2024 високосный)
        assert not diff.is_negative

    def test_reversed_interval_is_negative(self) -> None:
        """2025-03-15 → 2024-01-01: все поля отрицательны"""
        diff = calculate_date_difference(date(2025, 3, 15), date(2024, 1, 1))

        assert diff.total_days == -439
        assert (diff.weeks, diff.week_days) == (-62, -5)
        assert (diff.years, diff.months, diff.month_days) == (-1, -2, -14)
        assert diff.total_months == -14
        assert diff.days_after_years == -74  # 439 - 365 (2025 не високосный)
        assert diff.is_negative

    def test_backward_step_may_land_on_end_date(self) -> None:
        """2025-03-15 → 2024-03-15: шаг назад ровно на конец = целый год"""
        diff = calculate_date_difference(date(2025, 3, 15), date(2024, 3, 15))

        assert diff.total_days == -365
        assert (diff.weeks, diff.week_days) == (-52, -1)
        assert (diff.years, diff.months, diff.month_days) == (-1, 0, 0)
        assert diff.total_months == -12
        assert diff.days_after_years == 0  # 365 - 365 (2025 не високосный)

    def test_backward_month_step_may_land_on_end_date(self) -> None:
        """2024-05-15 → 2024-03-15: ровно два месяца назад"""
        diff = calculate_date_difference(date(2024, 5, 15), date(2024, 3, 15))

        assert diff.total_days == -61
        assert (diff.years, diff.months, diff.month_days) == (0, -2, 0)
        assert diff.total_months == -2

    def test_walk_symmetric_on_exact_boundaries(self) -> None:
        """Обход назад — зеркало обхода вперёд при точном попадании"""
        forward = calculate_date_difference(date(2024, 3, 15), date(2025, 3, 15))
        backward = calculate_date_difference(date(2025, 3, 15), date(2024, 3, 15))

        assert (forward.years, forward.months, forward.month_days) == (1, 0, 0)
        assert (backward.years, backward.months, backward.month_days) == (-1, 0, 0)

    def test_same_date(self) -> None:
        """Одинаковые даты → все поля 0"""
        diff = calculate_date_difference(date(2024, 6, 1), date(2024, 6, 1))

        assert diff.total_days == 0
        assert diff.model_dump() == {name: 0 for name in diff.model_dump()}

    def test_include_to_date_same_date(self) -> None:
        """include_to_date для одинаковых дат → 1 день"""
        diff = calculate_date_difference(
            date(2024, 6, 1), date(2024, 6, 1), include_to_date=True
        )

        assert diff.total_days == 1
        assert (diff.weeks, diff.week_days) == (0, 1)
        assert (diff.years, diff.months, diff.month_days) == (0, 0, 1)
        assert diff.days_after_years == 1

    def test_include_to_date_completes_month(self) -> None:
        """1 января → 31 января включительно = ровно 1 месяц"""
        diff = calculate_date_difference(
            date(2024, 1, 1), date(2024, 1, 31), include_to_date=True
        )

        assert diff.total_days == 31
        assert (diff.months, diff.month_days) == (1, 0)

    def test_leap_boundary(self) -> None:
        """Через 29 февраля: 2 дня в високосный год, 1 день в обычный"""
        assert calculate_date_difference(date(2020, 2, 28), date(2020, 3, 1)).total_days == 2
        assert calculate_date_difference(date(2021, 2, 28), date(2021, 3, 1)).total_days == 1

    def test_month_rollover_counts_as_full_month(self) -> None:
        """31 января → 3 марта 2023 = 1 месяц 0 дней (перенос)"""
        diff = calculate_date_difference(date(2023, 1, 31), date(2023, 3, 3))

        assert diff.total_days == 31
        assert (diff.years, diff.months, diff.month_days) == (0, 1, 0)

    def test_leap_day_anniversary_is_not_full_year(self) -> None:
        """29.02.2020 → 28.02.2021: год не набирается (шаг даёт 1 марта)"""
        diff = calculate_date_difference(date(2020, 2, 29), date(2021, 2, 28))

        assert diff.total_days == 365
        assert diff.years == 0
        assert diff.months == 11
        assert diff.month_days == 30
        assert diff.total_months == 11
        assert diff.days_after_years == 365

    def test_century(self) -> None:
        """1900-01-01 → 2000-01-01: 100 лет, 24 високосных"""
        diff = calculate_date_difference(date(1900, 1, 1), date(2000, 1, 1))

        assert diff.total_days == 36524
        assert (diff.weeks, diff.week_days) == (5217, 5)
        assert (diff.years, diff.months, diff.month_days) == (100, 0, 0)
        assert diff.total_months == 1200
        assert diff.days_after_years == 0

    def test_time_of_day_ignored(self) -> None:
        """Время суток не влияет на результат"""
        diff = calculate_date_difference(
            datetime(2024, 1, 1, 23, 59), datetime(2024, 1, 2, 0, 1)
        )
        assert diff.total_days == 1

    @pytest.mark.parametrize(
        "start, end",
        [
            (date(2024, 1, 1), date(2025, 3, 15)),
            (date(2023, 5, 31), date(2019, 2, 28)),
            (date(2000, 2, 29), date(2004, 2, 29)),
            (date(2024, 12, 31), date(2025, 1, 1)),
        ],
    )
    def test_signs_follow_total_days(self, start: date, end: date) -> None:
        """Знак каждого поля совпадает со знаком total_days"""
        diff = calculate_date_difference(start, end)
        sign = 1 if diff.total_days > 0 else -1

        for value in diff.model_dump().values():
            assert value == 0 or (value > 0) == (sign > 0)

    def test_range_difference(self) -> None:
        """Расчёт по модели DateRange"""
        date_range = DateRange(
            from_date=date(2024, 1, 1), to_date=date(2024, 1, 31), include_to_date=True
        )
        assert calculate_range_difference(date_range).total_days == 31

    def test_include_max_date_rejected(self) -> None:
        """Включение date.max → ValueError (конец непредставим)"""
        with pytest.raises(ValueError, match="cannot be included"):
            calculate_date_difference(date(2024, 1, 1), date.max, include_to_date=True)
