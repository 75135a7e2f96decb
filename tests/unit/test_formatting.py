"""
Тесты для форматирования текстов калькулятора

Проверяет:
1. Формат цены без лишней дробной части
2. Подписи дат
3. Текст сводки курсов каратов
"""

from datetime import date

from src.calculators.formatting import (
    CURRENCY_SYMBOL,
    build_rate_sheet,
    format_date_label,
    format_price,
    format_short_date,
)
from src.core.domain import CaratType


class TestFormatPrice:
    """Тесты для format_price"""

    def test_integer_values(self) -> None:
        """Целые значения без дробной части"""
        assert format_price(64400) == "64400"
        assert format_price(64400.0) == "64400"
        assert format_price(0) == "0"

    def test_fractional_values(self) -> None:
        """Дробные значения как есть"""
        assert format_price(61000.5) == "61000.5"
        assert format_price(91.6) == "91.6"


class TestDateFormatting:
    """Тесты для format_short_date и format_date_label"""

    def test_short_date(self) -> None:
        """День с ведущим нулём, короткий месяц, год"""
        assert format_short_date(date(2025, 3, 5)) == "05 Mar 2025"
        assert format_short_date(date(2024, 12, 31)) == "31 Dec 2024"

    def test_date_label(self) -> None:
        """День недели, короткая дата и числовая дата"""
        assert format_date_label(date(2024, 1, 1)) == "Monday - 01 Jan 2024 (01/01/2024)"
        assert format_date_label(date(2024, 1, 7)) == "Sunday - 07 Jan 2024 (07/01/2024)"


class TestRateSheet:
    """Тесты для build_rate_sheet"""

    def test_rate_sheet_text(self) -> None:
        """Заголовок, цены всех каратов в порядке отображения, дата"""
        prices = {
            CaratType.K22: 64400,
            CaratType.K9: 26600,
            CaratType.K20: 58800,
            CaratType.K18: 53200,
        }

        text = build_rate_sheet(prices, date(2025, 3, 5))

        assert text == (
            "Gold Rates\n"
            "\n"
            f"9K: {CURRENCY_SYMBOL}26600 per 10g\n"
            f"18K: {CURRENCY_SYMBOL}53200 per 10g\n"
            f"20K: {CURRENCY_SYMBOL}58800 per 10g\n"
            f"22K: {CURRENCY_SYMBOL}64400 per 10g\n"
            "\n"
            "Date: 05 Mar 2025"
        )

    def test_custom_price_in_sheet(self) -> None:
        """Дробная пользовательская цена выводится как есть"""
        prices = {
            CaratType.K9: 0,
            CaratType.K18: 0,
            CaratType.K20: 0,
            CaratType.K22: 61000.5,
        }

        text = build_rate_sheet(prices, date(2025, 3, 5))

        assert f"22K: {CURRENCY_SYMBOL}61000.5 per 10g" in text
        assert f"9K: {CURRENCY_SYMBOL}0 per 10g" in text
