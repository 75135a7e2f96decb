"""
Тесты для AdvancedCalculator

Проверяет:
1. Обратный расчёт веса по итоговой цене
2. Конвертер граммы ↔ караты ↔ ратти
3. Калькулятор разницы дат
4. Чтение цен из хранилища без записи
"""

from datetime import date, datetime

import pytest

from src.calculators import (
    AdvancedCalculator,
    AdvancedCalculatorConfig,
    DateField,
    ScreenMode,
)
from src.core.domain import CaratType, MeasurementType
from src.persistence import (
    BASE_PRICE_KEY,
    CUSTOM_PRICES_KEY,
    InMemoryGateway,
    PriceStore,
)

TODAY = date(2024, 1, 1)


@pytest.fixture
def gateway() -> InMemoryGateway:
    return InMemoryGateway({BASE_PRICE_KEY: "70000"})


@pytest.fixture
def calculator(gateway: InMemoryGateway) -> AdvancedCalculator:
    calc = AdvancedCalculator(store=PriceStore(gateway), today=lambda: TODAY)
    calc.load()
    return calc


# =============================================================================
# GENERAL
# =============================================================================


class TestGeneral:
    """Тесты режима экрана и загрузки"""

    def test_defaults(self) -> None:
        """Значения по умолчанию"""
        calc = AdvancedCalculator(today=lambda: TODAY)

        assert calc.screen_mode == ScreenMode.HOME
        assert calc.reverse_making_charge == "10"
        assert calc.reverse_gst == "3"
        assert calc.reverse_carat == CaratType.K22
        assert calc.from_date == calc.to_date == TODAY
        assert not calc.include_to_date

    def test_set_mode(self) -> None:
        """Переключение режима (в том числе по строковому значению)"""
        calc = AdvancedCalculator()
        calc.set_mode(ScreenMode.CONVERTER)
        assert calc.screen_mode == ScreenMode.CONVERTER

        calc.set_mode("dateCalculator")  # type: ignore[arg-type]
        assert calc.screen_mode == ScreenMode.DATE_CALCULATOR

    def test_load_is_read_only(
        self, calculator: AdvancedCalculator, gateway: InMemoryGateway
    ) -> None:
        """Загрузка не изменяет хранилище"""
        assert calculator.base_price == "70000"
        assert gateway.snapshot() == {BASE_PRICE_KEY: "70000"}

    def test_purity_not_clamped(self, calculator: AdvancedCalculator) -> None:
        """Чистота здесь не ограничивается по умолчанию"""
        calculator.set_purity(CaratType.K22, "150")
        assert calculator.carat_prices()[CaratType.K22] == 105000

    def test_purity_clamped_when_enabled(self, gateway: InMemoryGateway) -> None:
        """Ограничение чистоты включается конфигурацией"""
        calc = AdvancedCalculator(
            store=PriceStore(gateway),
            config=AdvancedCalculatorConfig(clamp_purity=True),
        )
        calc.load()
        calc.set_purity(CaratType.K22, "150")

        assert calc.carat_prices()[CaratType.K22] == 70000


# =============================================================================
# REVERSE
# =============================================================================


class TestReverse:
    """Тесты обратного расчёта"""

    def test_weight_from_price(self, calculator: AdvancedCalculator) -> None:
        """72965 при 22K (64400), 10%, 3% → ≈ 10 г"""
        calculator.set_reverse_final_price("72965")

        assert calculator.weight_from_price() == pytest.approx(9.99997, abs=1e-5)

    def test_uses_selected_carat(self, calculator: AdvancedCalculator) -> None:
        """Обратный расчёт по выбранному карату"""
        calculator.select_reverse_carat(CaratType.K18)
        calculator.set_reverse_making_charge("0")
        calculator.set_reverse_gst("0")
        calculator.set_reverse_final_price("5320")

        assert calculator.weight_from_price() == pytest.approx(1.0)

    def test_uses_custom_price(self) -> None:
        """Пользовательская цена карата учитывается"""
        gateway = InMemoryGateway({CUSTOM_PRICES_KEY: '{"22K": "60000"}'})
        calc = AdvancedCalculator(store=PriceStore(gateway))
        calc.load()
        calc.set_reverse_making_charge("0")
        calc.set_reverse_gst("0")
        calc.set_reverse_final_price("6000")

        assert calc.weight_from_price() == pytest.approx(1.0)

    def test_degenerate_input_returns_zero(self) -> None:
        """Без цены карата или итоговой цены → 0"""
        calc = AdvancedCalculator()
        calc.set_reverse_final_price("72965")
        assert calc.weight_from_price() == 0.0

        calc.set_reverse_final_price("")
        assert calc.weight_from_price() == 0.0

    def test_reset_reverse(self, calculator: AdvancedCalculator) -> None:
        """Сброс к значениям по умолчанию, карат сохраняется"""
        calculator.set_reverse_final_price("72965")
        calculator.set_reverse_making_charge("15")
        calculator.set_reverse_gst("5")
        calculator.select_reverse_carat(CaratType.K9)

        calculator.reset_reverse()

        assert calculator.reverse_final_price == ""
        assert calculator.reverse_making_charge == "10"
        assert calculator.reverse_gst == "3"
        assert calculator.reverse_carat == CaratType.K9


# =============================================================================
# CONVERTER
# =============================================================================


class TestConverter:
    """Тесты конвертера"""

    def test_convert(self, calculator: AdvancedCalculator) -> None:
        """Ввод в поле ратти пересчитывает граммы и караты"""
        triple = calculator.convert(MeasurementType.RATTI, "10")

        assert triple is calculator.measurement
        assert (triple.weight, triple.carat) == ("1.2125", "6.0625")

    def test_reset_converter(self, calculator: AdvancedCalculator) -> None:
        """Сброс очищает все поля, ведущее поле сохраняется"""
        calculator.convert(MeasurementType.CARAT, "5")
        calculator.reset_converter()

        measurement = calculator.measurement
        assert (measurement.weight, measurement.carat, measurement.ratti) == ("", "", "")
        assert measurement.driving == MeasurementType.CARAT


# =============================================================================
# DATE CALCULATOR
# =============================================================================


class TestDates:
    """Тесты калькулятора разницы дат"""

    def test_date_difference(self, calculator: AdvancedCalculator) -> None:
        """Разница между выбранными датами"""
        calculator.set_to_date(date(2025, 3, 15))

        diff = calculator.date_difference()

        assert diff.total_days == 439
        assert (diff.years, diff.months, diff.month_days) == (1, 2, 14)

    def test_include_to_date(self, calculator: AdvancedCalculator) -> None:
        """Включение конечной даты"""
        calculator.set_include_to_date(True)

        assert calculator.date_range().include_to_date
        assert calculator.date_difference().total_days == 1

    def test_set_to_today(self) -> None:
        """Установка поля даты в сегодняшний день"""
        calc = AdvancedCalculator(today=lambda: TODAY)
        calc.set_from_date(date(2020, 5, 5))
        calc.set_to_date(date(2030, 5, 5))

        calc.set_to_today(DateField.FROM)
        assert calc.from_date == TODAY

        calc.set_to_today()
        assert calc.to_date == TODAY

    def test_reset_dates(self, calculator: AdvancedCalculator) -> None:
        """Сброс дат к сегодняшнему дню"""
        calculator.set_from_date(date(2020, 5, 5))
        calculator.set_to_date(date(2030, 5, 5))
        calculator.set_include_to_date(True)

        calculator.reset_dates()

        assert calculator.from_date == calculator.to_date == TODAY
        assert not calculator.include_to_date
        assert calculator.date_difference().total_days == 0

    def test_date_labels(self, calculator: AdvancedCalculator) -> None:
        """Подписи начальной и конечной дат"""
        calculator.set_to_date(date(2024, 1, 7))

        assert calculator.date_labels() == (
            "Monday - 01 Jan 2024 (01/01/2024)",
            "Sunday - 07 Jan 2024 (07/01/2024)",
        )

    def test_datetime_with_time_of_day(self, calculator: AdvancedCalculator) -> None:
        """Время суток у выбранных дат отбрасывается до полуночи"""
        calculator.set_from_date(datetime(2024, 1, 1, 10, 30))
        calculator.set_to_date(datetime(2024, 1, 5, 8, 0))

        assert calculator.from_date == date(2024, 1, 1)
        assert calculator.to_date == date(2024, 1, 5)
        assert calculator.date_difference().total_days == 4
        assert calculator.date_labels()[0] == "Monday - 01 Jan 2024 (01/01/2024)"

    def test_today_source_with_time_of_day(self) -> None:
        """Источник текущего момента может возвращать datetime"""
        calc = AdvancedCalculator(today=lambda: datetime(2024, 1, 1, 23, 59))
        calc.set_to_date(date(2024, 1, 2))

        assert calc.from_date == TODAY
        assert calc.date_difference().total_days == 1

        calc.set_to_today()
        assert calc.date_difference().total_days == 0
