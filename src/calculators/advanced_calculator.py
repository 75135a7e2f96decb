"""Advanced Calculator — обратный расчёт, конвертер веса, разница дат.

Три независимых режима:
- reverse: итоговая цена → вес изделия (ReversePricingCalculator)
- converter: граммы ↔ караты ↔ ратти (UnitConverter)
- date: разница между датами (DateDifferenceCalculator)

Базовая цена и пользовательские цены только читаются из хранилища:
редактируются они в основном калькуляторе.

По умолчанию чистота здесь НЕ ограничивается диапазоном [0, 100]
(clamp_purity=False); политика задаётся конфигурацией.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Callable, Dict, Optional

from src.core.domain.carat import (
    CARAT_ORDER,
    DEFAULT_CARAT,
    DEFAULT_PURITIES,
    CaratType,
    CustomPrices,
)
from src.core.domain.date_range import DateDifference, DateRange
from src.core.domain.measurement import MeasurementTriple, MeasurementType
from src.core.math.carat_prices import compute_all_carat_prices, price_inputs_from_text
from src.core.math.date_difference import calculate_range_difference, truncate_to_date
from src.core.math.input_sanitizer import sanitize_text, to_number
from src.core.math.pricing import DEFAULT_GST_PERCENT, calculate_weight_from_price
from src.core.math.unit_conversion import convert_measurement
from src.persistence.price_store import DEFAULT_BASE_PRICE, PriceStore

from .formatting import format_date_label, format_price


class ScreenMode(str, Enum):
    """Режим экрана"""

    HOME = "home"
    REVERSE = "reverse"
    CONVERTER = "converter"
    DATE_CALCULATOR = "dateCalculator"


class DateField(str, Enum):
    """Поле даты"""

    FROM = "from"
    TO = "to"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class AdvancedCalculatorConfig:
    """Конфигурация расширенного калькулятора."""

    reverse_making_charge_percent: float = 10.0
    reverse_gst_percent: float = DEFAULT_GST_PERCENT
    default_purities: Dict[CaratType, float] = field(
        default_factory=lambda: dict(DEFAULT_PURITIES)
    )
    default_carat: CaratType = DEFAULT_CARAT
    clamp_purity: bool = False


# =============================================================================
# ADVANCED CALCULATOR
# =============================================================================


class AdvancedCalculator:
    """Расширенный калькулятор: обратный расчёт, конвертер, разница дат."""

    def __init__(
        self,
        store: Optional[PriceStore] = None,
        config: Optional[AdvancedCalculatorConfig] = None,
        today: Callable[[], date] = date.today,
    ):
        """
        Args:
            store: хранилище цен (только чтение)
            config: конфигурация калькулятора
            today: источник текущей даты
        """
        self.config = config or AdvancedCalculatorConfig()
        self.store = store
        self._today = today

        self.screen_mode = ScreenMode.HOME

        # Цены каратов
        self.base_price: str = DEFAULT_BASE_PRICE
        self.custom_prices: CustomPrices = CustomPrices()
        self.purities: Dict[CaratType, str] = {
            carat: format_price(self.config.default_purities[carat]) for carat in CARAT_ORDER
        }

        # Обратный расчёт
        self.reverse_final_price: str = ""
        self.reverse_making_charge: str = ""
        self.reverse_gst: str = ""
        self.reverse_carat: CaratType = self.config.default_carat
        self.reset_reverse()

        # Конвертер
        self.measurement: MeasurementTriple = MeasurementTriple()

        # Разница дат
        self.from_date: date = truncate_to_date(today())
        self.to_date: date = truncate_to_date(today())
        self.include_to_date: bool = False

    def load(self) -> None:
        """Загрузка базовой цены и пользовательских цен."""
        if self.store is None:
            return
        self.base_price = self.store.load_base_price()
        self.custom_prices = self.store.load_custom_prices()

    def set_mode(self, mode: ScreenMode) -> None:
        self.screen_mode = ScreenMode(mode)

    def set_purity(self, carat: CaratType, text: str) -> None:
        self.purities[carat] = sanitize_text(text)

    def carat_prices(self) -> Dict[CaratType, float]:
        """Цены всех каратов за 10 г."""
        inputs = price_inputs_from_text(
            self.base_price,
            self.purities,
            self.custom_prices,
            default_purities=self.config.default_purities,
            clamp_purity=self.config.clamp_purity,
        )
        return compute_all_carat_prices(inputs)

    # -------------------------------------------------------------------------
    # REVERSE
    # -------------------------------------------------------------------------

    def set_reverse_final_price(self, text: str) -> None:
        self.reverse_final_price = sanitize_text(text)

    def set_reverse_making_charge(self, text: str) -> None:
        self.reverse_making_charge = sanitize_text(text)

    def set_reverse_gst(self, text: str) -> None:
        self.reverse_gst = sanitize_text(text)

    def select_reverse_carat(self, carat: CaratType) -> None:
        self.reverse_carat = CaratType(carat)

    def reset_reverse(self) -> None:
        """Сброс обратного расчёта к значениям по умолчанию (карат не меняется)."""
        self.reverse_final_price = ""
        self.reverse_making_charge = format_price(self.config.reverse_making_charge_percent)
        self.reverse_gst = format_price(self.config.reverse_gst_percent)

    def weight_from_price(self) -> float:
        """Вес изделия (г) по итоговой цене; 0 для вырожденного ввода."""
        return calculate_weight_from_price(
            final_price=to_number(self.reverse_final_price, 0.0),
            making_charge_percent=to_number(self.reverse_making_charge, 0.0),
            gst_percent=to_number(self.reverse_gst, 0.0),
            carat_price_per_10g=self.carat_prices()[self.reverse_carat],
        )

    # -------------------------------------------------------------------------
    # CONVERTER
    # -------------------------------------------------------------------------

    def convert(self, measurement_type: MeasurementType, text: str) -> MeasurementTriple:
        """Ввод в одно из полей конвертера; два других пересчитываются."""
        self.measurement = convert_measurement(MeasurementType(measurement_type), text)
        return self.measurement

    def reset_converter(self) -> None:
        self.measurement = MeasurementTriple(driving=self.measurement.driving)

    # -------------------------------------------------------------------------
    # DATE CALCULATOR
    # -------------------------------------------------------------------------

    def set_from_date(self, value: date | datetime) -> None:
        self.from_date = truncate_to_date(value)

    def set_to_date(self, value: date | datetime) -> None:
        self.to_date = truncate_to_date(value)

    def set_include_to_date(self, include: bool) -> None:
        self.include_to_date = bool(include)

    def set_to_today(self, date_field: DateField = DateField.TO) -> None:
        """Установка поля даты в сегодняшний день."""
        if DateField(date_field) == DateField.FROM:
            self.from_date = truncate_to_date(self._today())
        else:
            self.to_date = truncate_to_date(self._today())

    def reset_dates(self) -> None:
        today = truncate_to_date(self._today())
        self.from_date = today
        self.to_date = today
        self.include_to_date = False

    def date_range(self) -> DateRange:
        return DateRange(
            from_date=self.from_date,
            to_date=self.to_date,
            include_to_date=self.include_to_date,
        )

    def date_difference(self) -> DateDifference:
        return calculate_range_difference(self.date_range())

    def date_labels(self) -> tuple[str, str]:
        """Подписи начальной и конечной дат."""
        return format_date_label(self.from_date), format_date_label(self.to_date)
