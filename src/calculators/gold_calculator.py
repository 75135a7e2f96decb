"""Gold Calculator — основной калькулятор цены изделия.

Состояние экрана хранится как текст полей (как его вводит пользователь),
все расчёты выполняются заново при каждом запросе:

    текст → sanitize_text → to_number → цены каратов → PricingResult × 3

Интеграция:
- PriceEngine: цены каратов из базовой цены 24K и чистоты (с override)
- ForwardPricingCalculator: три варианта стоимости работы
- PriceStore + CoalescingWriter: базовая цена сохраняется после паузы,
  пользовательские цены — сразу при изменении
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, List, Optional

from src.core.domain.carat import (
    CARAT_ORDER,
    DEFAULT_CARAT,
    DEFAULT_PURITIES,
    CaratType,
    CustomPrices,
    PriceInputs,
)
from src.core.domain.pricing_result import PricingResult
from src.core.math.carat_prices import compute_all_carat_prices, price_inputs_from_text
from src.core.math.input_sanitizer import sanitize_text, to_number
from src.core.math.pricing import (
    DEFAULT_GST_PERCENT,
    DEFAULT_MAKING_CHARGE_PERCENTS,
    calculate_price_tiers,
)
from src.persistence.coalescing_writer import CoalescingWriter
from src.persistence.price_store import DEFAULT_BASE_PRICE, PriceStore

from .formatting import build_rate_sheet, format_price

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class GoldCalculatorConfig:
    """Конфигурация основного калькулятора.

    clamp_purity: ограничивать чистоту диапазоном [0, 100]
    """

    making_charge_percents: tuple[float, ...] = DEFAULT_MAKING_CHARGE_PERCENTS
    gst_percent: float = DEFAULT_GST_PERCENT
    default_purities: Dict[CaratType, float] = field(
        default_factory=lambda: dict(DEFAULT_PURITIES)
    )
    default_carat: CaratType = DEFAULT_CARAT
    clamp_purity: bool = True


# =============================================================================
# GOLD CALCULATOR
# =============================================================================


class GoldCalculator:
    """Основной калькулятор: вес + карат → цена с работой и GST.

    Порядок работы:
    1. load() — базовая цена и пользовательские цены из хранилища
    2. set_*() — изменения полей (текст очищается sanitize_text)
    3. results() / carat_prices() — расчёт из текущих полей
    4. poll_persistence() — отложенная запись базовой цены
    """

    def __init__(
        self,
        store: Optional[PriceStore] = None,
        config: Optional[GoldCalculatorConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            store: хранилище цен (None — без сохранения)
            config: конфигурация калькулятора
            clock: источник времени для отложенной записи
        """
        self.config = config or GoldCalculatorConfig()
        self.store = store

        self.base_price: str = DEFAULT_BASE_PRICE
        self.weight: str = ""
        self.making_charges: List[str] = [
            format_price(p) for p in self.config.making_charge_percents
        ]
        self.gst: str = format_price(self.config.gst_percent)
        self.purities: Dict[CaratType, str] = {
            carat: format_price(self.config.default_purities[carat]) for carat in CARAT_ORDER
        }
        self.selected_carat: CaratType = self.config.default_carat
        self.custom_prices: CustomPrices = CustomPrices()

        self._base_price_writer: Optional[CoalescingWriter[str]] = None
        if store is not None:
            self._base_price_writer = CoalescingWriter(
                store.save_base_price,
                quiet_period_sec=store.config.save_quiet_period_sec,
                clock=clock,
            )

    # -------------------------------------------------------------------------
    # PERSISTENCE
    # -------------------------------------------------------------------------

    def load(self) -> None:
        """Загрузка сохранённых цен (повреждённые значения → значения по умолчанию)."""
        if self.store is None:
            return
        self.base_price = self.store.load_base_price()
        self.custom_prices = self.store.load_custom_prices()
        logger.debug(
            "Gold calculator loaded: base_price=%s custom=%s",
            self.base_price,
            self.custom_prices.to_storage_dict(),
        )

    def poll_persistence(self) -> bool:
        """Отложенная запись базовой цены, если период тишины истёк."""
        if self._base_price_writer is None:
            return False
        return self._base_price_writer.poll()

    def flush_persistence(self) -> bool:
        """Немедленная запись ожидающей базовой цены."""
        if self._base_price_writer is None:
            return False
        return self._base_price_writer.flush()

    def _save_custom_prices(self) -> None:
        if self.store is not None:
            self.store.save_custom_prices(self.custom_prices)

    # -------------------------------------------------------------------------
    # FIELD EDITS
    # -------------------------------------------------------------------------

    def set_base_price(self, text: str) -> None:
        self.base_price = sanitize_text(text)
        if self._base_price_writer is not None and self.base_price:
            self._base_price_writer.submit(self.base_price)

    def set_weight(self, text: str) -> None:
        self.weight = sanitize_text(text)

    def set_making_charge(self, index: int, text: str) -> None:
        """Изменение одного из вариантов стоимости работы (index с 0)."""
        if not 0 <= index < len(self.making_charges):
            raise IndexError(f"making charge index {index} out of range")
        self.making_charges[index] = sanitize_text(text)

    def set_gst(self, text: str) -> None:
        self.gst = sanitize_text(text)

    def set_purity(self, carat: CaratType, text: str) -> None:
        self.purities[carat] = sanitize_text(text)

    def select_carat(self, carat: CaratType) -> None:
        self.selected_carat = CaratType(carat)

    def set_custom_price(self, carat: CaratType, text: str) -> None:
        self.custom_prices = self.custom_prices.with_price(carat, sanitize_text(text))
        self._save_custom_prices()

    def reset_custom_price(self, carat: CaratType) -> None:
        self.custom_prices = self.custom_prices.without(carat)
        self._save_custom_prices()

    def reset_all_custom_prices(self) -> None:
        self.custom_prices = CustomPrices()
        self._save_custom_prices()

    # -------------------------------------------------------------------------
    # CALCULATIONS
    # -------------------------------------------------------------------------

    def price_inputs(self) -> PriceInputs:
        """Числовые входы PriceEngine из текущих полей."""
        return price_inputs_from_text(
            self.base_price,
            self.purities,
            self.custom_prices,
            default_purities=self.config.default_purities,
            clamp_purity=self.config.clamp_purity,
        )

    def carat_prices(self) -> Dict[CaratType, float]:
        """Цены всех каратов за 10 г (с учётом пользовательских цен)."""
        return compute_all_carat_prices(self.price_inputs())

    def selected_carat_price(self) -> float:
        return self.carat_prices()[self.selected_carat]

    def results(self) -> List[PricingResult]:
        """PricingResult для каждого варианта стоимости работы."""
        making_percents = tuple(to_number(text, 0.0) for text in self.making_charges)
        return calculate_price_tiers(
            weight_grams=to_number(self.weight, 0.0),
            carat_price_per_10g=self.selected_carat_price(),
            making_charge_percents=making_percents,
            gst_percent=to_number(self.gst, 0.0),
        )

    def rate_sheet(self, on_date: Optional[date] = None) -> str:
        """Текст сводки курсов всех каратов."""
        return build_rate_sheet(self.carat_prices(), on_date or date.today())
