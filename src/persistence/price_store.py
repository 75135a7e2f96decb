"""PriceStore — валидированное сохранение базовой цены и пользовательских цен.

Два ключа хранилища:
- goldBasePrice     — цена 24K за 10 г, обрезанная числовая строка
- customCaratPrices — JSON-объект {метка карата: текст цены}

Правила загрузки:
- Отсутствующее значение → значение по умолчанию ("0" / пустые переопределения)
- Повреждённое значение (пустое, "null", "undefined", "NaN", "[object Object]",
  JSON вместо числа, нечисловое, отрицательное; для переопределений —
  невалидный JSON, не-объект, неизвестные ключи) → значение по умолчанию,
  ключ помечается на очистку при следующей записи

Правила записи:
- В хранилище попадают только валидные значения (проверка по JSON Schema)
- Сбой записи логируется и поглощается, повторов нет
"""

import json
import logging
from dataclasses import dataclass
from typing import Final, Optional, Set

from jsonschema import ValidationError

from src.core.contracts import BasePriceValidator, CustomPricesValidator
from src.core.domain.carat import CustomPrices
from src.core.math.input_sanitizer import to_number
from .gateway import PersistenceGateway

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

BASE_PRICE_KEY: Final[str] = "goldBasePrice"
CUSTOM_PRICES_KEY: Final[str] = "customCaratPrices"

DEFAULT_BASE_PRICE: Final[str] = "0"
EMPTY_CUSTOM_PRICES_JSON: Final[str] = "{}"

# Маркеры повреждённых значений, которые никогда не сохраняются
INVALID_MARKERS: Final[frozenset[str]] = frozenset(
    {"null", "undefined", "NaN", "[object Object]"}
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PriceStoreConfig:
    """Конфигурация PriceStore.

    Ключи хранилища и период тишины для отложенной записи базовой цены.
    """

    base_price_key: str = BASE_PRICE_KEY
    custom_prices_key: str = CUSTOM_PRICES_KEY
    save_quiet_period_sec: float = 0.5


# =============================================================================
# PARSING
# =============================================================================


def parse_stored_base_price(raw: Optional[str]) -> Optional[str]:
    """Проверка сохранённой базовой цены.

    Args:
        raw: Текст из хранилища

    Returns:
        Обрезанный текст цены или None, если значение повреждено
    """
    if not isinstance(raw, str):
        return None

    trimmed = raw.strip()
    if not trimmed or trimmed in INVALID_MARKERS:
        return None

    if trimmed.startswith(("{", "[")) or "{" in trimmed or "}" in trimmed:
        return None

    if not BasePriceValidator().is_valid(trimmed):
        return None

    if to_number(trimmed, -1.0) < 0:
        return None

    return trimmed


def parse_stored_custom_prices(raw: Optional[str]) -> Optional[CustomPrices]:
    """Проверка сохранённых пользовательских цен.

    Args:
        raw: Текст из хранилища

    Returns:
        CustomPrices или None, если значение повреждено
    """
    if not isinstance(raw, str):
        return None

    trimmed = raw.strip()
    if not (trimmed.startswith("{") and trimmed.endswith("}")):
        return None

    try:
        data = json.loads(trimmed)
    except json.JSONDecodeError:
        return None

    try:
        CustomPricesValidator().validate(data)
    except ValidationError as exc:
        logger.debug("Custom prices rejected by schema: %s", exc.message)
        return None

    return CustomPrices.model_validate(data)


# =============================================================================
# PRICE STORE
# =============================================================================


class PriceStore:
    """Загрузка и сохранение цен через PersistenceGateway.

    Ни один метод не бросает исключение: сбои хранилища логируются,
    вызывающий код получает значение по умолчанию или False.
    """

    def __init__(
        self,
        gateway: PersistenceGateway,
        config: Optional[PriceStoreConfig] = None,
    ):
        """
        Args:
            gateway: key-value хранилище строк
            config: ключи хранилища и период тишины
        """
        self.gateway = gateway
        self.config = config or PriceStoreConfig()

        # Ключи с повреждёнными значениями, ожидающие очистки
        self._pending_clear: Set[str] = set()

    @property
    def pending_clear(self) -> frozenset[str]:
        """Ключи, которые будут очищены при следующей записи."""
        return frozenset(self._pending_clear)

    # -------------------------------------------------------------------------
    # LOAD
    # -------------------------------------------------------------------------

    def _load_raw(self, key: str) -> tuple[Optional[str], bool]:
        """Чтение из хранилища: (значение, чтение успешно)."""
        try:
            return self.gateway.load(key), True
        except Exception as exc:
            logger.error("Storage read failed for %s: %s", key, exc)
            return None, False

    def load_base_price(self) -> str:
        """Базовая цена из хранилища или "0".

        Returns:
            Текст цены 24K за 10 г
        """
        raw, ok = self._load_raw(self.config.base_price_key)
        if not ok:
            self._pending_clear.add(self.config.base_price_key)
            return DEFAULT_BASE_PRICE

        if raw is None:
            return DEFAULT_BASE_PRICE

        price = parse_stored_base_price(raw)
        if price is None:
            logger.warning("Discarding corrupted base price: %r", raw)
            self._pending_clear.add(self.config.base_price_key)
            return DEFAULT_BASE_PRICE

        logger.debug("Loaded base price: %s", price)
        return price

    def load_custom_prices(self) -> CustomPrices:
        """Пользовательские цены из хранилища или пустой набор."""
        raw, ok = self._load_raw(self.config.custom_prices_key)
        if not ok:
            self._pending_clear.add(self.config.custom_prices_key)
            return CustomPrices()

        if raw is None:
            return CustomPrices()

        prices = parse_stored_custom_prices(raw)
        if prices is None:
            logger.warning("Discarding corrupted custom prices: %r", raw)
            self._pending_clear.add(self.config.custom_prices_key)
            return CustomPrices()

        return prices

    # -------------------------------------------------------------------------
    # SAVE
    # -------------------------------------------------------------------------

    def _write(self, key: str, value: str) -> bool:
        try:
            self.gateway.save(key, value)
        except Exception as exc:
            logger.error("Storage write failed for %s: %s", key, exc)
            return False

        self._pending_clear.discard(key)
        return True

    def clear_corrupted(self, skip_key: Optional[str] = None) -> None:
        """Перезапись повреждённых ключей значениями по умолчанию."""
        defaults = {
            self.config.base_price_key: DEFAULT_BASE_PRICE,
            self.config.custom_prices_key: EMPTY_CUSTOM_PRICES_JSON,
        }
        for key in sorted(self._pending_clear):
            if key == skip_key:
                continue
            logger.debug("Clearing corrupted storage key %s", key)
            self._write(key, defaults.get(key, ""))

    def save_base_price(self, price: str) -> bool:
        """Сохранение базовой цены.

        Args:
            price: Текст цены (обычно после sanitize_text)

        Returns:
            True если значение записано
        """
        trimmed = price.strip() if isinstance(price, str) else ""
        valid = parse_stored_base_price(trimmed) is not None

        self.clear_corrupted(skip_key=self.config.base_price_key if valid else None)

        if not valid:
            logger.debug("Refusing to save invalid base price: %r", price)
            return False

        return self._write(self.config.base_price_key, trimmed)

    def save_custom_prices(self, prices: CustomPrices) -> bool:
        """Сохранение пользовательских цен (пустой набор → "{}").

        Returns:
            True если значение записано
        """
        data = prices.to_storage_dict()
        valid = CustomPricesValidator().is_valid(data)

        self.clear_corrupted(skip_key=self.config.custom_prices_key if valid else None)

        if not valid:
            logger.debug("Refusing to save invalid custom prices: %r", data)
            return False

        return self._write(self.config.custom_prices_key, json.dumps(data))
