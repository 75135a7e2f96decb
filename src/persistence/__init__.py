"""Persistence — сохранение базовой цены и пользовательских цен каратов.

- PersistenceGateway: порт key-value хранилища строк (load/save)
- PriceStore: валидация при загрузке/записи, очистка повреждённых значений
- CoalescingWriter: отложенная запись с объединением частых изменений
"""

from .coalescing_writer import CoalescingWriter
from .gateway import InMemoryGateway, JsonFileGateway, PersistenceGateway
from .price_store import (
    BASE_PRICE_KEY,
    CUSTOM_PRICES_KEY,
    DEFAULT_BASE_PRICE,
    PriceStore,
    PriceStoreConfig,
    parse_stored_base_price,
    parse_stored_custom_prices,
)

__all__ = [
    "CoalescingWriter",
    "PersistenceGateway",
    "InMemoryGateway",
    "JsonFileGateway",
    "PriceStore",
    "PriceStoreConfig",
    "BASE_PRICE_KEY",
    "CUSTOM_PRICES_KEY",
    "DEFAULT_BASE_PRICE",
    "parse_stored_base_price",
    "parse_stored_custom_prices",
]
