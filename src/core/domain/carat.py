"""
Carat — Модели каратов, чистоты и пользовательских цен

Набор каратов фиксирован: 9K, 18K, 20K, 22K. Динамических типов каратов нет,
поэтому пользовательские цены хранятся не в открытом словаре, а в записи
из четырёх опциональных полей.

Immutable Pydantic модели (frozen=True): любое изменение создаёт новый экземпляр.
"""

import math
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class CaratType(str, Enum):
    """Карат (степень чистоты золота)"""

    K9 = "9K"
    K18 = "18K"
    K20 = "20K"
    K22 = "22K"


# Порядок отображения каратов
CARAT_ORDER: Final[tuple[CaratType, ...]] = (
    CaratType.K9,
    CaratType.K18,
    CaratType.K20,
    CaratType.K22,
)

# Чистота по умолчанию (% от 24K)
DEFAULT_PURITIES: Final[dict[CaratType, float]] = {
    CaratType.K9: 38.0,
    CaratType.K18: 76.0,
    CaratType.K20: 84.0,
    CaratType.K22: 92.0,
}

# Карат, выбранный по умолчанию
DEFAULT_CARAT: Final[CaratType] = CaratType.K22


# =============================================================================
# CUSTOM PRICES
# =============================================================================


class CustomPrices(BaseModel):
    """
    Пользовательские цены за 10 г по каратам.

    Каждое поле — сырой текст, введённый пользователем (после sanitize_text).
    None означает отсутствие переопределения. Цена действует, только если
    разбирается в положительное число (см. effective_carat_price).

    Сериализуется в JSON-объект с ключами "9K", "18K", "20K", "22K".
    """

    k9: str | None = Field(None, alias="9K", description="Цена 9K за 10 г")
    k18: str | None = Field(None, alias="18K", description="Цена 18K за 10 г")
    k20: str | None = Field(None, alias="20K", description="Цена 20K за 10 г")
    k22: str | None = Field(None, alias="22K", description="Цена 22K за 10 г")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}

    def get(self, carat: CaratType) -> str | None:
        """Сырой текст пользовательской цены для карата (или None)"""
        return getattr(self, _FIELD_BY_CARAT[carat])

    def with_price(self, carat: CaratType, value: str) -> "CustomPrices":
        """Новый экземпляр с установленной ценой для карата"""
        return self.model_copy(update={_FIELD_BY_CARAT[carat]: value})

    def without(self, carat: CaratType) -> "CustomPrices":
        """Новый экземпляр без переопределения для карата"""
        return self.model_copy(update={_FIELD_BY_CARAT[carat]: None})

    def is_empty(self) -> bool:
        """True если ни одна цена не задана"""
        return all(self.get(carat) is None for carat in CARAT_ORDER)

    def to_storage_dict(self) -> dict[str, str]:
        """
        Словарь для сохранения: только заданные цены, ключи — метки каратов.

        Returns:
            Например {"22K": "61000"}
        """
        return self.model_dump(by_alias=True, exclude_none=True)


_FIELD_BY_CARAT: Final[dict[CaratType, str]] = {
    CaratType.K9: "k9",
    CaratType.K18: "k18",
    CaratType.K20: "k20",
    CaratType.K22: "k22",
}


# =============================================================================
# PRICE INPUTS
# =============================================================================


class PriceInputs(BaseModel):
    """
    Входные данные для вычисления цен каратов.

    base_price — цена 24K золота за 10 г. Чистота задаётся в процентах от 24K.
    Верхняя граница чистоты не проверяется моделью: ограничение [0, 100]
    — это политика конкретного калькулятора (см. resolve_purity).
    """

    base_price: float = Field(..., ge=0, description="Цена 24K за 10 г")
    purity_9k: float = Field(DEFAULT_PURITIES[CaratType.K9], ge=0, description="Чистота 9K (%)")
    purity_18k: float = Field(
        DEFAULT_PURITIES[CaratType.K18], ge=0, description="Чистота 18K (%)"
    )
    purity_20k: float = Field(
        DEFAULT_PURITIES[CaratType.K20], ge=0, description="Чистота 20K (%)"
    )
    purity_22k: float = Field(
        DEFAULT_PURITIES[CaratType.K22], ge=0, description="Чистота 22K (%)"
    )
    custom_prices: CustomPrices = Field(
        default_factory=CustomPrices, description="Пользовательские цены по каратам"
    )

    model_config = {"frozen": True}

    @field_validator("base_price", "purity_9k", "purity_18k", "purity_20k", "purity_22k")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Проверка, что значение не NaN/Inf"""
        if not math.isfinite(v):
            raise ValueError(f"value must be finite, got {v}")
        return v

    def purity(self, carat: CaratType) -> float:
        """Чистота (%) для карата"""
        return {
            CaratType.K9: self.purity_9k,
            CaratType.K18: self.purity_18k,
            CaratType.K20: self.purity_20k,
            CaratType.K22: self.purity_22k,
        }[carat]
