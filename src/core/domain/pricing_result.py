"""
PricingResult — Результат прямого расчёта цены изделия

Immutable Pydantic модель. Все суммы — неотрицательные целые (округлённые).
Инвариант: total == gold_price + making_charges + gst_amount точно.
"""

from pydantic import BaseModel, Field, field_validator


class PricingResult(BaseModel):
    """
    Разбивка итоговой цены изделия.

    Каждая составляющая округляется отдельно до суммирования, поэтому
    total может отличаться от неокруглённой математики на несколько единиц.
    """

    gold_price: int = Field(..., ge=0, description="Стоимость золота")
    making_charges: int = Field(..., ge=0, description="Стоимость работы")
    gst_amount: int = Field(..., ge=0, description="GST")
    total: int = Field(..., ge=0, description="Итого")

    model_config = {"frozen": True}

    @field_validator("total")
    @classmethod
    def validate_total_is_sum(cls, v: int, info) -> int:
        """Проверка, что total равен сумме составляющих"""
        parts = ("gold_price", "making_charges", "gst_amount")
        if all(name in info.data for name in parts):
            expected = sum(info.data[name] for name in parts)
            if v != expected:
                raise ValueError(f"total {v} must equal sum of parts {expected}")
        return v

    @classmethod
    def zero(cls) -> "PricingResult":
        """Нейтральный результат для вырожденного ввода"""
        return cls(gold_price=0, making_charges=0, gst_amount=0, total=0)

    @property
    def subtotal(self) -> int:
        """Стоимость золота + работа (база для GST)"""
        return self.gold_price + self.making_charges
