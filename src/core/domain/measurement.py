"""
Measurement — Три представления одного веса: граммы, караты, ратти

За одно обновление ведущим является ровно одно поле; два других всегда
пересчитываются из него.
"""

from enum import Enum

from pydantic import BaseModel, Field


class MeasurementType(str, Enum):
    """Единица измерения веса"""

    WEIGHT = "weight"
    CARAT = "carat"
    RATTI = "ratti"


class MeasurementTriple(BaseModel):
    """
    Отображаемые значения конвертера.

    Поля — строки дисплея: ведущее поле хранит введённый текст, остальные
    форматируются до 4 знаков или пусты, если ведущее значение невалидно.
    """

    weight: str = Field("", description="Вес в граммах")
    carat: str = Field("", description="Вес в каратах")
    ratti: str = Field("", description="Вес в ратти")
    driving: MeasurementType = Field(
        MeasurementType.WEIGHT, description="Поле, введённое пользователем"
    )

    model_config = {"frozen": True}

    def value_of(self, measurement_type: MeasurementType) -> str:
        """Текст поля по типу единицы"""
        return getattr(self, measurement_type.value)
