"""
DateRange / DateDifference — Модели калькулятора разницы дат

DateDifference содержит четыре независимых разложения одного и того же
количества дней:
- total_days
- weeks + week_days
- years + months + month_days (календарный обход)
- total_months и days_after_years (годы с учётом високосных, без месяцев)

Разложения НЕ обязаны совпадать друг с другом почленно, общий у них только
total_days. Знак каждого поля совпадает со знаком total_days (или поле = 0).

Время суток у дат интервала отбрасывается до полуночи.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator, model_validator


class DateRange(BaseModel):
    """Интервал дат калькулятора"""

    from_date: date = Field(..., description="Начальная дата")
    to_date: date = Field(..., description="Конечная дата")
    include_to_date: bool = Field(
        False, description="Включать конечную дату (сдвиг конца на +1 день)"
    )

    model_config = {"frozen": True}

    @field_validator("from_date", "to_date", mode="before")
    @classmethod
    def truncate_time_of_day(cls, v: object) -> object:
        """datetime → date (полночь того же дня)"""
        if isinstance(v, datetime):
            return v.date()
        return v

    @model_validator(mode="after")
    def validate_end_representable(self) -> "DateRange":
        """Конец интервала после сдвига на +1 день должен быть представим"""
        if self.include_to_date and self.to_date == date.max:
            raise ValueError("to_date=date.max cannot be included (end overflows)")
        return self


class DateDifference(BaseModel):
    """
    Результат калькулятора разницы дат.

    Все поля знаковые: для интервала "назад во времени" (to_date < from_date)
    они отрицательны или равны нулю.
    """

    total_days: int = Field(..., description="Всего дней")

    weeks: int = Field(..., description="Полных недель")
    week_days: int = Field(..., description="Остаток дней после недель")

    years: int = Field(..., description="Календарных лет")
    months: int = Field(..., description="Календарных месяцев после лет")
    month_days: int = Field(..., description="Остаток дней после лет и месяцев")

    total_months: int = Field(..., description="Всего месяцев (years*12 + months)")
    days_after_years: int = Field(
        ..., description="Остаток дней после лет (с учётом високосных, без месяцев)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_signs(self) -> "DateDifference":
        """Проверка, что знаки разложений совпадают со знаком total_days"""
        fields = (
            "weeks",
            "week_days",
            "years",
            "months",
            "month_days",
            "total_months",
            "days_after_years",
        )
        for name in fields:
            value = getattr(self, name)
            if self.total_days > 0 and value < 0:
                raise ValueError(f"{name}={value} must be >= 0 for positive interval")
            if self.total_days < 0 and value > 0:
                raise ValueError(f"{name}={value} must be <= 0 for negative interval")
            if self.total_days == 0 and value != 0:
                raise ValueError(f"{name}={value} must be 0 for empty interval")
        return self

    @property
    def is_negative(self) -> bool:
        """True если интервал направлен назад во времени"""
        return self.total_days < 0
