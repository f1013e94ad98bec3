"""
TimeValue / CalendarEpoch — Модели момента времени

Immutable Pydantic модели:
- TimeValue: момент времени как (целые секунды, дробная часть) от
  1970-01-01 00:00:00. Шкала (GPS или UTC) определяется контекстом вызова.
- CalendarEpoch: календарное представление {year, month, day, hour, minute, second},
  используется только как формат входа/выхода конверсий.

Все операции над моделями возвращают новый экземпляр (frozen=True).
"""

from typing import Final, Sequence

from pydantic import BaseModel, Field


# Количество полей календарной эпохи
EPOCH_FIELD_COUNT: Final[int] = 6


# =============================================================================
# TIME VALUE
# =============================================================================


class TimeValue(BaseModel):
    """
    Момент времени: whole_seconds + fraction.

    Инвариант: представляемый момент равен whole_seconds + fraction.
    fraction обычно лежит в [0, 1), но это не обязательно после всех операций:
    нормализацию выполняет только time_add.
    """

    whole_seconds: int = Field(..., description="Целые секунды от 1970-01-01 00:00:00")
    fraction: float = Field(
        default=0.0, allow_inf_nan=False, description="Дробная часть секунды"
    )

    model_config = {"frozen": True}  # Immutable

    def total_seconds(self) -> float:
        """
        Момент как одно float-значение.

        Точность падает для больших whole_seconds (~1e-7 с для современных дат).
        """
        return self.whole_seconds + self.fraction


# Нулевой момент: также sentinel некорректной календарной даты (epoch_to_time)
TIME_ZERO: Final[TimeValue] = TimeValue(whole_seconds=0, fraction=0.0)


# =============================================================================
# CALENDAR EPOCH
# =============================================================================


class CalendarEpoch(BaseModel):
    """
    Календарная дата/время {year, month, day, hour, minute, second}.

    Диапазоны полей здесь не проверяются: проверку 1970–2099 и месяца
    выполняет epoch_to_time.
    """

    year: int = Field(..., description="Год (поддерживается 1970–2099)")
    month: int = Field(..., description="Месяц 1–12")
    day: int = Field(..., description="День месяца")
    hour: int = Field(default=0, description="Час")
    minute: int = Field(default=0, description="Минута")
    second: float = Field(
        default=0.0,
        allow_inf_nan=False,
        description="Секунда (может содержать дробную часть)",
    )

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "CalendarEpoch":
        """
        Создание из последовательности {year, month, day, hour, minute, second}.

        Целочисленные поля усекаются через int(), second сохраняет дробную часть.

        Raises:
            ValueError: Если длина последовательности не равна 6
            ValidationError: Если second равна NaN или ±Inf
        """
        if len(values) != EPOCH_FIELD_COUNT:
            raise ValueError(
                f"Calendar epoch requires {EPOCH_FIELD_COUNT} fields, got {len(values)}"
            )

        year, month, day, hour, minute, second = values
        return cls(
            year=int(year),
            month=int(month),
            day=int(day),
            hour=int(hour),
            minute=int(minute),
            second=float(second),
        )

    def to_list(self) -> list[float]:
        """Календарная эпоха как список из 6 чисел."""
        return [self.year, self.month, self.day, self.hour, self.minute, self.second]
