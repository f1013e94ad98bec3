"""
Calendar — Конверсия календарная дата ↔ TimeValue

Внутренняя точка отсчёта: 1970-01-01 00:00:00.

Високосный год: year % 4 == 0. Правило корректно только для 1901–2099,
поэтому поддерживаемый диапазон ограничен 1970–2099.

АЛГОРИТМ (epoch → time):
    days = (year - 1970) * 365 + (year - 1969) // 4 + DOY[month - 1] + day - 2
           + (1 если year % 4 == 0 и month >= 3)
    whole_seconds = days * 86400 + hour * 3600 + minute * 60 + floor(second)
    fraction = second - floor(second)

АЛГОРИТМ (time → epoch):
    Обход таблицы длительностей 48 месяцев (4-летний цикл из 1461 дня,
    начиная с 1970, третий год цикла високосный).
"""

import logging
import math
from typing import Final, Sequence, Union

from gpstime.core.domain.time_value import TIME_ZERO, CalendarEpoch, TimeValue
from gpstime.core.errors import InvalidCalendarInput

logger = logging.getLogger("gpstime.calendar")

# =============================================================================
# КАЛЕНДАРНЫЕ КОНСТАНТЫ
# =============================================================================

MIN_YEAR: Final[int] = 1970
MAX_YEAR: Final[int] = 2099

SECONDS_PER_DAY: Final[int] = 86400

# 4 * 365 + 1
DAYS_PER_4_YEARS: Final[int] = 1461

# День года (1-based) первого числа каждого месяца невисокосного года
_DAY_OF_YEAR: Final[tuple[int, ...]] = (1, 32, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335)

# Длительности месяцев четырёх лет подряд, начиная с 1970 (1972 високосный)
_MONTH_DAYS_4Y: Final[tuple[int, ...]] = (
    31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
    31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
    31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
    31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
)  # fmt: skip

EpochLike = Union[CalendarEpoch, Sequence[float]]


def _as_epoch(epoch: EpochLike) -> CalendarEpoch:
    if isinstance(epoch, CalendarEpoch):
        return epoch
    return CalendarEpoch.from_sequence(epoch)


def _validation_error(epoch: CalendarEpoch) -> str | None:
    if not MIN_YEAR <= epoch.year <= MAX_YEAR:
        return f"year {epoch.year} outside [{MIN_YEAR}, {MAX_YEAR}]"
    if not 1 <= epoch.month <= 12:
        return f"month {epoch.month} outside [1, 12]"
    return None


def _to_time(epoch: CalendarEpoch) -> TimeValue:
    year, month = epoch.year, epoch.month

    leap_day = 1 if year % 4 == 0 and month >= 3 else 0
    days = (
        (year - 1970) * 365
        + (year - 1969) // 4
        + _DAY_OF_YEAR[month - 1]
        + epoch.day
        - 2
        + leap_day
    )

    sec = math.floor(epoch.second)
    whole_seconds = days * SECONDS_PER_DAY + epoch.hour * 3600 + epoch.minute * 60 + sec
    return TimeValue(whole_seconds=whole_seconds, fraction=epoch.second - sec)


# =============================================================================
# CALENDAR → TIME
# =============================================================================


def is_valid_epoch(epoch: EpochLike) -> bool:
    """
    Проверка, поддерживается ли календарная дата.

    Проверяются только год (1970–2099) и месяц (1–12), как и в epoch_to_time.
    """
    return _validation_error(_as_epoch(epoch)) is None


def epoch_to_time(epoch: EpochLike) -> TimeValue:
    """
    Конверсия календарной даты в TimeValue.

    Для некорректной даты возвращает TIME_ZERO (sentinel). Sentinel совпадает
    с моментом 1970-01-01 00:00:00; если это различие важно,
    используйте epoch_to_time_checked.

    Args:
        epoch: CalendarEpoch или последовательность {year, month, day, hour, minute, second}

    Returns:
        TimeValue или TIME_ZERO при year вне [1970, 2099] / month вне [1, 12]

    Raises:
        ValueError: Если последовательность не из 6 полей или second не конечна

    Examples:
        >>> epoch_to_time([1980, 1, 6, 0, 0, 0])
        TimeValue(whole_seconds=315964800, fraction=0.0)
        >>> epoch_to_time([1969, 12, 31, 0, 0, 0])
        TimeValue(whole_seconds=0, fraction=0.0)
    """
    epoch = _as_epoch(epoch)

    reason = _validation_error(epoch)
    if reason is not None:
        logger.warning("Calendar epoch %s rejected: %s", epoch.to_list(), reason)
        return TIME_ZERO

    return _to_time(epoch)


def epoch_to_time_checked(epoch: EpochLike) -> TimeValue:
    """
    Строгая конверсия календарной даты в TimeValue.

    Raises:
        InvalidCalendarInput: Если year вне [1970, 2099] или month вне [1, 12]
        ValueError: Если последовательность не из 6 полей или second не конечна
    """
    epoch = _as_epoch(epoch)

    reason = _validation_error(epoch)
    if reason is not None:
        raise InvalidCalendarInput(epoch.to_list(), reason)

    return _to_time(epoch)


# =============================================================================
# TIME → CALENDAR
# =============================================================================


def time_to_epoch(t: TimeValue) -> CalendarEpoch:
    """
    Конверсия TimeValue в календарную дату.

    Определена для любого whole_seconds; календарный смысл корректен
    только для 1970–2099. Дробная часть переносится в поле second.

    Examples:
        >>> time_to_epoch(TimeValue(whole_seconds=315964800, fraction=0.5))
        CalendarEpoch(year=1980, month=1, day=6, hour=0, minute=0, second=0.5)
    """
    days, sec = divmod(t.whole_seconds, SECONDS_PER_DAY)

    cycles, day = divmod(days, DAYS_PER_4_YEARS)
    mon = 0
    while mon < len(_MONTH_DAYS_4Y) and day >= _MONTH_DAYS_4Y[mon]:
        day -= _MONTH_DAYS_4Y[mon]
        mon += 1

    return CalendarEpoch(
        year=MIN_YEAR + cycles * 4 + mon // 12,
        month=mon % 12 + 1,
        day=day + 1,
        hour=sec // 3600,
        minute=sec % 3600 // 60,
        second=sec % 60 + t.fraction,
    )
