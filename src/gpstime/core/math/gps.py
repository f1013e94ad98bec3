"""
GPS Time — GPS week/TOW и конверсия GPS ↔ UTC

GPS time: непрерывная шкала без leap seconds, эпоха 1980-01-06 00:00:00.
UTC = GPS + utc_minus_gps, где utc_minus_gps берётся из LEAP_SECONDS.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица просматривается от самой свежей записи к самой старой,
   выбирается первая запись, момент которой не позже заданного (UTC)
2. Моменты до первой записи таблицы (1981-07-01) не корректируются
3. TOW вне [-1e9, 1e9] (и NaN) трактуется как 0, без ошибки
"""

import logging
import math
from typing import Final

from gpstime.core.domain.leap_seconds import LEAP_SECONDS, LeapSecondEntry
from gpstime.core.domain.time_value import CalendarEpoch, TimeValue
from gpstime.core.math.arithmetic import time_add, time_diff
from gpstime.core.math.calendar import SECONDS_PER_DAY, epoch_to_time
from gpstime.core.math.numerical_safeguards import is_within

logger = logging.getLogger("gpstime.gps")

# =============================================================================
# GPS КОНСТАНТЫ
# =============================================================================

GPST0_EPOCH: Final[CalendarEpoch] = CalendarEpoch(year=1980, month=1, day=6)

# Эпоха GPS во внутреннем представлении (315964800 с от 1970-01-01)
GPST0: Final[TimeValue] = epoch_to_time(GPST0_EPOCH)

SECONDS_PER_WEEK: Final[int] = 7 * SECONDS_PER_DAY

# Допустимый модуль TOW; за пределами TOW считается нулевым
TOW_LIMIT: Final[float] = 1e9


def _entry_time(entry: LeapSecondEntry) -> TimeValue:
    return epoch_to_time(entry.epoch)


# Моменты вступления записей в силу (UTC), в порядке LEAP_SECONDS
_LEAP_TIMES: Final[tuple[tuple[TimeValue, int], ...]] = tuple(
    (_entry_time(entry), entry.utc_minus_gps) for entry in LEAP_SECONDS
)


# =============================================================================
# GPS WEEK / TOW
# =============================================================================


def gpst_to_time(week: int, tow: float) -> TimeValue:
    """
    Конверсия GPS week + time of week в TimeValue (шкала GPS).

    Args:
        week: Номер недели GPS от эпохи 1980-01-06 (без rollover по 1024)
        tow: Время от начала недели (секунды)

    Returns:
        TimeValue в шкале GPS

    Examples:
        >>> gpst_to_time(0, 0.0)
        TimeValue(whole_seconds=315964800, fraction=0.0)
        >>> gpst_to_time(1, 1.25)
        TimeValue(whole_seconds=316569601, fraction=0.25)
    """
    if not is_within(tow, -TOW_LIMIT, TOW_LIMIT):
        logger.debug("Time of week %r outside ±%g treated as 0", tow, TOW_LIMIT)
        tow = 0.0

    whole = math.floor(tow)
    return TimeValue(
        whole_seconds=GPST0.whole_seconds + SECONDS_PER_WEEK * week + whole,
        fraction=tow - whole,
    )


def time_to_gpst(t: TimeValue) -> tuple[float, int]:
    """
    Конверсия TimeValue (шкала GPS) в time of week и номер недели.

    Returns:
        (tow, week); tow в [0, 604800) при fraction в [0, 1)
    """
    delta = t.whole_seconds - GPST0.whole_seconds
    week, sec_of_week = divmod(delta, SECONDS_PER_WEEK)
    return float(sec_of_week) + t.fraction, week


# =============================================================================
# GPS ↔ UTC
# =============================================================================


def gpst_to_utc(t: TimeValue) -> TimeValue:
    """
    Конверсия GPS time → UTC с учётом leap seconds.

    Для каждой записи (от свежей к старой) кандидат tu = t + utc_minus_gps
    принимается, если tu не раньше момента записи.

    Returns:
        Момент в UTC; t без изменений, если t раньше покрытия таблицы
    """
    for leap_time, utc_minus_gps in _LEAP_TIMES:
        tu = time_add(t, utc_minus_gps)
        if time_diff(tu, leap_time) >= 0.0:
            return tu
    return t


def utc_to_gpst(t: TimeValue) -> TimeValue:
    """
    Конверсия UTC → GPS time с учётом leap seconds.

    Returns:
        Момент в шкале GPS; t без изменений, если t раньше 1981-07-01
    """
    for leap_time, utc_minus_gps in _LEAP_TIMES:
        if time_diff(t, leap_time) >= 0.0:
            return time_add(t, -utc_minus_gps)
    return t


def leap_seconds_at_utc(t: TimeValue) -> int:
    """
    GPS - UTC (секунды), действующая в момент t (UTC).

    Examples:
        >>> leap_seconds_at_utc(epoch_to_time([2017, 1, 1, 0, 0, 0]))
        18
        >>> leap_seconds_at_utc(epoch_to_time([1980, 1, 6, 0, 0, 0]))
        0
    """
    for leap_time, utc_minus_gps in _LEAP_TIMES:
        if time_diff(t, leap_time) >= 0.0:
            return -utc_minus_gps
    return 0


def leap_seconds_at_gpst(t: TimeValue) -> int:
    """GPS - UTC (секунды), действующая в момент t (шкала GPS)."""
    return round(time_diff(t, gpst_to_utc(t)))
