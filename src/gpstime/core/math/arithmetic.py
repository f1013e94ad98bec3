"""
Time Arithmetic — Сложение и разность моментов времени

ФОРМУЛЫ:
    time_add(t, s):  f = t.fraction + s
                     (t.whole_seconds + floor(f), f - floor(f))
    time_diff(t1, t2) = (t1.whole_seconds - t2.whole_seconds) + t1.fraction - t2.fraction

Перенос через floor (а не усечение): fraction остаётся в [0, 1) и для
отрицательных приращений, если входная fraction была в [0, 1).
"""

import logging
import math

from gpstime.core.domain.time_value import TimeValue
from gpstime.core.math.numerical_safeguards import (
    EPS_TIME_COMPARE_ABS,
    is_close,
    is_valid_float,
    sanitize_float,
)

logger = logging.getLogger("gpstime.arithmetic")


def time_add(t: TimeValue, sec: float) -> TimeValue:
    """
    Добавление секунд к моменту времени с нормализацией fraction.

    Тотальна: NaN/Inf приращение трактуется как 0.

    Args:
        t: Исходный момент
        sec: Приращение в секундах (может быть отрицательным)

    Returns:
        Новый TimeValue, представляющий t + sec

    Examples:
        >>> time_add(TimeValue(whole_seconds=10, fraction=0.25), 1.5)
        TimeValue(whole_seconds=11, fraction=0.75)
        >>> time_add(TimeValue(whole_seconds=10, fraction=0.25), -0.5)
        TimeValue(whole_seconds=9, fraction=0.75)
    """
    if not is_valid_float(sec):
        logger.debug("Non-finite time increment %r treated as 0", sec)
    sec = sanitize_float(sec)

    fraction = t.fraction + sec
    whole = math.floor(fraction)
    return TimeValue(whole_seconds=t.whole_seconds + whole, fraction=fraction - whole)


def time_diff(t1: TimeValue, t2: TimeValue) -> float:
    """
    Разность t1 - t2 в секундах.

    Целые секунды вычитаются до перевода в float, поэтому дробная часть
    не теряется для близких моментов. Для очень больших разностей
    точность ограничена double.
    """
    return (t1.whole_seconds - t2.whole_seconds) + t1.fraction - t2.fraction


def time_isclose(
    t1: TimeValue,
    t2: TimeValue,
    abs_tol: float = EPS_TIME_COMPARE_ABS,
) -> bool:
    """
    Совпадение моментов с точностью abs_tol секунд.

    Сравнивает представляемые моменты, а не поля: (10, 1.0) и (11, 0.0) равны.
    """
    return is_close(time_diff(t1, t2), 0.0, abs_tol=abs_tol)
