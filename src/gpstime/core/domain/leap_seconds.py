"""
Leap Seconds — Таблица секунд координации

Фиксированная таблица моментов (UTC), начиная с которых действует
соответствующая разница UTC - GPS. Порядок: от самой свежей записи к самой старой.

Таблица меняется только новым релизом пакета после бюллетеня IERS.
"""

from typing import Final

from pydantic import BaseModel, Field

from gpstime.core.domain.time_value import CalendarEpoch


# =============================================================================
# LEAP SECOND ENTRY
# =============================================================================


class LeapSecondEntry(BaseModel):
    """
    Запись таблицы: с момента {year..second} UTC действует utc_minus_gps.

    utc_minus_gps отрицательна: UTC отстаёт от GPS.
    """

    year: int = Field(..., ge=1980)
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)
    hour: int = Field(default=0, ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)
    second: int = Field(default=0, ge=0, le=60)
    utc_minus_gps: int = Field(..., lt=0, description="UTC - GPS (секунды)")

    model_config = {"frozen": True}  # Immutable

    @property
    def epoch(self) -> CalendarEpoch:
        """Момент вступления записи в силу (UTC)."""
        return CalendarEpoch(
            year=self.year,
            month=self.month,
            day=self.day,
            hour=self.hour,
            minute=self.minute,
            second=self.second,
        )


def _entry(year: int, month: int, day: int, utc_minus_gps: int) -> LeapSecondEntry:
    return LeapSecondEntry(year=year, month=month, day=day, utc_minus_gps=utc_minus_gps)


# =============================================================================
# TABLE
# =============================================================================

# Последний leap second: 2017-01-01 (GPS - UTC = 18 с)
LEAP_SECONDS: Final[tuple[LeapSecondEntry, ...]] = (
    _entry(2017, 1, 1, -18),
    _entry(2015, 7, 1, -17),
    _entry(2012, 7, 1, -16),
    _entry(2009, 1, 1, -15),
    _entry(2006, 1, 1, -14),
    _entry(1999, 1, 1, -13),
    _entry(1997, 7, 1, -12),
    _entry(1996, 1, 1, -11),
    _entry(1994, 7, 1, -10),
    _entry(1993, 7, 1, -9),
    _entry(1992, 7, 1, -8),
    _entry(1991, 1, 1, -7),
    _entry(1990, 1, 1, -6),
    _entry(1988, 1, 1, -5),
    _entry(1985, 7, 1, -4),
    _entry(1983, 7, 1, -3),
    _entry(1982, 7, 1, -2),
    _entry(1981, 7, 1, -1),
)
