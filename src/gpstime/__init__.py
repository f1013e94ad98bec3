"""
gpstime — GPS time arithmetic

Конверсии между календарной датой, непрерывным представлением
(целые + дробные секунды), GPS week/TOW и UTC с учётом leap seconds.
"""

from gpstime.core.domain import (
    LEAP_SECONDS,
    TIME_ZERO,
    CalendarEpoch,
    LeapSecondEntry,
    TimeValue,
)
from gpstime.core.errors import GPSTimeError, InvalidCalendarInput
from gpstime.core.math import (
    GPST0,
    GPST0_EPOCH,
    SECONDS_PER_DAY,
    SECONDS_PER_WEEK,
    epoch_to_time,
    epoch_to_time_checked,
    gpst_to_time,
    gpst_to_utc,
    is_valid_epoch,
    leap_seconds_at_gpst,
    leap_seconds_at_utc,
    time_add,
    time_diff,
    time_isclose,
    time_to_epoch,
    time_to_gpst,
    utc_to_gpst,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Models
    "CalendarEpoch",
    "LeapSecondEntry",
    "TimeValue",
    # Constants
    "GPST0",
    "GPST0_EPOCH",
    "LEAP_SECONDS",
    "SECONDS_PER_DAY",
    "SECONDS_PER_WEEK",
    "TIME_ZERO",
    # Errors
    "GPSTimeError",
    "InvalidCalendarInput",
    # Functions
    "epoch_to_time",
    "epoch_to_time_checked",
    "gpst_to_time",
    "gpst_to_utc",
    "is_valid_epoch",
    "leap_seconds_at_gpst",
    "leap_seconds_at_utc",
    "time_add",
    "time_diff",
    "time_isclose",
    "time_to_epoch",
    "time_to_gpst",
    "utc_to_gpst",
]
