"""
Domain models and value objects.

Contains the time value types and the leap-second table.
"""

from gpstime.core.domain.leap_seconds import LEAP_SECONDS, LeapSecondEntry
from gpstime.core.domain.time_value import (
    EPOCH_FIELD_COUNT,
    TIME_ZERO,
    CalendarEpoch,
    TimeValue,
)

__all__ = [
    # Time value models
    "EPOCH_FIELD_COUNT",
    "TIME_ZERO",
    "CalendarEpoch",
    "TimeValue",
    # Leap seconds
    "LEAP_SECONDS",
    "LeapSecondEntry",
]
