"""
Core math modules для gpstime

Чистые функции над TimeValue: арифметика, календарь, GPS week/TOW, GPS ↔ UTC.
"""

# Numerical Safeguards
from gpstime.core.math.numerical_safeguards import (
    EPS_TIME_COMPARE_ABS,
    is_close,
    is_valid_float,
    is_within,
    sanitize_float,
)

# Time arithmetic
from gpstime.core.math.arithmetic import (
    time_add,
    time_diff,
    time_isclose,
)

# Calendar
from gpstime.core.math.calendar import (
    DAYS_PER_4_YEARS,
    MAX_YEAR,
    MIN_YEAR,
    SECONDS_PER_DAY,
    epoch_to_time,
    epoch_to_time_checked,
    is_valid_epoch,
    time_to_epoch,
)

# GPS time
from gpstime.core.math.gps import (
    GPST0,
    GPST0_EPOCH,
    SECONDS_PER_WEEK,
    TOW_LIMIT,
    gpst_to_time,
    gpst_to_utc,
    leap_seconds_at_gpst,
    leap_seconds_at_utc,
    time_to_gpst,
    utc_to_gpst,
)

__all__ = [
    # Numerical Safeguards
    "EPS_TIME_COMPARE_ABS",
    "is_close",
    "is_valid_float",
    "is_within",
    "sanitize_float",
    # Time arithmetic
    "time_add",
    "time_diff",
    "time_isclose",
    # Calendar — Constants
    "DAYS_PER_4_YEARS",
    "MAX_YEAR",
    "MIN_YEAR",
    "SECONDS_PER_DAY",
    # Calendar — Functions
    "epoch_to_time",
    "epoch_to_time_checked",
    "is_valid_epoch",
    "time_to_epoch",
    # GPS time — Constants
    "GPST0",
    "GPST0_EPOCH",
    "SECONDS_PER_WEEK",
    "TOW_LIMIT",
    # GPS time — Functions
    "gpst_to_time",
    "gpst_to_utc",
    "leap_seconds_at_gpst",
    "leap_seconds_at_utc",
    "time_to_gpst",
    "utc_to_gpst",
]
