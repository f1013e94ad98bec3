"""
Contract Validation Module

JSON Schema контракты для обмена моментами времени, календарными датами
и таблицей leap seconds.
"""

from .validators import (
    CalendarEpochValidator,
    ContractValidator,
    LeapSecondTableValidator,
    SchemaLoader,
    TimeValueValidator,
    leap_second_table_document,
    validate_calendar_epoch,
    validate_leap_second_table,
    validate_time_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TimeValueValidator",
    "CalendarEpochValidator",
    "LeapSecondTableValidator",
    # Functions
    "validate_time_value",
    "validate_calendar_epoch",
    "validate_leap_second_table",
    "leap_second_table_document",
]
