"""
Core math modules for caltime

Integer-level calendar arithmetic on the proleptic Gregorian calendar.
"""

# CalendarMath
from caltime.core.math.calendar_math import (
    DAYS_PER_WEEK,
    MONTHS_PER_YEAR,
    Weekday,
    day_of_week,
    day_of_week_for,
    day_of_year,
    day_of_year_for,
    days_in_month,
    days_in_year,
    is_leap_year,
    start_doy_week,
    week_number,
)

# Proleptic day counting
from caltime.core.math.proleptic import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    civil_from_days,
    days_from_civil,
    epoch_from_fields,
    split_seconds,
)

__all__ = [
    # CalendarMath - Constants
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    # CalendarMath - Types
    "Weekday",
    # CalendarMath - Functions
    "day_of_week",
    "day_of_week_for",
    "day_of_year",
    "day_of_year_for",
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "start_doy_week",
    "week_number",
    # Proleptic - Constants
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    # Proleptic - Functions
    "civil_from_days",
    "days_from_civil",
    "epoch_from_fields",
    "split_seconds",
]
