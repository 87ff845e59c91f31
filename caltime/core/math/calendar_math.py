"""
CalendarMath: pure calendar arithmetic

Stateless helpers for the proleptic Gregorian calendar:
- leap years, days in month / year
- day of year, day of week (Sunday = 1)
- first day of a week, ISO 8601 week numbers

Functions that take a `value` accept anything with integer `year`, `month`
and `day` attributes (TimeValue in practice). The `*_for` variants take the
raw fields.
"""

from enum import IntEnum
from typing import Final, Protocol, Tuple

from caltime.core.math.proleptic import days_from_civil


# =============================================================================
# CONSTANTS
# =============================================================================

MONTHS_PER_YEAR: Final[int] = 12
DAYS_PER_WEEK: Final[int] = 7

# Index 0 is unused so that months are 1-based
_DAYS_IN_MONTH: Final[Tuple[int, ...]] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Cumulative days before the first of each month in a common year
_DAYS_BEFORE_MONTH: Final[Tuple[int, ...]] = (
    0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)

# 1970-01-01 was a Thursday
_EPOCH_WEEKDAY_OFFSET: Final[int] = 4


class Weekday(IntEnum):
    """Day of week, Sunday = 1"""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


class HasDate(Protocol):
    year: int
    month: int
    day: int


# =============================================================================
# YEARS AND MONTHS
# =============================================================================


def is_leap_year(year: int) -> bool:
    """
    Proleptic Gregorian leap year rule.

    Year 0 and negative years are treated arithmetically (0 is a leap year).
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """
    Number of days in a month.

    Args:
        month: 1..12
        year: Astronomical year (decides February)

    Raises:
        ValueError: Month outside 1..12
    """
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise ValueError(f"month must be in 1..12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


# =============================================================================
# POSITION WITHIN YEAR / WEEK
# =============================================================================


def day_of_year_for(year: int, month: int, day: int) -> int:
    """1-based day of year for raw fields."""
    leap_day = 1 if month > 2 and is_leap_year(year) else 0
    return _DAYS_BEFORE_MONTH[month] + leap_day + day


def day_of_week_for(year: int, month: int, day: int) -> int:
    """Day of week for raw fields, 1 (Sunday) .. 7 (Saturday)."""
    return (days_from_civil(year, month, day) + _EPOCH_WEEKDAY_OFFSET) % DAYS_PER_WEEK + 1


def day_of_year(value: HasDate) -> int:
    """Day of year of the value, counting from 1 (Jan 1st)."""
    return day_of_year_for(value.year, value.month, value.day)


def day_of_week(value: HasDate) -> int:
    """Day of week of the value. Sunday is 1."""
    return day_of_week_for(value.year, value.month, value.day)


def start_doy_week(value: HasDate, first_day_of_week: int) -> int:
    """
    Day of year of the first day of the week containing `value`.

    Args:
        value: Date to locate
        first_day_of_week: Weekday the week starts on (1=Sunday .. 7=Saturday)

    Returns:
        Day of year; <= 0 means the week started in the previous year,
        the caller decides how to interpret it

    Raises:
        ValueError: first_day_of_week outside 1..7
    """
    if not 1 <= first_day_of_week <= DAYS_PER_WEEK:
        raise ValueError(f"first_day_of_week must be in 1..7, got {first_day_of_week}")

    delta = (day_of_week(value) - first_day_of_week) % DAYS_PER_WEEK
    return day_of_year(value) - delta


def week_number(value: HasDate, first_day_of_week: int = Weekday.MONDAY) -> int:
    """
    ISO 8601 style week number.

    Week 1 is the week holding the year's first Thursday (for Monday-based
    weeks; for other start days, the fourth day of the week plays that role).
    Late December dates may belong to week 1 of the next year and early
    January dates to the last week of the previous year.

    Args:
        value: Date to number
        first_day_of_week: Weekday the weeks start on (default Monday)

    Returns:
        1..53
    """
    week_start = start_doy_week(value, first_day_of_week)
    anchor = week_start + 3
    year = value.year

    if anchor < 1:
        # Week belongs to the previous year: number it from Dec 31st
        year -= 1
        anchor += days_in_year(year)
    elif anchor > days_in_year(year):
        return 1

    return (anchor - 1) // DAYS_PER_WEEK + 1
