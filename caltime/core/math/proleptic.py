"""
Proleptic Gregorian day counting

Day numbers are counted from 1970-01-01 (day 0) and extend the Gregorian
calendar backwards without a year-zero gap, so year 0 is 1 BCE and negative
years are valid input.

Invariants:
1. civil_from_days(days_from_civil(y, m, d)) == (y, m, d) for every legal date
2. Consecutive days map to consecutive integers across month/year boundaries
"""

from typing import Final, Tuple

SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_HOUR: Final[int] = 3600
SECONDS_PER_DAY: Final[int] = 86400

# Days in one 400-year Gregorian cycle
DAYS_PER_ERA: Final[int] = 146097

# Day number of 0000-03-01 relative to 1970-01-01
_EPOCH_SHIFT: Final[int] = 719468


def days_from_civil(year: int, month: int, day: int) -> int:
    """
    Day number for a calendar date.

    Months are counted from March so that the leap day falls at the end of
    the computational year.

    Args:
        year: Astronomical year (may be zero or negative)
        month: 1..12
        day: 1..31 (values past the month end roll forward linearly)

    Returns:
        Days since 1970-01-01 (negative before the epoch)
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = (month + 9) % 12
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * DAYS_PER_ERA + doe - _EPOCH_SHIFT


def civil_from_days(days: int) -> Tuple[int, int, int]:
    """
    Calendar date for a day number.

    Args:
        days: Days since 1970-01-01

    Returns:
        (year, month, day)
    """
    z = days + _EPOCH_SHIFT
    era = z // DAYS_PER_ERA
    doe = z - era * DAYS_PER_ERA
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def split_seconds(seconds: int) -> Tuple[int, int, int, int]:
    """
    Split a signed second count into (days, hour, minute, second).

    Floor division keeps the time-of-day part non-negative for instants
    before the epoch.
    """
    days, rem = divmod(seconds, SECONDS_PER_DAY)
    hour, rem = divmod(rem, SECONDS_PER_HOUR)
    minute, second = divmod(rem, SECONDS_PER_MINUTE)
    return days, hour, minute, second


def epoch_from_fields(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0
) -> int:
    """Seconds since the epoch for fields read as UTC."""
    return (
        days_from_civil(year, month, day) * SECONDS_PER_DAY
        + hour * SECONDS_PER_HOUR
        + minute * SECONDS_PER_MINUTE
        + second
    )
