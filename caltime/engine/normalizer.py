"""
Normalizer: fold out-of-range fields back into calendar ranges

normalize() and adjust() are the only arithmetic entry points for
TimeValue. Raw field addition without normalization is never safe.

Carry order: second -> minute -> hour -> day -> month -> year.
- second/minute/hour wrap modulo 60/60/24 (floor semantics for negatives)
- month is folded into 1..12 before the day carry, since the month decides
  how long it is
- day overflow/underflow walks through the months it crosses, each with its
  own length (done via the proleptic day number)

Invariants:
1. normalize(normalize(x)) == normalize(x)
2. adjust(x, 0, 0, 0, 0) == normalize(x)
3. Nothing raises for numeric overflow
"""

from typing import Tuple

from caltime.core.domain.time_value import TimeValue
from caltime.core.math.calendar_math import MONTHS_PER_YEAR
from caltime.core.math.proleptic import civil_from_days, days_from_civil


def normalize_fields(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0
) -> Tuple[int, int, int, int, int, int]:
    """
    Normalize raw field values.

    Returns:
        (year, month, day, hour, minute, second), all inside calendar ranges
    """
    minute_carry, second = divmod(second, 60)
    hour_carry, minute = divmod(minute + minute_carry, 60)
    day_carry, hour = divmod(hour + hour_carry, 24)

    year_carry, month_index = divmod(month - 1, MONTHS_PER_YEAR)
    year += year_carry
    month = month_index + 1

    # Day 1 of the (now legal) month is the anchor; day 0 is the last day of
    # the previous month, day 32 of January is Feb 1st, and so on.
    ordinal = days_from_civil(year, month, 1) + day - 1 + day_carry
    year, month, day = civil_from_days(ordinal)
    return year, month, day, hour, minute, second


def normalize(value: TimeValue) -> TimeValue:
    """
    Return `value` with every field inside its calendar range.

    DATE values keep their time fields untouched; only year/month/day are
    folded. The null sentinel is returned unchanged.
    """
    if value.is_null():
        return value

    if value.is_date:
        year, month, day, _, _, _ = normalize_fields(value.year, value.month, value.day)
        hour, minute, second = value.hour, value.minute, value.second
    else:
        year, month, day, hour, minute, second = normalize_fields(
            value.year, value.month, value.day, value.hour, value.minute, value.second
        )

    return value.model_copy(
        update={
            "year": year,
            "month": month,
            "day": day,
            "hour": hour,
            "minute": minute,
            "second": second,
        }
    )


def adjust(
    value: TimeValue, days: int = 0, hours: int = 0, minutes: int = 0, seconds: int = 0
) -> TimeValue:
    """
    Add signed deltas and normalize.

    Time-of-day deltas are ignored for DATE values. The input is never
    modified; a new value is returned.

    Args:
        value: Starting value
        days, hours, minutes, seconds: Signed deltas (any magnitude)

    Returns:
        Normalized value
    """
    if value.is_date:
        shifted = value.model_copy(update={"day": value.day + days})
    else:
        shifted = value.model_copy(
            update={
                "day": value.day + days,
                "hour": value.hour + hours,
                "minute": value.minute + minutes,
                "second": value.second + seconds,
            }
        )
    return normalize(shifted)
