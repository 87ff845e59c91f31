"""
EpochBridge: TimeValue <-> signed UTC epoch seconds

The epoch count is the only numeric interchange format with non-calendar
code.

Note: as_epoch() reads the wall-clock fields as if they were UTC and does
no conversion. It is only meaningful for UTC (or deliberately floating)
values; convert first, or use as_epoch_in_zone().
"""

import logging
import math
import time
from numbers import Integral
from typing import Callable, Final, Optional

from caltime.core.domain.time_value import TimeValue
from caltime.core.domain.zone import UTC, Zone
from caltime.core.math.proleptic import civil_from_days, epoch_from_fields, split_seconds
from caltime.engine.zone_converter import convert_to_zone

logger = logging.getLogger(__name__)

# Years outside +/- this bound are refused by from_epoch
MAX_ABS_YEAR: Final[int] = 1_000_000

_MAX_ABS_EPOCH: Final[int] = MAX_ABS_YEAR * 366 * 86400

Clock = Callable[[], float]


# =============================================================================
# TO EPOCH
# =============================================================================


def as_epoch(value: TimeValue) -> int:
    """
    Seconds since the epoch, reading the fields as UTC.

    No zone conversion is done. DATE values count from midnight; the null
    sentinel maps to 0.
    """
    if value.is_null():
        return 0
    if value.is_date:
        return epoch_from_fields(value.year, value.month, value.day)
    return epoch_from_fields(
        value.year, value.month, value.day, value.hour, value.minute, value.second
    )


def as_epoch_in_zone(value: TimeValue, zone: Optional[Zone]) -> int:
    """
    as_epoch(convert_to_zone(value, zone)).

    With zone None the value's own fields are used as they are.
    """
    if value.is_null():
        return 0
    if zone is None:
        return as_epoch(value)
    return as_epoch(convert_to_zone(value, zone))


# =============================================================================
# FROM EPOCH
# =============================================================================


def _null(is_date: bool) -> TimeValue:
    return TimeValue.null_date() if is_date else TimeValue.null_time()


def from_epoch(seconds: int, is_date: bool = False, zone: Optional[Zone] = None) -> TimeValue:
    """
    TimeValue for an epoch instant.

    The instant is decomposed in UTC and then expressed in `zone`. With
    zone None the result is floating and carries the UTC wall-clock fields.

    Args:
        seconds: Signed seconds since 1970-01-01T00:00:00Z (floats are floored)
        is_date: Return a DATE (time fields cleared)
        zone: Zone of the result (None = floating)

    Returns:
        TimeValue, or the null sentinel for non-numeric, non-finite or
        out-of-range input
    """
    if isinstance(seconds, bool) or not isinstance(seconds, (Integral, float)):
        logger.warning("Epoch value %r is not a number", seconds)
        return _null(is_date)
    if isinstance(seconds, float):
        if not math.isfinite(seconds):
            logger.warning("Epoch value %r is not finite", seconds)
            return _null(is_date)
        seconds = math.floor(seconds)
    if abs(seconds) > _MAX_ABS_EPOCH:
        logger.warning("Epoch value %r is out of range", seconds)
        return _null(is_date)

    days, hour, minute, second = split_seconds(int(seconds))
    year, month, day = civil_from_days(days)
    value = TimeValue(
        year=year, month=month, day=day, hour=hour, minute=minute, second=second, zone=UTC
    )

    if zone is None:
        value = value.set_zone(None)
    else:
        value = convert_to_zone(value, zone)

    if is_date:
        value = value.as_date()
    return value


def current_time_with_zone(zone: Optional[Zone], clock: Clock = time.time) -> TimeValue:
    """Current time in `zone`, read from `clock` (epoch seconds)."""
    return from_epoch(int(clock()), is_date=False, zone=zone)


def today(clock: Clock = time.time) -> TimeValue:
    """Current UTC calendar day as a floating DATE."""
    return from_epoch(int(clock()), is_date=True, zone=None)
