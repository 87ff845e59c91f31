"""
Comparator: ordering of TimeValues

compare() puts both operands in UTC before comparing, so equal instants in
different zones compare equal even though their fields differ. Floating
values have no absolute instant and are compared by their literal fields.

Ordering rules:
- the null sentinel sorts before every set value
- (year, month, day) next
- on the same day a DATE sorts before any DATE-TIME
- two DATE-TIMEs then compare (hour, minute, second)
"""

from typing import Optional, Tuple

from caltime.core.domain.time_value import TimeValue
from caltime.core.domain.zone import UTC, Zone
from caltime.engine.normalizer import normalize
from caltime.engine.zone_converter import convert_to_zone

_NULL_KEY: Tuple[int, ...] = (0,)


def _cmp(a: Tuple[int, ...], b: Tuple[int, ...]) -> int:
    return (a > b) - (a < b)


def _in_zone(value: TimeValue, zone: Zone) -> TimeValue:
    return normalize(convert_to_zone(value, zone))


def _date_key(value: TimeValue) -> Tuple[int, ...]:
    if value.is_null():
        return _NULL_KEY
    return (1, value.year, value.month, value.day)


def sort_key(value: TimeValue) -> Tuple[int, ...]:
    """
    Key consistent with compare(), for sorted()/min()/max().

    The fifth element keeps DATE values ahead of DATE-TIMEs on the same day.
    """
    utc = _in_zone(value, UTC)
    if utc.is_null():
        return _NULL_KEY
    if utc.is_date:
        return (1, utc.year, utc.month, utc.day, 0)
    return (1, utc.year, utc.month, utc.day, 1, utc.hour, utc.minute, utc.second)


def compare(a: TimeValue, b: TimeValue) -> int:
    """
    Compare two values as instants.

    Returns:
        -1 if a < b, 0 if equal, +1 if a > b
    """
    return _cmp(sort_key(a), sort_key(b))


def compare_date_only(a: TimeValue, b: TimeValue) -> int:
    """
    Compare the UTC calendar dates of two values, ignoring time of day.

    Returns:
        -1, 0 or +1
    """
    return _cmp(_date_key(_in_zone(a, UTC)), _date_key(_in_zone(b, UTC)))


def compare_date_only_tz(a: TimeValue, b: TimeValue, zone: Optional[Zone] = None) -> int:
    """
    Compare calendar dates as seen in `zone` (UTC when None).

    Both operands are converted to `zone` before the time of day is dropped,
    so the local calendar date of that zone decides. A floating operand
    keeps its wall-clock fields and is read as local time in `zone`.

    Returns:
        -1, 0 or +1
    """
    target = zone if zone is not None else UTC
    return _cmp(_date_key(_in_zone(a, target)), _date_key(_in_zone(b, target)))
