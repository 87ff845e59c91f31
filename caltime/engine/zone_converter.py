"""
ZoneConverter: move TimeValues between floating, UTC and named zones

convert_to_zone keeps the absolute instant of a zoned DATE-TIME and shifts
its wall-clock fields. DATE values and floating values have no absolute
instant, so they are only re-labelled with the target zone.

set_zone is the other, arithmetic-free operation: the same fields are
reinterpreted in a different zone.
"""

import logging
from typing import Optional

from caltime.core.domain.time_value import TimeValue
from caltime.core.domain.zone import Zone
from caltime.core.math.proleptic import epoch_from_fields
from caltime.engine.normalizer import adjust, normalize

logger = logging.getLogger(__name__)


def convert_to_zone(value: TimeValue, target_zone: Optional[Zone]) -> TimeValue:
    """
    Express `value` in `target_zone`.

    - null sentinel: returned as is
    - DATE: exact copy, zone reassigned
    - floating: same wall-clock reading, zone reassigned
    - already in target_zone: unchanged copy
    - target_zone None: fields kept, value becomes floating
    - otherwise: source offset removed, target offset at the resulting UTC
      instant applied, is_daylight taken from the target

    Args:
        value: Value to convert
        target_zone: Zone to express it in (None = floating)

    Returns:
        New TimeValue
    """
    if value.is_null():
        return value

    if value.is_date or value.zone is None or target_zone is None:
        return value.set_zone(target_zone)

    if value.zone is target_zone:
        return value.model_copy()

    local = normalize(value)
    # is_daylight decides which reading of a repeated hour is meant
    source_offset = value.zone.offset_for_local(
        local.year,
        local.month,
        local.day,
        local.hour,
        local.minute,
        local.second,
        is_daylight=value.is_daylight,
    )
    utc_value = adjust(local, seconds=-source_offset.utc_offset_seconds)

    utc_epoch = epoch_from_fields(
        utc_value.year,
        utc_value.month,
        utc_value.day,
        utc_value.hour,
        utc_value.minute,
        utc_value.second,
    )
    target_offset = target_zone.offset_for_utc(utc_epoch)
    converted = adjust(utc_value, seconds=target_offset.utc_offset_seconds)

    logger.debug(
        "Converted %s from %s to %s (offsets %+d -> %+d)",
        value,
        value.zone.tzid,
        target_zone.tzid,
        source_offset.utc_offset_seconds,
        target_offset.utc_offset_seconds,
    )
    return converted.model_copy(
        update={"zone": target_zone, "is_daylight": target_offset.is_daylight}
    )


def set_zone(value: TimeValue, zone: Optional[Zone]) -> TimeValue:
    """Reinterpret the same fields in `zone` (no arithmetic)."""
    return value.set_zone(zone)


def get_tzid(value: TimeValue) -> Optional[str]:
    """TZID of the value's zone, None for floating time."""
    return value.get_zone_identifier()
