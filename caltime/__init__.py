"""
caltime: timezone-aware calendar time core

TimeValue is the time primitive of a calendar data model: a DATE or
DATE-TIME that is floating, UTC, or tied to a named zone. The engine
package provides normalization, zone conversion, epoch conversion,
ordering and free/busy span logic on top of it.
"""

from caltime.config import DEFAULT_SPAN_CONFIG, SpanConfig
from caltime.core.domain import (
    UTC,
    TimeKind,
    TimeSpan,
    TimeValue,
    UnknownZoneError,
    Zone,
    ZoneOffset,
    ZoneRegistry,
    default_registry,
    get_zone,
)
from caltime.core.math import (
    Weekday,
    day_of_week,
    day_of_year,
    days_in_month,
    days_in_year,
    is_leap_year,
    start_doy_week,
    week_number,
)
from caltime.engine import (
    adjust,
    as_epoch,
    as_epoch_in_zone,
    compare,
    compare_date_only,
    compare_date_only_tz,
    contains,
    convert_to_zone,
    current_time_with_zone,
    from_epoch,
    get_tzid,
    make_span,
    normalize,
    overlaps,
    set_zone,
    sort_key,
    today,
)
from caltime.text import as_ical_string, scan_ical_string

__version__ = "0.1.0"

__all__ = [
    # Config
    "SpanConfig",
    "DEFAULT_SPAN_CONFIG",
    # Types
    "TimeValue",
    "TimeKind",
    "TimeSpan",
    "Zone",
    "ZoneOffset",
    "ZoneRegistry",
    "UnknownZoneError",
    "UTC",
    "Weekday",
    # Zones
    "default_registry",
    "get_zone",
    # CalendarMath
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_year",
    "day_of_week",
    "start_doy_week",
    "week_number",
    # Operations
    "normalize",
    "adjust",
    "convert_to_zone",
    "set_zone",
    "get_tzid",
    "as_epoch",
    "as_epoch_in_zone",
    "from_epoch",
    "current_time_with_zone",
    "today",
    "compare",
    "compare_date_only",
    "compare_date_only_tz",
    "sort_key",
    "make_span",
    "overlaps",
    "contains",
    # Text
    "as_ical_string",
    "scan_ical_string",
]
