"""
Operations on TimeValues: normalization, zone conversion, epoch bridge,
comparison and free/busy spans.
"""

from caltime.engine.comparator import (
    compare,
    compare_date_only,
    compare_date_only_tz,
    sort_key,
)
from caltime.engine.epoch_bridge import (
    as_epoch,
    as_epoch_in_zone,
    current_time_with_zone,
    from_epoch,
    today,
)
from caltime.engine.normalizer import adjust, normalize, normalize_fields
from caltime.engine.span_calculator import contains, make_span, overlaps
from caltime.engine.zone_converter import convert_to_zone, get_tzid, set_zone

__all__ = [
    # Normalizer
    "normalize",
    "normalize_fields",
    "adjust",
    # ZoneConverter
    "convert_to_zone",
    "get_tzid",
    "set_zone",
    # EpochBridge
    "as_epoch",
    "as_epoch_in_zone",
    "from_epoch",
    "current_time_with_zone",
    "today",
    # Comparator
    "compare",
    "compare_date_only",
    "compare_date_only_tz",
    "sort_key",
    # SpanCalculator
    "make_span",
    "overlaps",
    "contains",
]
