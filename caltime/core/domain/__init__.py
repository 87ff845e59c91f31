"""
Domain models and value objects.

TimeValue, TimeSpan and the timezone descriptors they refer to.
"""

from caltime.core.domain.time_span import TimeSpan
from caltime.core.domain.time_value import TimeKind, TimeValue
from caltime.core.domain.zone import (
    UTC,
    UnknownZoneError,
    UtcZone,
    Zone,
    ZoneInfoZone,
    ZoneOffset,
    ZoneRegistry,
    default_registry,
    get_zone,
)

__all__ = [
    # TimeValue
    "TimeValue",
    "TimeKind",
    # TimeSpan
    "TimeSpan",
    # Zones
    "UTC",
    "UtcZone",
    "Zone",
    "ZoneInfoZone",
    "ZoneOffset",
    "ZoneRegistry",
    "UnknownZoneError",
    "default_registry",
    "get_zone",
]
