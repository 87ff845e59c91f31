"""
Zone: timezone descriptors and the registry that owns them

TimeValue only borrows zone references. Zones are created and cached by a
ZoneRegistry, which must outlive every TimeValue pointing at its zones. One
instance exists per identifier, so zones compare by identity.

Offset rules and DST tables come from the standard `zoneinfo` database; this
module only asks it "what is the offset at instant X" and hands the answer
back as a ZoneOffset.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Final, Optional, Protocol, runtime_checkable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

UTC_TZID: Final[str] = "UTC"

# Identifiers that resolve to the UTC singleton
UTC_ALIASES: Final[frozenset] = frozenset({"UTC", "Z", "Etc/UTC", "Etc/Zulu", "Zulu", "GMT0"})

# datetime supports years 1..9999; offsets are looked up inside this window
_MIN_LOOKUP_YEAR: Final[int] = 1
_MAX_LOOKUP_YEAR: Final[int] = 9999

# Kept one day inside the datetime range so astimezone() cannot overflow
_DATETIME_MIN_EPOCH: Final[int] = -62135596800 + 86400  # 0001-01-02T00:00:00Z
_DATETIME_MAX_EPOCH: Final[int] = 253402300799 - 86400  # 9999-12-30T23:59:59Z


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownZoneError(KeyError):
    """Identifier does not resolve to any zone in the registry."""


# =============================================================================
# ZONE PROTOCOL
# =============================================================================


@dataclass(frozen=True)
class ZoneOffset:
    """UTC offset and DST state of a zone at one instant."""

    utc_offset_seconds: int
    is_daylight: bool = False


@runtime_checkable
class Zone(Protocol):
    """
    Read-only timezone descriptor.

    offset_for_local answers for a wall-clock reading in this zone,
    offset_for_utc for an absolute instant. is_daylight picks between the
    two readings of a repeated wall-clock hour; None means the earlier one.
    """

    tzid: str

    def offset_for_local(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        is_daylight: Optional[bool] = None,
    ) -> ZoneOffset: ...

    def offset_for_utc(self, epoch_seconds: int) -> ZoneOffset: ...


class UtcZone:
    """The UTC zone. Use the module-level UTC singleton, never instantiate."""

    tzid: str = UTC_TZID

    def offset_for_local(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        is_daylight: Optional[bool] = None,
    ) -> ZoneOffset:
        return ZoneOffset(0, False)

    def offset_for_utc(self, epoch_seconds: int) -> ZoneOffset:
        return ZoneOffset(0, False)

    def __repr__(self) -> str:
        return "UtcZone()"


UTC: Final[UtcZone] = UtcZone()


class ZoneInfoZone:
    """
    Zone backed by the IANA database through zoneinfo.

    Wall times in a gap resolve with fold=0 (the offset before the
    transition), matching datetime's own behaviour.
    """

    def __init__(self, tzid: str, tzinfo: ZoneInfo):
        self.tzid = tzid
        self._tzinfo = tzinfo

    def offset_for_local(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        is_daylight: Optional[bool] = None,
    ) -> ZoneOffset:
        lookup_year = min(max(year, _MIN_LOOKUP_YEAR), _MAX_LOOKUP_YEAR)
        if lookup_year != year:
            # Feb 29th may not exist in the substitute year
            year, day = lookup_year, min(day, 28)

        local = datetime(year, month, day, hour, minute, second, tzinfo=self._tzinfo)
        earlier = self._offset_of(local)
        if is_daylight is None or earlier.is_daylight == is_daylight:
            return earlier

        later = self._offset_of(local.replace(fold=1))
        if later.is_daylight == is_daylight:
            return later
        return earlier

    def offset_for_utc(self, epoch_seconds: int) -> ZoneOffset:
        epoch_seconds = min(max(epoch_seconds, _DATETIME_MIN_EPOCH), _DATETIME_MAX_EPOCH)
        instant = datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=epoch_seconds)
        return self._offset_of(instant.astimezone(self._tzinfo))

    @staticmethod
    def _offset_of(moment: datetime) -> ZoneOffset:
        utc_offset = moment.utcoffset() or timedelta(0)
        dst = moment.dst() or timedelta(0)
        return ZoneOffset(int(utc_offset.total_seconds()), dst != timedelta(0))

    def __repr__(self) -> str:
        return f"ZoneInfoZone({self.tzid!r})"


# =============================================================================
# REGISTRY
# =============================================================================


class ZoneRegistry:
    """
    Resolver from identifier to zone.

    Zones are loaded lazily and cached for the registry's lifetime. Lookups
    are safe from several threads; the cache insert is serialized.
    """

    def __init__(self):
        self._zones: Dict[str, Zone] = {}
        self._lock = threading.Lock()

    @property
    def utc(self) -> UtcZone:
        return UTC

    def get(self, tzid: Optional[str]) -> Optional[Zone]:
        """
        Zone for an identifier.

        Args:
            tzid: IANA identifier (e.g. 'Europe/Berlin') or a UTC alias

        Returns:
            Shared zone instance, or None if the identifier is unknown
        """
        if not tzid:
            return None
        if tzid in UTC_ALIASES:
            return UTC

        zone = self._zones.get(tzid)
        if zone is not None:
            return zone

        with self._lock:
            zone = self._zones.get(tzid)
            if zone is None:
                try:
                    tzinfo = ZoneInfo(tzid)
                except (ZoneInfoNotFoundError, ValueError, OSError):
                    logger.debug("Unknown timezone identifier %r", tzid)
                    return None
                zone = ZoneInfoZone(tzid, tzinfo)
                self._zones[tzid] = zone
                logger.debug("Loaded timezone %r", tzid)
        return zone

    def require(self, tzid: str) -> Zone:
        """
        Like get(), but an unknown identifier is an error.

        Raises:
            UnknownZoneError: Identifier not found
        """
        zone = self.get(tzid)
        if zone is None:
            raise UnknownZoneError(tzid)
        return zone

    def __contains__(self, tzid: str) -> bool:
        return self.get(tzid) is not None


_DEFAULT_REGISTRY = ZoneRegistry()


def default_registry() -> ZoneRegistry:
    """Process-wide registry."""
    return _DEFAULT_REGISTRY


def get_zone(tzid: Optional[str]) -> Optional[Zone]:
    """Shortcut for default_registry().get(tzid)."""
    return _DEFAULT_REGISTRY.get(tzid)
