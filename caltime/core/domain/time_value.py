"""
TimeValue: calendar DATE or DATE-TIME value

Immutable Pydantic model for one calendar instant or calendar day.

Field values are NOT range-checked at construction: raw out-of-range input
(minute=70, day=0) is legal here and is folded by the normalizer. Use
is_valid() to check calendar legality and is_null() to detect the unset
sentinel; the two are distinct.

The zone reference is borrowed from a ZoneRegistry. A value never creates
or releases zones; the registry has to outlive it.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from caltime.core.domain.zone import UTC, Zone
from caltime.core.math.calendar_math import days_in_month
from caltime.core.math.proleptic import civil_from_days, days_from_civil
from caltime.text.ical_format import ScannedFields, as_ical_string, scan_ical_string

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class TimeKind(str, Enum):
    """Tagged view of a TimeValue"""

    NULL = "null"
    DATE = "date"
    DATE_TIME = "date_time"


# =============================================================================
# TIME VALUE MODEL
# =============================================================================


class TimeValue(BaseModel):
    """
    Calendar date or date-time.

    Exactly one zone state applies:
    - zone is None: floating, the same wall-clock reading in any zone
    - zone is UTC: absolute UTC time
    - any other zone: wall-clock time in that zone

    When is_date is set the value denotes a whole day and hour/minute/second
    carry no meaning.
    """

    year: int = Field(0, description="Astronomical year, e.g. 2001 (0 = 1 BCE)")
    month: int = Field(0, description="1 (Jan) .. 12 (Dec)")
    day: int = Field(0, description="1 .. days in month")
    hour: int = Field(0, description="0 .. 23")
    minute: int = Field(0, description="0 .. 59")
    second: int = Field(0, description="0 .. 59")

    is_date: bool = Field(False, description="Interpret as a whole-day DATE")
    is_daylight: bool = Field(False, description="Produced while DST was in effect")

    zone: Optional[Zone] = Field(None, description="Borrowed zone reference, None = floating")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def null_time(cls) -> "TimeValue":
        """Unset DATE-TIME sentinel."""
        return cls()

    @classmethod
    def null_date(cls) -> "TimeValue":
        """Unset DATE sentinel."""
        return cls(is_date=True)

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        is_date: bool = False,
        zone: Optional[Zone] = None,
    ) -> "TimeValue":
        return cls(
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            is_date=is_date,
            zone=zone,
        )

    @classmethod
    def date(cls, year: int, month: int, day: int) -> "TimeValue":
        """Floating DATE value."""
        return cls(year=year, month=month, day=day, is_date=True)

    @classmethod
    def from_day_of_year(cls, day_of_year: int, year: int) -> "TimeValue":
        """
        DATE for the n-th day of a year.

        Out-of-range day numbers carry into the neighbouring years
        (day 0 is Dec 31st of the previous year).
        """
        y, m, d = civil_from_days(days_from_civil(year, 1, 1) + day_of_year - 1)
        return cls(year=y, month=m, day=d, is_date=True)

    @classmethod
    def from_string(
        cls,
        text: str,
        scanner: Callable[[str], Optional[ScannedFields]] = scan_ical_string,
        zone: Optional[Zone] = None,
    ) -> "TimeValue":
        """
        Build a value from its text form.

        Lexical scanning is delegated to `scanner`; this only assembles and
        validates the fields.

        Args:
            text: e.g. '20240107', '20240107T093000', '20240107T093000Z'
            scanner: Callable returning ScannedFields or None
            zone: Zone for DATE-TIME text without a 'Z' suffix (None = floating)

        Returns:
            The value, or the null sentinel if the text cannot be scanned or
            does not name a real calendar time
        """
        fields = scanner(text)
        if fields is None:
            logger.warning("Unparseable calendar time %r", text)
            return cls.null_time()

        if fields.is_date:
            zone = None
        elif fields.is_utc:
            zone = UTC

        value = cls(
            year=fields.year,
            month=fields.month,
            day=fields.day,
            hour=fields.hour,
            minute=fields.minute,
            second=fields.second,
            is_date=fields.is_date,
            zone=zone,
        )
        if value.is_null() or not value.is_valid():
            logger.warning("Calendar time %r is out of range", text)
            return cls.null_date() if fields.is_date else cls.null_time()
        return value

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def is_null(self) -> bool:
        """True for the unset sentinel (all numeric fields zero, no zone)."""
        return (
            self.zone is None
            and self.year == 0
            and self.month == 0
            and self.day == 0
            and self.hour == 0
            and self.minute == 0
            and self.second == 0
        )

    def is_valid(self) -> bool:
        """
        True if every field is inside its calendar range.

        The null sentinel is valid: it is unset, not malformed. Time fields
        of a DATE value are ignored.
        """
        if self.is_null():
            return True
        if not 1 <= self.month <= 12:
            return False
        if not 1 <= self.day <= days_in_month(self.month, self.year):
            return False
        if self.is_date:
            return True
        return 0 <= self.hour <= 23 and 0 <= self.minute <= 59 and 0 <= self.second <= 59

    @property
    def is_utc(self) -> bool:
        return self.zone is UTC

    @property
    def is_floating(self) -> bool:
        return self.zone is None

    @property
    def kind(self) -> TimeKind:
        if self.is_null():
            return TimeKind.NULL
        return TimeKind.DATE if self.is_date else TimeKind.DATE_TIME

    # -------------------------------------------------------------------------
    # Zone accessors
    # -------------------------------------------------------------------------

    def get_zone(self) -> Optional[Zone]:
        return self.zone

    def get_zone_identifier(self) -> Optional[str]:
        """TZID of the attached zone, None for floating values."""
        return self.zone.tzid if self.zone is not None else None

    def set_zone(self, zone: Optional[Zone]) -> "TimeValue":
        """
        Reinterpret the same wall-clock fields in another zone.

        No offset arithmetic is applied; use convert_to_zone for that.
        """
        return self.model_copy(update={"zone": zone})

    def as_date(self) -> "TimeValue":
        """DATE value for the same calendar day, time fields cleared."""
        return self.model_copy(update={"is_date": True, "hour": 0, "minute": 0, "second": 0})

    def __str__(self) -> str:
        return as_ical_string(self)
