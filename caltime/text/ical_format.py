"""
Text form of calendar times

Lexical scanner and formatter for the iCalendar style text form:

    YYYYMMDD              DATE
    YYYYMMDDTHHMMSS       floating or zoned DATE-TIME
    YYYYMMDDTHHMMSSZ      UTC DATE-TIME

The extended form with separators (YYYY-MM-DD, YYYY-MM-DDTHH:MM:SS[Z]) is
accepted on input. The scanner checks structure only; calendar validation
happens when TimeValue assembles the fields.
"""

import re
from typing import TYPE_CHECKING, Final, NamedTuple, Optional

if TYPE_CHECKING:
    from caltime.core.domain.time_value import TimeValue


_BASIC_RE: Final = re.compile(
    r"^(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})"
    r"(?:T(?P<hour>\d{2})(?P<minute>\d{2})(?P<second>\d{2})(?P<utc>Z)?)?$"
)
_EXTENDED_RE: Final = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})(?P<utc>Z)?)?$"
)


class ScannedFields(NamedTuple):
    """Raw fields produced by the scanner."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    is_date: bool = False
    is_utc: bool = False


def scan_ical_string(text: str) -> Optional[ScannedFields]:
    """
    Split a text time into fields.

    Args:
        text: Candidate string (surrounding whitespace is ignored)

    Returns:
        ScannedFields, or None if the text has the wrong shape
    """
    if not isinstance(text, str):
        return None

    text = text.strip()
    match = _BASIC_RE.match(text) or _EXTENDED_RE.match(text)
    if match is None:
        return None

    year, month, day = int(match["year"]), int(match["month"]), int(match["day"])
    if match["hour"] is None:
        return ScannedFields(year, month, day, is_date=True)

    return ScannedFields(
        year,
        month,
        day,
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"]),
        is_date=False,
        is_utc=match["utc"] is not None,
    )


def as_ical_string(value: "TimeValue") -> str:
    """
    Format a TimeValue in the basic text form.

    DATE values drop the time part; UTC values get a trailing 'Z'. Floating
    and named-zone values carry no zone marker (the TZID travels separately
    in calendar documents).
    """
    date_part = f"{value.year:04d}{value.month:02d}{value.day:02d}"
    if value.is_date:
        return date_part

    time_part = f"{value.hour:02d}{value.minute:02d}{value.second:02d}"
    suffix = "Z" if value.is_utc else ""
    return f"{date_part}T{time_part}{suffix}"
