"""
SpanCalculator: free/busy intervals

Builds half-open [start, end) UTC spans from two TimeValues and answers
overlap / containment questions for scheduling code.

Endpoint rules for make_span:
- zoned DATE-TIMEs are converted to UTC first
- floating values and DATE values are read literally as UTC
- a null dtend after a DATE-TIME start gives an empty span (the event
  takes no time); after a DATE start the span covers that whole day
- a dtend before dtstart is kept as a reversed span, which overlaps and
  contains nothing
"""

import logging

from caltime.config import DEFAULT_SPAN_CONFIG, SpanConfig
from caltime.core.domain.time_span import TimeSpan
from caltime.core.domain.time_value import TimeValue
from caltime.core.domain.zone import UTC
from caltime.engine.epoch_bridge import as_epoch_in_zone

logger = logging.getLogger(__name__)


def make_span(
    dtstart: TimeValue,
    dtend: TimeValue,
    is_busy: bool = True,
    config: SpanConfig = DEFAULT_SPAN_CONFIG,
) -> TimeSpan:
    """
    Span between two values.

    Args:
        dtstart: Start (inclusive)
        dtend: End (exclusive); the null sentinel means "no end"
        is_busy: Busy (True) or free (False) time
        config: Span settings

    Returns:
        TimeSpan in UTC epoch seconds
    """
    start = as_epoch_in_zone(dtstart, UTC)

    if dtend.is_null():
        if dtstart.is_date:
            return TimeSpan(start=start, end=start + config.whole_day_seconds, is_busy=is_busy)
        return TimeSpan(start=start, end=start, is_busy=is_busy)

    end = as_epoch_in_zone(dtend, UTC)
    if end < start:
        logger.warning("Span end %s is before start %s", dtend, dtstart)
    return TimeSpan(start=start, end=end, is_busy=is_busy)


def overlaps(s1: TimeSpan, s2: TimeSpan) -> bool:
    """
    True if the spans share at least one second.

    Touching spans ([10, 20) and [20, 30)) do not overlap; a reversed span
    overlaps nothing.
    """
    if s1.is_reversed or s2.is_reversed:
        return False
    return s1.start < s2.end and s2.start < s1.end


def contains(inner: TimeSpan, outer: TimeSpan) -> bool:
    """True if `inner` lies completely within `outer` (never for reversed spans)."""
    if inner.is_reversed or outer.is_reversed:
        return False
    return outer.start <= inner.start and inner.end <= outer.end
