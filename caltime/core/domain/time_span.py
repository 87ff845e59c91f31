"""
TimeSpan: half-open UTC interval for free/busy queries

Immutable model; built by the span calculator from two TimeValues.
"""

from pydantic import BaseModel, Field


class TimeSpan(BaseModel):
    """
    Interval [start, end) in UTC epoch seconds.

    start == end is an empty span (an instantaneous event). Endpoints from
    malformed calendar data may be reversed (start > end); such a span is
    kept as given and covers no time.
    """

    start: int = Field(..., description="Start, UTC epoch seconds (inclusive)")
    end: int = Field(..., description="End, UTC epoch seconds (exclusive)")
    is_busy: bool = Field(True, description="Busy (True) or free (False) time")

    model_config = {"frozen": True}  # Immutable

    @property
    def is_reversed(self) -> bool:
        return self.start > self.end

    @property
    def duration_seconds(self) -> int:
        """Covered seconds, 0 for a reversed span."""
        return max(self.end - self.start, 0)
