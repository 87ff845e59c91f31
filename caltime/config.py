"""
Configuration for caltime

Plain frozen dataclasses with defaults. Nothing is read from the
environment or from files; callers pass a config where they need a
non-default one.
"""

from dataclasses import dataclass

from caltime.core.math.proleptic import SECONDS_PER_DAY


@dataclass(frozen=True)
class SpanConfig:
    """Free/busy span settings.

    whole_day_seconds - length of the span built from a DATE with no end
    """

    whole_day_seconds: int = SECONDS_PER_DAY

    def __post_init__(self):
        if self.whole_day_seconds <= 0:
            raise ValueError(f"whole_day_seconds must be positive, got {self.whole_day_seconds}")


DEFAULT_SPAN_CONFIG = SpanConfig()
