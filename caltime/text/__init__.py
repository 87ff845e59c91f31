"""
Text form of calendar times (scanner and formatter).
"""

from caltime.text.ical_format import ScannedFields, as_ical_string, scan_ical_string

__all__ = [
    "ScannedFields",
    "as_ical_string",
    "scan_ical_string",
]
