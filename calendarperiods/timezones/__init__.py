"""GMT offset labels."""

from calendarperiods.timezones.gmtzone import GMTZone, gmt_offsets

__all__ = [
    "GMTZone",
    "gmt_offsets",
]
