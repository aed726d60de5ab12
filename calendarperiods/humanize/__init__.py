"""Humanized relative durations.

Public API:
    distance_in_words(from_ts, to_ts) -> str
        Describe the distance between two epoch timestamps

    to_timestamp(value) -> float
        Convert a period, date, datetime or number to epoch seconds
"""

from calendarperiods.humanize.humanizeapi import (
    distance_in_words,
    to_timestamp,
)

__all__ = [
    "distance_in_words",
    "to_timestamp",
]
