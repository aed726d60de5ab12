"""Humanized Durations
--------------------

Turns a pair of timestamps into a phrase like "29 years,10 months,5 days ago".

The humanizer works on epoch seconds only. Anything else (periods, dates,
datetimes) goes through to_timestamp() first.

Examples:
    >>> distance_in_words(0, 86399)
    'less than a day ago'

    >>> distance_in_words(0, 31556926 + 3 * 604800)
    '1 year,3 weeks ago'

    >>> distance_in_words(31556926 + 3 * 604800, 0)
    '1 year,3 weeks in future'
"""

from datetime import date, datetime, timezone
from typing import Union

from calendarperiods.humanize.humanizewords import (
    DAY,
    UNITS,
    SAME_DAY,
    POSTFIX_PAST,
    POSTFIX_FUTURE,
    pluralize,
)

Number = Union[int, float]


def to_timestamp(value) -> float:
    """
    Convert a period, date, datetime or epoch number to epoch seconds.

    Dates are taken at midnight UTC. Naive datetimes are read as UTC so that
    a date and a datetime on the same calendar day stay comparable.

    Args:
        value: Day/Week/Month/Year (anything with a ``date`` attribute holding
            a date), datetime.date, datetime.datetime, or int/float seconds

    Returns:
        Seconds since the epoch

    Raises:
        TypeError: for any other kind of value
    """
    anchor = getattr(value, "date", None)
    if isinstance(anchor, date):
        value = anchor

    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc).timestamp()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)

    raise TypeError(
        "value needs to be a Day/Week/Month/Year, date, datetime or epoch seconds, "
        f"got {type(value).__name__}"
    )


def distance_in_words(from_ts: Number, to_ts: Number) -> str:
    """
    Describe the signed distance between two timestamps.

    The postfix follows the raw sign ("ago" when to_ts is later, otherwise
    "in future"). Magnitude is decomposed greedily into years, months, weeks
    and days; anything under a day is reported as "less than a day".

    Args:
        from_ts: Start, epoch seconds
        to_ts: End, epoch seconds

    Returns:
        Phrase such as "1 year,1 month,4 days ago"
    """
    diff = to_ts - from_ts
    postfix = POSTFIX_PAST if to_ts > from_ts else POSTFIX_FUTURE

    left = abs(diff)
    if left < DAY:
        return f"{SAME_DAY} {postfix}"

    parts = []
    for unit, seconds in UNITS:
        if left / seconds >= 1:
            count = int(left / seconds)
            left = left - seconds * count
            parts.append(pluralize(count, unit))

    return ",".join(parts) + " " + postfix


__all__ = [
    "to_timestamp",
    "distance_in_words",
]
