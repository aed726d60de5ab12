"""Behaviour shared by Week, Month and Year.

Every period wraps an anchor date. Ordering, containment and the humanized
distance are all expressed against that anchor, so the mixin only needs the
including class to provide ``date`` (and ``days()`` for containment).
"""

from datetime import date, datetime, timezone
from typing import Optional, Protocol

from calendarperiods.humanize.humanizeapi import distance_in_words, to_timestamp


class HasAnchorDate(Protocol):
    """Anything carrying an anchor ``date`` (periods and Day)."""

    @property
    def date(self) -> date: ...


def _anchor_of(other) -> Optional[date]:
    anchor = getattr(other, "date", None)
    return anchor if isinstance(anchor, date) else None


class PeriodMixin:
    """
    Comparison, containment and distance for anchored periods.

    Periods order by their anchor date, regardless of period type:

        >>> Week(date(2024, 3, 14)) < Month(date(2024, 3, 20))
        True
    """

    __slots__ = ()

    # ---- Containment ----

    def includes(self, value: date) -> bool:
        """Is the given date one of this period's days?"""
        if not isinstance(value, date) or isinstance(value, datetime):
            raise TypeError(f"need a datetime.date as input, got {type(value).__name__}")
        days = getattr(self, "days", None)
        if not callable(days):
            raise TypeError(f"{type(self).__name__} has no day sequence to search")
        return value in days()

    def __contains__(self, value) -> bool:
        return self.includes(value)

    # ---- Ordering ----

    def compare(self, other: HasAnchorDate) -> int:
        """Three-way comparison by anchor date: -1, 0 or 1."""
        anchor = _anchor_of(other)
        if anchor is None:
            raise TypeError(f"{type(other).__name__} does not have an anchor 'date'")
        return (self.date > anchor) - (self.date < anchor)

    def __eq__(self, other):
        anchor = _anchor_of(other)
        if anchor is None:
            return NotImplemented
        return self.date == anchor

    def __hash__(self):
        return hash(self.date)

    def __lt__(self, other):
        anchor = _anchor_of(other)
        if anchor is None:
            return NotImplemented
        return self.date < anchor

    def __le__(self, other):
        anchor = _anchor_of(other)
        if anchor is None:
            return NotImplemented
        return self.date <= anchor

    def __gt__(self, other):
        anchor = _anchor_of(other)
        if anchor is None:
            return NotImplemented
        return self.date > anchor

    def __ge__(self, other):
        anchor = _anchor_of(other)
        if anchor is None:
            return NotImplemented
        return self.date >= anchor

    # ---- Humanized distance ----

    def distance_in_words(self, other) -> str:
        """
        Humanized distance from this period's anchor to ``other``.

        ``other`` may be a period, a Day, a date, a datetime or epoch seconds.

        Example:
            >>> Year(date(1977, 10, 18)).distance_in_words(date(2007, 8, 23))
            '29 years,10 months,4 days ago'
        """
        return distance_in_words(to_timestamp(self.date), to_timestamp(other))

    def distance_to_now_in_words(self, *, asof_ts: Optional[datetime] = None) -> str:
        """Humanized distance to ``asof_ts`` (default: now, UTC)."""
        if asof_ts is None:
            asof_ts = datetime.now(timezone.utc)
        return self.distance_in_words(asof_ts)


__all__ = [
    "HasAnchorDate",
    "PeriodMixin",
]
