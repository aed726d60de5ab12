"""Calendar Periods
----------------

Day, Week, Month and Year value objects over ``datetime.date``.

Every period is built from one anchor date and derives its boundaries once,
at construction. Nothing is mutated afterwards; next()/previous() always
return a new instance.

Key Design Principles:
  1. Weeks run Monday to Sunday (ISO 8601, isoweek library)
  2. A Week keeps the Month of its anchor date as a derived view
  3. Year.weeks() deliberately overlaps the year boundaries

Examples:
    >>> week = Week(date(2024, 3, 14))
    >>> week.first_day, week.last_day
    (datetime.date(2024, 3, 11), datetime.date(2024, 3, 17))

    >>> Month(date(2024, 2, 10)).num_days
    29

    >>> Year(date(2020, 6, 1)).num_weeks
    53
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta
from typing import Any, Callable, List, Optional, Union

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

try:
    import isoweek
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from calendarperiods.periods.periodcommon import PeriodMixin
from calendarperiods.periods.periodoptions import (
    YearMonthQuery,
    YearQuery,
    YearWeekQuery,
    resolve_query,
)
from calendarperiods.shared_utils import ensure_date, ensure_int

logger = logging.getLogger(__name__)

# Days per month; February is settled by the leap-year check
_DAYS_IN_MONTH = {
    1: 31, 2: 28, 3: 31, 4: 30, 5: 31, 6: 30,
    7: 31, 8: 31, 9: 30, 10: 31, 11: 30, 12: 31,
}

_ONE_DAY = timedelta(days=1)


def _date_range(first: date, last: date) -> List[date]:
    return [first + timedelta(days=i) for i in range((last - first).days + 1)]


def _feed(items: list, consumer: Optional[Callable[[Any], Any]]) -> list:
    if consumer is not None:
        for item in items:
            consumer(item)
    return items


# ---- Day ----

class Day:
    """A single calendar day. Wraps one date; defaults to today."""

    __slots__ = ("_date",)

    def __init__(self, date: Optional[date] = None):
        self._date = ensure_date(date)

    @property
    def date(self) -> date:
        return self._date

    def __eq__(self, other):
        if not isinstance(other, Day):
            return NotImplemented
        return self._date == other._date

    def __hash__(self):
        return hash(self._date)

    def __repr__(self):
        return f"Day({self._date.isoformat()})"


# ---- Week ----

class Week(PeriodMixin):
    """A week beginning on Monday and ending on Sunday."""

    __slots__ = ("_date", "_first_day", "_last_day", "_num_week", "_month")

    def __init__(self, date: Optional[date] = None):
        self._date = ensure_date(date)
        iso = isoweek.Week.withdate(self._date)
        self._num_week = iso.week
        self._first_day = iso.monday()
        self._last_day = iso.sunday()
        self._month = Month(self._date)

    @classmethod
    def create(cls, query: Union[YearWeekQuery, dict, None] = None, **options) -> Week:
        """
        Create a Week from a year and/or week number.

        Examples:
            >>> Week.create(year=2024)            # week containing Jan 1, 2024
            >>> Week.create(year=2024, week=11)   # via Year.get_week(11)
            >>> Week.create({"week": 3})          # week 3 of the current year
        """
        q = resolve_query(YearWeekQuery, query, options)
        year_date = date(q.year, 1, 1) if q.year is not None else date.today()
        if q.week is None:
            return cls(year_date)
        return Year(year_date).get_week(q.week)

    @property
    def date(self) -> date:
        """The anchor date."""
        return self._date

    @property
    def first_day(self) -> date:
        """Monday of this week."""
        return self._first_day

    @property
    def last_day(self) -> date:
        """Sunday of this week."""
        return self._last_day

    @property
    def num_week(self) -> int:
        """ISO week number of the anchor date."""
        return self._num_week

    @property
    def month(self) -> Month:
        """Month containing the anchor date."""
        return self._month

    def next(self) -> Week:
        return Week(self._last_day + _ONE_DAY)

    succ = next

    def previous(self) -> Week:
        return Week(self._first_day - _ONE_DAY)

    def days(self, consumer: Optional[Callable[[date], Any]] = None) -> List[date]:
        """The seven dates Monday..Sunday, optionally fed to ``consumer``."""
        return _feed(_date_range(self._first_day, self._last_day), consumer)

    def __iter__(self):
        return iter(self.days())

    def __repr__(self):
        return (
            f"Week({self._date.isoformat()}, num_week={self._num_week}, "
            f"{self._first_day.isoformat()}..{self._last_day.isoformat()})"
        )


# ---- Month ----

class Month(PeriodMixin):
    """A calendar month."""

    __slots__ = ("_date", "_month", "_num_days", "_first_day", "_last_day")

    def __init__(self, val: Union[date, int, None] = None):
        if val is None or isinstance(val, date):
            anchor = ensure_date(val)
        elif isinstance(val, int) and not isinstance(val, bool):
            if not 1 <= val <= 12:
                raise ValueError(f"month must be between 1 and 12, got {val}")
            anchor = date(date.today().year, val, 1)
        else:
            raise TypeError(f"need a datetime.date or month number, got {type(val).__name__}")

        self._date = anchor
        self._month = anchor.month
        self._first_day = anchor.replace(day=1)
        self._num_days = _DAYS_IN_MONTH[self._month]
        # leap check follows the anchor date's own year
        if self._month == 2 and calendar.isleap(anchor.year):
            self._num_days = 29
        self._last_day = self._first_day + timedelta(days=self._num_days - 1)

    @classmethod
    def create(cls, query: Union[YearMonthQuery, dict, None] = None, **options) -> Month:
        """
        Create a Month from a year and/or month number.

        Examples:
            >>> Month.create(year=2024, month=2)
            >>> Month.create(year=2024)    # January 2024
            >>> Month.create()             # January of the current year
        """
        q = resolve_query(YearMonthQuery, query, options)
        year = q.year if q.year is not None else date.today().year
        return cls(date(year, q.month or 1, 1))

    @property
    def date(self) -> date:
        """The anchor date."""
        return self._date

    @property
    def month(self) -> int:
        return self._month

    @property
    def num_days(self) -> int:
        return self._num_days

    @property
    def first_day(self) -> date:
        return self._first_day

    @property
    def last_day(self) -> date:
        return self._last_day

    def next(self) -> Month:
        return Month(self._last_day + _ONE_DAY)

    succ = next

    def previous(self) -> Month:
        return Month(self._first_day - _ONE_DAY)

    def days(self, consumer: Optional[Callable[[date], Any]] = None) -> List[date]:
        """Every date of the month, optionally fed to ``consumer``."""
        return _feed(_date_range(self._first_day, self._last_day), consumer)

    def __iter__(self):
        return iter(self.days())

    def __repr__(self):
        return f"Month({self._date.isoformat()}, {self._first_day.isoformat()}..{self._last_day.isoformat()})"


# ---- Year ----

class Year(PeriodMixin):
    """A calendar year."""

    __slots__ = ("_date", "_year", "_first_day", "_last_day", "_num_weeks")

    def __init__(self, date: Optional[date] = None):
        self._date = ensure_date(date)
        self._year = self._date.year
        self._first_day = self._date.replace(month=1, day=1)
        self._last_day = self._date.replace(month=12, day=31)
        # 53 weeks when the year ends on a Thursday
        self._num_weeks = 53 if self._last_day.isoweekday() == 4 else 52

    @classmethod
    def create(cls, query: Union[YearQuery, dict, None] = None, **options) -> Year:
        """
        Create a Year; ``year`` is required.

        Examples:
            >>> Year.create(year=1977)
            >>> Year.create({"year": 1977})
        """
        q = resolve_query(YearQuery, query, options)
        return cls(date(q.year, 1, 1))

    @property
    def date(self) -> date:
        """The anchor date."""
        return self._date

    @property
    def year(self) -> int:
        return self._year

    @property
    def first_day(self) -> date:
        return self._first_day

    @property
    def last_day(self) -> date:
        return self._last_day

    @property
    def num_weeks(self) -> int:
        return self._num_weeks

    def months(self, consumer: Optional[Callable[[Month], Any]] = None) -> List[Month]:
        """The twelve months of this year, January first."""
        return _feed([Month(date(self._year, i, 1)) for i in range(1, 13)], consumer)

    def weeks(self, consumer: Optional[Callable[[Week], Any]] = None) -> List[Week]:
        """
        Weeks starting with the one containing Jan 1.

        Holds num_weeks + 1 entries, so the first and last may reach into the
        neighbouring years.
        """
        week = Week(self._first_day)
        result = [week]
        for _ in range(self._num_weeks):
            week = week.next()
            result.append(week)
        return _feed(result, consumer)

    def get_week(self, num: int) -> Week:
        """
        Week number ``num`` of this year.

        Raises:
            TypeError: num is not an integer
            ValueError: num outside 1..num_weeks
        """
        ensure_int(num, name="num")
        if not 1 <= num <= self._num_weeks:
            raise ValueError(f"invalid week number {num} for {self._year} ({self._num_weeks} weeks)")
        weeks = self.weeks()
        return weeks[num - 1] if self._num_weeks > 52 else weeks[num]

    def get_month(self, num: int) -> Month:
        """
        Month number ``num`` (1-12) of this year.

        Raises:
            TypeError: num is not an integer
            ValueError: num outside 1..12
        """
        ensure_int(num, name="num")
        if not 1 <= num <= 12:
            raise ValueError(f"invalid month number {num}")
        return self.months()[num - 1]

    def _shifted(self, years: int) -> Year:
        # relativedelta clamps Feb 29 to Feb 28 in non-leap target years
        target = self._date + relativedelta(years=years)
        if target.day != self._date.day:
            logger.debug(
                f"{self._date.isoformat()} has no counterpart in {target.year}, "
                f"using {target.isoformat()}"
            )
        return Year(target)

    def next(self) -> Year:
        return self._shifted(1)

    succ = next

    def previous(self) -> Year:
        return self._shifted(-1)

    def __repr__(self):
        return f"Year({self._year}, anchor={self._date.isoformat()}, num_weeks={self._num_weeks})"


__all__ = [
    "Day",
    "Week",
    "Month",
    "Year",
]
