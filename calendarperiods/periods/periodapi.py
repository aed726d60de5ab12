"""Period convenience API.

Shortcuts that build periods from dates, datetimes or ISO date strings, and
display formatting for any period.
"""

from datetime import date, datetime
from typing import Union

from calendarperiods.periods.periodtypes import Day, Month, Week, Year
from calendarperiods.shared_utils import coerce_date

DateLike = Union[date, datetime, str, None]


def day_of(value: DateLike = None) -> Day:
    """
    Day for a date-ish value (None -> today).

    Examples:
        >>> day_of("2024-03-14")
        Day(2024-03-14)
    """
    return Day(coerce_date(value))


def week_of(value: DateLike = None) -> Week:
    """
    Week (Monday-Sunday) containing a date-ish value.

    Examples:
        >>> week_of("2024-03-14").first_day
        datetime.date(2024, 3, 11)
    """
    return Week(coerce_date(value))


def month_of(value: DateLike = None) -> Month:
    """
    Month containing a date-ish value.

    Examples:
        >>> month_of("2024-02-10").last_day
        datetime.date(2024, 2, 29)
    """
    return Month(coerce_date(value))


def year_of(value: DateLike = None) -> Year:
    """
    Year containing a date-ish value.

    Examples:
        >>> year_of("1977-10-18").year
        1977
    """
    return Year(coerce_date(value))


def format_period_display(period: Union[Day, Week, Month, Year]) -> str:
    """
    Format a period for human-readable display.

    Examples:
        >>> format_period_display(Week(date(2024, 3, 14)))
        'W11 2024 (Mar 11 - Mar 17, 2024)'

        >>> format_period_display(Month(date(2024, 2, 10)))
        'February 2024'

        >>> format_period_display(Year(date(2024, 6, 1)))
        '2024'

        >>> format_period_display(Day(date(2024, 3, 14)))
        'Thursday, Mar 14, 2024'
    """
    if isinstance(period, Year):
        return f"{period.year}"

    elif isinstance(period, Month):
        return f"{period.first_day.strftime('%B %Y')}"

    elif isinstance(period, Week):
        start, end = period.first_day, period.last_day
        # ISO year of the week may differ from the anchor's calendar year
        iso_year = period.date.isocalendar()[0]
        return f"W{period.num_week:02d} {iso_year} ({start.strftime('%b')} {start.day} - {end.strftime('%b')} {end.day}, {end.year})"

    elif isinstance(period, Day):
        d = period.date
        return f"{d.strftime('%A, %b')} {d.day}, {d.year}"

    raise TypeError(f"need a Day, Week, Month or Year, got {type(period).__name__}")


__all__ = [
    "day_of",
    "week_of",
    "month_of",
    "year_of",
    "format_period_display",
]
