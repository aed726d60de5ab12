"""Period module: Day, Week, Month and Year over ``datetime.date``.

Public API:
    Day, Week, Month, Year
        Period value objects with derived boundaries

    Week.create / Month.create / Year.create
        Factories driven by YearWeekQuery / YearMonthQuery / YearQuery

    day_of / week_of / month_of / year_of
        Build a period from a date, datetime or ISO string

    format_period_display(period) -> str
        Format a period for human-readable display

Examples:
    >>> from calendarperiods.periods import Week, Month, Year
    >>> from datetime import date
    >>>
    >>> # Week boundaries (Monday start)
    >>> week = Week(date(2024, 3, 14))
    >>> week.first_day, week.last_day
    (datetime.date(2024, 3, 11), datetime.date(2024, 3, 17))
    >>>
    >>> # Navigate
    >>> week.next().first_day
    datetime.date(2024, 3, 18)
    >>>
    >>> # Leap years
    >>> Month(date(2024, 2, 10)).last_day
    datetime.date(2024, 2, 29)
    >>>
    >>> # Humanized distance
    >>> Year(date(1977, 10, 18)).distance_in_words(date(2007, 8, 23))
    '29 years,10 months,4 days ago'
"""

from calendarperiods.periods.periodtypes import (
    Day,
    Week,
    Month,
    Year,
)
from calendarperiods.periods.periodcommon import (
    HasAnchorDate,
    PeriodMixin,
)
from calendarperiods.periods.periodoptions import (
    YearWeekQuery,
    YearMonthQuery,
    YearQuery,
)
from calendarperiods.periods.periodapi import (
    day_of,
    week_of,
    month_of,
    year_of,
    format_period_display,
)

__all__ = [
    "Day",
    "Week",
    "Month",
    "Year",
    "HasAnchorDate",
    "PeriodMixin",
    "YearWeekQuery",
    "YearMonthQuery",
    "YearQuery",
    "day_of",
    "week_of",
    "month_of",
    "year_of",
    "format_period_display",
]
