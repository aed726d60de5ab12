"""Calendar Periods - Year/Month/Week/Day over datetime.date

Public API for calendar-period navigation and humanized relative durations.

Usage:
    from datetime import date
    from calendarperiods import Week, Month, Year, distance_in_words

    # Week boundaries (Monday to Sunday)
    week = Week(date(2024, 3, 14))      # first_day=2024-03-11, last_day=2024-03-17

    # Month boundaries, leap years included
    feb = Month(date(2024, 2, 10))      # num_days=29

    # Year with ISO-style week count
    Year(date(2020, 6, 1)).num_weeks    # 53

    # Factories
    Week.create(year=2024, week=11)
    Month.create(year=2024, month=2)
    Year.create(year=1977)

    # Humanized distance
    Year(date(1977, 10, 18)).distance_to_now_in_words()   # '... years,... ago'
"""

__version__ = "0.1.0"

# ============================================================================
# Period Types
# ============================================================================

from .periods.periodtypes import (
    Day,     # Single calendar day
    Week,    # Monday-Sunday week
    Month,   # Calendar month
    Year,    # Calendar year
)

from .periods.periodcommon import (
    HasAnchorDate,  # Protocol: anything with an anchor date
    PeriodMixin,    # Ordering, containment, humanized distance
)

# ============================================================================
# Factory Options
# ============================================================================

from .periods.periodoptions import (
    YearWeekQuery,   # Week.create options
    YearMonthQuery,  # Month.create options
    YearQuery,       # Year.create options
)

# ============================================================================
# Convenience API
# ============================================================================

from .periods.periodapi import (
    day_of,                  # Day for a date/datetime/ISO string
    week_of,                 # Week for a date/datetime/ISO string
    month_of,                # Month for a date/datetime/ISO string
    year_of,                 # Year for a date/datetime/ISO string
    format_period_display,   # Format period for display
)

# ============================================================================
# Humanized Durations
# ============================================================================

from .humanize.humanizeapi import (
    distance_in_words,   # Phrase for the distance between two timestamps
    to_timestamp,        # Period/date/datetime/number -> epoch seconds
)

# ============================================================================
# Timezone Labels
# ============================================================================

from .timezones.gmtzone import (
    GMTZone,       # GMTZone.offsets()
    gmt_offsets,   # ['GMT -12:00', ..., 'GMT +13:00']
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # Period Types
    # ========================================================================
    "Day",
    "Week",
    "Month",
    "Year",
    "HasAnchorDate",
    "PeriodMixin",

    # ========================================================================
    # Factory Options
    # ========================================================================
    "YearWeekQuery",
    "YearMonthQuery",
    "YearQuery",

    # ========================================================================
    # Convenience API
    # ========================================================================
    "day_of",
    "week_of",
    "month_of",
    "year_of",
    "format_period_display",

    # ========================================================================
    # Humanized Durations
    # ========================================================================
    "distance_in_words",
    "to_timestamp",

    # ========================================================================
    # Timezone Labels
    # ========================================================================
    "GMTZone",
    "gmt_offsets",
]
