"""Tests for the convenience constructors, display formatting and GMT labels.

Run with: pytest tests/test_api.py -v
"""

from datetime import date, datetime

import pytest

from calendarperiods import (
    Day,
    GMTZone,
    Month,
    Week,
    Year,
    day_of,
    format_period_display,
    gmt_offsets,
    month_of,
    week_of,
    year_of,
)


# ============================================================================
# Convenience Constructors
# ============================================================================

class TestPeriodOf:
    """Test *_of helpers with strings, dates and datetimes"""

    def test_day_of_string(self):
        assert day_of("2024-03-14") == Day(date(2024, 3, 14))

    def test_week_of_string(self):
        week = week_of("2024-03-14")
        assert week.first_day == date(2024, 3, 11)
        assert week.last_day == date(2024, 3, 17)

    def test_week_of_datetime_string(self):
        assert week_of("2024-03-14T09:30:00").date == date(2024, 3, 14)

    def test_month_of_string(self):
        assert month_of("2024-02-10").last_day == date(2024, 2, 29)

    def test_year_of_string(self):
        assert year_of("1977-10-18").year == 1977

    def test_of_date_and_datetime(self):
        assert week_of(date(2024, 3, 14)).num_week == 11
        assert month_of(datetime(2023, 2, 1, 6)).num_days == 28

    def test_of_none_is_today(self):
        assert year_of().year == date.today().year

    def test_unparseable_string(self):
        with pytest.raises(ValueError):
            week_of("next tuesday-ish")

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            month_of(20240210)


# ============================================================================
# Display
# ============================================================================

class TestFormatPeriodDisplay:
    """Test human-readable display strings"""

    def test_week(self):
        assert format_period_display(Week(date(2024, 3, 14))) == "W11 2024 (Mar 11 - Mar 17, 2024)"

    def test_week_iso_year(self):
        assert format_period_display(Week(date(2024, 12, 31))) == "W01 2025 (Dec 30 - Jan 5, 2025)"

    def test_month(self):
        assert format_period_display(Month(date(2024, 2, 10))) == "February 2024"

    def test_year(self):
        assert format_period_display(Year(date(2024, 6, 1))) == "2024"

    def test_day(self):
        assert format_period_display(Day(date(2024, 3, 14))) == "Thursday, Mar 14, 2024"

    def test_rejects_other(self):
        with pytest.raises(TypeError):
            format_period_display(date(2024, 3, 14))


# ============================================================================
# GMT Offsets
# ============================================================================

class TestGMTOffsets:
    """Test whole-hour offset labels"""

    def test_count_and_ends(self):
        offsets = gmt_offsets()
        assert len(offsets) == 26
        assert offsets[0] == "GMT -12:00"
        assert offsets[-1] == "GMT +13:00"

    def test_padding_and_sign(self):
        offsets = gmt_offsets()
        assert offsets[3] == "GMT -09:00"
        assert offsets[12] == "GMT +00:00"
        assert offsets[13] == "GMT +01:00"
        assert offsets[22] == "GMT +10:00"

    def test_gmtzone_alias(self):
        assert GMTZone.offsets() == gmt_offsets()
