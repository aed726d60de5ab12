"""Shared test fixtures for calendarperiods tests."""

from datetime import date, datetime, timedelta, timezone

import pytest


@pytest.fixture
def sample_dates():
    """Dates spread over several years, hitting month/year edges and Feb 29.

    Returns a list of datetime.date values.
    """
    start = date(2019, 12, 25)
    dates = [start + timedelta(days=13 * i) for i in range(200)]
    dates.extend([
        date(2020, 2, 29),
        date(2024, 2, 29),
        date(2023, 12, 31),
        date(2024, 1, 1),
        date(2021, 1, 1),
    ])
    return dates


@pytest.fixture
def utc_asof():
    """Fixed reference timestamp for wall-clock sensitive calls."""
    return datetime(2024, 3, 21, 0, 0, 0, tzinfo=timezone.utc)
