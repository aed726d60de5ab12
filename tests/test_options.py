"""Tests for the typed factory options."""

import dataclasses

import pytest

from calendarperiods import YearMonthQuery, YearQuery, YearWeekQuery
from calendarperiods.periods.periodoptions import resolve_query


class TestYearWeekQuery:
    def test_defaults(self):
        q = YearWeekQuery()
        assert q.year is None and q.week is None

    def test_from_options(self):
        assert YearWeekQuery.from_options({"year": 2024, "week": 11}) == YearWeekQuery(2024, 11)

    def test_from_options_none(self):
        assert YearWeekQuery.from_options(None) == YearWeekQuery()

    def test_unknown_keys_ignored(self):
        assert YearWeekQuery.from_options({"week": 3, "tz": "UTC"}) == YearWeekQuery(week=3)

    @pytest.mark.parametrize("week", [0, 54])
    def test_week_range(self, week):
        with pytest.raises(ValueError):
            YearWeekQuery(week=week)

    def test_types(self):
        with pytest.raises(TypeError):
            YearWeekQuery(year="2024")
        with pytest.raises(TypeError):
            YearWeekQuery(week=True)

    def test_frozen(self):
        q = YearWeekQuery(2024, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            q.week = 2


class TestYearMonthQuery:
    def test_valid(self):
        assert YearMonthQuery(year=2024, month=12).month == 12

    @pytest.mark.parametrize("month", [0, 13])
    def test_month_range(self, month):
        with pytest.raises(ValueError):
            YearMonthQuery(month=month)

    def test_non_mapping(self):
        with pytest.raises(TypeError):
            YearMonthQuery.from_options([("year", 2024)])


class TestYearQuery:
    def test_required(self):
        with pytest.raises(ValueError, match="Missing required option: year"):
            YearQuery.from_options({})
        with pytest.raises(ValueError, match="Missing required option: year"):
            YearQuery.from_options({"year": None})

    def test_from_options(self):
        assert YearQuery.from_options({"year": 1977, "week": 2}).year == 1977


class TestResolveQuery:
    def test_instance_passthrough(self):
        q = YearWeekQuery(2024, 5)
        assert resolve_query(YearWeekQuery, q, {}) is q

    def test_instance_and_keywords_conflict(self):
        with pytest.raises(TypeError):
            resolve_query(YearWeekQuery, YearWeekQuery(2024, 5), {"week": 6})

    def test_keywords_override_mapping(self):
        q = resolve_query(YearMonthQuery, {"year": 2020, "month": 1}, {"month": 7})
        assert q == YearMonthQuery(2020, 7)
