"""Tests for shared input helpers."""

from datetime import date, datetime

import pytest

from calendarperiods.shared_utils import coerce_date, ensure_date, ensure_int, parse_date


class TestEnsureDate:
    def test_none_is_today(self):
        assert ensure_date(None) == date.today()

    def test_datetime_reduced(self):
        result = ensure_date(datetime(2024, 3, 14, 10))
        assert result == date(2024, 3, 14)
        assert type(result) is date

    def test_error_names_argument(self):
        with pytest.raises(TypeError, match="anchor"):
            ensure_date("2024-03-14", name="anchor")


class TestEnsureInt:
    def test_int(self):
        assert ensure_int(7, name="num") == 7

    @pytest.mark.parametrize("bad", [True, 7.0, "7", None])
    def test_rejects(self, bad):
        with pytest.raises(TypeError):
            ensure_int(bad, name="num")


class TestParseDate:
    def test_iso_date(self):
        assert parse_date("1977-10-18") == date(1977, 10, 18)

    def test_iso_datetime(self):
        assert parse_date(" 2024-03-14T09:30:00 ") == date(2024, 3, 14)

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_date("2023-02-30")

    def test_non_string(self):
        with pytest.raises(TypeError):
            parse_date(date(2024, 3, 14))

    def test_coerce_date(self):
        assert coerce_date("2024-03-14") == date(2024, 3, 14)
        assert coerce_date(date(2024, 3, 14)) == date(2024, 3, 14)
