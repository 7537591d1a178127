"""Tests for simple week-of-year numbering."""

from datetime import date, datetime, timedelta, timezone

import pytest

from weekseason.weeks import to_utc_datetime, week_number


class TestWeekNumber:
    @pytest.mark.parametrize("day", range(1, 8))
    def test_first_seven_days_are_week_one(self, day):
        assert week_number(date(2023, 1, day)) == 1

    def test_day_eight_starts_week_two(self):
        assert week_number(date(2023, 1, 8)) == 2

    def test_common_year_last_day_is_week_53(self):
        # day index 364 -> ceil(365 / 7) = 53
        assert week_number(date(2023, 12, 31)) == 53
        assert week_number(date(2023, 12, 30)) == 52

    def test_leap_year_trailing_days(self):
        assert week_number(date(2024, 12, 30)) == 53
        assert week_number(date(2024, 12, 31)) == 53
        assert week_number(date(2024, 12, 29)) == 52

    def test_not_iso(self):
        # ISO puts 2021-01-01 (a Friday) in week 53 of 2020
        assert week_number(date(2021, 1, 1)) == 1

    def test_non_decreasing_within_year_and_resets(self):
        day = date(2024, 1, 1)
        prev = week_number(day)
        while day.year == 2024:
            current = week_number(day)
            assert 1 <= current <= 53
            assert current >= prev
            prev = current
            day += timedelta(days=1)
        assert week_number(day) == 1

    def test_uses_utc_for_aware_datetimes(self):
        # 2024-01-07 23:30 in UTC-5 is 2024-01-08 04:30 UTC -> week 2
        est = timezone(timedelta(hours=-5))
        assert week_number(datetime(2024, 1, 7, 23, 30, tzinfo=est)) == 2

    def test_naive_datetime_treated_as_utc(self):
        assert week_number(datetime(2024, 1, 7, 23, 59)) == 1

    def test_epoch_seconds(self):
        ts = int(datetime(2024, 3, 4, tzinfo=timezone.utc).timestamp())
        # March 4 2024 is day index 63 -> week 10
        assert week_number(ts) == 10

    def test_iso_string(self):
        assert week_number("2024-01-07") == 1
        assert week_number("2024-01-08T00:00:00Z") == 2


class TestToUtcDatetime:
    def test_epoch(self):
        dt = to_utc_datetime(0)
        assert dt == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_date(self):
        dt = to_utc_datetime(date(2024, 5, 1))
        assert dt.tzinfo is not None
        assert dt.hour == 0

    def test_none_rejected(self):
        with pytest.raises(ValueError):
            to_utc_datetime(None)

    def test_garbage_string_rejected(self):
        with pytest.raises(ValueError):
            to_utc_datetime("next tuesday")

    def test_nan_rejected(self):
        with pytest.raises(ValueError):
            to_utc_datetime(float("nan"))

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            to_utc_datetime(True)
