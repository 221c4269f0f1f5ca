"""Tests for the day-granularity date helpers."""

from datetime import date, datetime, timedelta, timezone

from rental_calendar.services.date_range import (
    days_in_month,
    in_month,
    inclusive_day_count,
    iter_days,
    month_bounds,
    overlaps_day,
)


class TestOverlapsDay:
    """overlaps_day is inclusive on both ends and ignores time of day."""

    def test_inside_span(self):
        assert overlaps_day(date(2024, 3, 5), date(2024, 3, 1), date(2024, 3, 10))

    def test_bounds_are_inclusive(self):
        start, end = date(2024, 3, 1), date(2024, 3, 10)
        assert overlaps_day(start, start, end)
        assert overlaps_day(end, start, end)

    def test_outside_span(self):
        start, end = date(2024, 3, 1), date(2024, 3, 10)
        assert not overlaps_day(date(2024, 2, 29), start, end)
        assert not overlaps_day(date(2024, 3, 11), start, end)

    def test_time_of_day_on_end_does_not_exclude_last_day(self):
        """An end stored at midnight still covers a day checked later that day."""
        checked = datetime(2024, 3, 10, 18, 30)
        assert overlaps_day(checked, datetime(2024, 3, 1, 9, 0), datetime(2024, 3, 10, 0, 0))

    def test_timezone_offset_does_not_shift_day(self):
        late_utc = datetime(2024, 3, 10, 23, 30, tzinfo=timezone.utc)
        assert overlaps_day(date(2024, 3, 10), late_utc, late_utc)
        assert not overlaps_day(date(2024, 3, 11), late_utc, late_utc)


class TestInclusiveDayCount:
    """inclusive_day_count counts both ends and is never below one."""

    def test_same_day_is_one(self):
        assert inclusive_day_count(date(2024, 3, 1), date(2024, 3, 1)) == 1

    def test_three_day_span(self):
        assert inclusive_day_count(date(2024, 3, 1), date(2024, 3, 3)) == 3

    def test_same_day_with_different_times(self):
        assert inclusive_day_count(datetime(2024, 3, 1, 8), datetime(2024, 3, 1, 22)) == 1

    def test_across_month_boundary(self):
        assert inclusive_day_count(date(2024, 1, 31), date(2024, 2, 4)) == 5

    def test_inverted_span_is_at_least_one(self):
        assert inclusive_day_count(date(2024, 3, 5), date(2024, 3, 1)) == 1


class TestMonthHelpers:
    def test_days_in_february_leap_year(self):
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28

    def test_month_bounds(self):
        assert month_bounds(2024, 12) == (date(2024, 12, 1), date(2024, 12, 31))

    def test_iter_days_inclusive(self):
        days = list(iter_days(date(2024, 2, 27), date(2024, 3, 1)))
        assert days == [date(2024, 2, 27) + timedelta(days=i) for i in range(4)]

    def test_iter_days_empty_when_inverted(self):
        assert list(iter_days(date(2024, 3, 2), date(2024, 3, 1))) == []

    def test_in_month(self):
        assert in_month(date(2024, 3, 31), 2024, 3)
        assert not in_month(date(2024, 4, 1), 2024, 3)
        assert not in_month(date(2023, 3, 1), 2024, 3)
