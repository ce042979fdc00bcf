"""
tests/test_ranges.py

Covers:
  - Inclusive containment with open and closed bounds
  - Day-granular comparison of datetimes
  - DateRange validation
  - Course range aggregation and parsing
"""

from datetime import date, datetime, timedelta

import pytest

from timetable import DateRange, contains, course_range, parse_range


class TestContains:

    def test_inclusive_bounds(self, winter_term):
        assert contains(winter_term, date(2025, 1, 6))
        assert contains(winter_term, date(2025, 3, 31))

    def test_outside_bounds(self, winter_term):
        assert not contains(winter_term, date(2025, 1, 5))
        assert not contains(winter_term, date(2025, 4, 1))

    def test_time_of_day_is_ignored(self, winter_term):
        assert contains(winter_term, datetime(2025, 3, 31, 23, 59))
        assert contains(winter_term, datetime(2025, 1, 6, 0, 0))

    def test_unbounded(self):
        assert contains(DateRange(), date(1900, 1, 1))
        assert contains(DateRange(), date(2999, 12, 31))

    def test_open_start(self):
        r = DateRange(end=date(2025, 3, 31))
        assert contains(r, date(2000, 1, 1))
        assert not contains(r, date(2025, 4, 1))

    def test_open_end(self):
        r = DateRange(start=date(2025, 1, 6))
        assert contains(r, date(2099, 1, 1))
        assert not contains(r, date(2025, 1, 5))

    def test_monotonic_towards_bound(self, winter_term):
        day = date(2025, 2, 10)
        assert contains(winter_term, day)
        while day <= winter_term.end:
            assert contains(winter_term, day)
            day += timedelta(days=1)


class TestDateRange:

    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError):
            DateRange(start=date(2025, 3, 1), end=date(2025, 2, 1))

    def test_single_day_range(self):
        r = DateRange(start=date(2025, 3, 1), end=date(2025, 3, 1))
        assert contains(r, date(2025, 3, 1))

    def test_datetimes_normalised(self):
        r = DateRange(start=datetime(2025, 1, 6, 9, 0), end=datetime(2025, 1, 6, 8, 0))
        assert r.start == date(2025, 1, 6)
        assert r.end == date(2025, 1, 6)

    def test_is_unbounded(self, winter_term):
        assert DateRange().is_unbounded
        assert not winter_term.is_unbounded


class TestCourseRange:

    def test_earliest_start_latest_end(self):
        r = course_range([
            DateRange(date(2025, 2, 1), date(2025, 4, 30)),
            DateRange(date(2025, 1, 6), date(2025, 3, 31)),
        ])
        assert r == DateRange(date(2025, 1, 6), date(2025, 4, 30))

    def test_classes_without_dates_ignored(self):
        r = course_range([DateRange(), DateRange(date(2025, 1, 6), date(2025, 3, 31))])
        assert r == DateRange(date(2025, 1, 6), date(2025, 3, 31))

    def test_no_classes_is_unbounded(self):
        assert course_range([]).is_unbounded


class TestParseRange:

    def test_iso_dates(self):
        assert parse_range("2025-01-06", "2025-03-31") == DateRange(date(2025, 1, 6), date(2025, 3, 31))

    def test_timestamps(self):
        r = parse_range("2025-01-06T00:00:00Z", "2025-03-31T17:00:00.000Z")
        assert r == DateRange(date(2025, 1, 6), date(2025, 3, 31))

    @pytest.mark.parametrize("start,end", [
        ("", "2025-03-31"),
        ("2025-01-06", None),
        ("TBA", "2025-03-31"),
        ("2025-04-01", "2025-03-31"),
    ])
    def test_unusable_input(self, start, end):
        assert parse_range(start, end) is None
