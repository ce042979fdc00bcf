"""
tests/test_view.py

Covers the WeekCalendar facade end to end, using the Monday-week scenarios
the calendar page is built around.
"""

from datetime import date

from timetable import DateRange, Weekday, WeekCalendar, WeekWindow
from timetable import config


class TestScenarios:

    def test_first_week_of_course(self, calendar, winter_term, morning, make_session):
        window = calendar.window_containing(date(2025, 1, 8))
        view = calendar.view(window, winter_term, [make_session("s1", Weekday.WEDNESDAY, morning)], date(2025, 1, 9))

        assert window == WeekWindow(start=date(2025, 1, 6), end=date(2025, 1, 12))
        assert [p.occurs_on for p in view.sessions] == [date(2025, 1, 8)]
        assert not view.can_step_backward
        assert view.can_step_forward
        assert view.today_index == 3

    def test_week_before_course(self, calendar, winter_term, morning, make_session):
        window = WeekWindow(start=date(2024, 12, 30), end=date(2025, 1, 5))
        view = calendar.view(window, winter_term, [make_session("s1", Weekday.WEDNESDAY, morning)], date(2025, 1, 9))
        assert view.sessions == ()
        assert view.today_index == -1

    def test_saturday_after_course_end(self, calendar, morning, make_session):
        valid = DateRange(date(2025, 1, 6), date(2025, 3, 28))
        window = WeekWindow(start=date(2025, 3, 24), end=date(2025, 3, 30))
        view = calendar.view(window, valid, [make_session("s1", Weekday.SATURDAY, morning)], date(2025, 3, 29))
        assert view.sessions == ()
        assert not view.can_step_forward
        assert view.today_index == 5


class TestWeekView:

    def test_sessions_on(self, calendar, morning, evening, make_session):
        sessions = [
            make_session("a", Weekday.TUESDAY, morning),
            make_session("b", Weekday.TUESDAY, evening),
            make_session("c", Weekday.FRIDAY, morning),
        ]
        window = calendar.window_containing(date(2025, 1, 8))
        view = calendar.view(window, DateRange(), sessions, date(2025, 1, 8))
        assert [p.session_id for p in view.sessions_on(date(2025, 1, 7))] == ["a", "b"]
        assert view.sessions_on(date(2025, 1, 6)) == []


def test_default_week_start_from_config():
    assert WeekCalendar().weekdays.week_start is config.WEEK_START
