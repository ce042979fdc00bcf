from datetime import date, time

import pytest

from timetable import DateRange, RecurringSession, TimeSlot, Weekday, WeekCalendar


@pytest.fixture
def calendar():
    """Calendar with weeks starting on Monday."""
    return WeekCalendar(Weekday.MONDAY)


@pytest.fixture
def sunday_calendar():
    return WeekCalendar(Weekday.SUNDAY)


@pytest.fixture
def morning():
    return TimeSlot(id="slot-1", name="Slot 1", start_time=time(7, 0), end_time=time(8, 30))


@pytest.fixture
def evening():
    return TimeSlot(id="slot-7", name="Slot 7", start_time=time(18, 15), end_time=time(19, 45))


@pytest.fixture
def winter_term():
    """2025-01-06 (Mon) to 2025-03-31 (Mon)."""
    return DateRange(start=date(2025, 1, 6), end=date(2025, 3, 31))


@pytest.fixture
def make_session():
    def _make(session_id, weekday, slot, label="Class Session"):
        return RecurringSession(id=session_id, weekday=weekday, time_slot=slot, label=label)
    return _make
