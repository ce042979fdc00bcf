"""Weekly course calendar: session projection and week navigation."""

from .errors import ScheduleDataError, TimetableError
from .models import (
    DateRange,
    ProjectedSession,
    RecurringSession,
    TimeSlot,
    Weekday,
    WeekWindow,
)
from .navigation import NOT_IN_VIEW, NavigationBounds
from .projector import SessionProjector
from .ranges import contains, course_range, parse_range
from .view import WeekCalendar, WeekView
from .weekdays import WeekdayIndex
from .window import WeekWindowCalculator

__all__ = [
    "DateRange",
    "NOT_IN_VIEW",
    "NavigationBounds",
    "ProjectedSession",
    "RecurringSession",
    "ScheduleDataError",
    "SessionProjector",
    "TimeSlot",
    "TimetableError",
    "WeekCalendar",
    "WeekView",
    "WeekWindow",
    "WeekWindowCalculator",
    "Weekday",
    "WeekdayIndex",
    "contains",
    "course_range",
    "parse_range",
]
