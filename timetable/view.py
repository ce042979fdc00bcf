"""Everything the calendar page needs to render one week."""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from . import config
from .models import DateRange, DayLike, ProjectedSession, RecurringSession, Weekday, WeekWindow
from .navigation import NOT_IN_VIEW, NavigationBounds
from .projector import SessionProjector
from .weekdays import WeekdayIndex
from .window import WeekWindowCalculator


@dataclass(frozen=True)
class WeekView:
    """Snapshot of one visible week of a course calendar."""

    window: WeekWindow
    sessions: tuple[ProjectedSession, ...]
    can_step_backward: bool
    can_step_forward: bool
    today_index: int = NOT_IN_VIEW

    def sessions_on(self, day: date) -> list[ProjectedSession]:
        return [s for s in self.sessions if s.occurs_on == day]


class WeekCalendar:
    """Wires the calendar components together under one week convention.

    Usage::

        calendar = WeekCalendar()
        window = calendar.focus_window(now, course_range)
        view = calendar.view(window, course_range, sessions, now)
        if view.can_step_forward:
            window = calendar.shift(window, 1)
    """

    def __init__(self, week_start: Optional[Weekday] = None) -> None:
        self.weekdays = WeekdayIndex(week_start or config.WEEK_START)
        self.windows = WeekWindowCalculator(self.weekdays)
        self.projector = SessionProjector(self.windows)
        self.navigation = NavigationBounds(self.windows)

    def window_containing(self, reference: DayLike) -> WeekWindow:
        return self.windows.window_containing(reference)

    def shift(self, window: WeekWindow, weeks: int) -> WeekWindow:
        return self.windows.shift(window, weeks)

    def focus_window(self, now: DayLike, valid_range: DateRange) -> WeekWindow:
        return self.navigation.focus_window(now, valid_range)

    def step(self, window: WeekWindow, valid_range: DateRange, weeks: int) -> WeekWindow:
        return self.navigation.step(window, valid_range, weeks)

    def view(
        self,
        window: WeekWindow,
        valid_range: DateRange,
        sessions: Iterable[RecurringSession],
        now: DayLike,
    ) -> WeekView:
        """Project ``sessions`` into ``window`` and derive navigation state.

        Args:
            window: The week being shown.
            valid_range: The course's period of validity.
            sessions: Recurring session definitions of the course.
            now: Current time, supplied by the caller.

        Returns:
            Immutable view of the week.
        """
        return WeekView(
            window=window,
            sessions=tuple(self.projector.project(window, valid_range, sessions)),
            can_step_backward=self.navigation.can_step_backward(window, valid_range),
            can_step_forward=self.navigation.can_step_forward(window, valid_range),
            today_index=self.navigation.today_index(window, now),
        )

    def __repr__(self) -> str:
        return f"WeekCalendar(week_start={self.weekdays.week_start.value!r})"
