"""Week navigation bounds and today highlighting."""

from .models import DateRange, DayLike, WeekWindow, as_day
from .window import WeekWindowCalculator

NOT_IN_VIEW = -1


class NavigationBounds:
    """Decides which neighbouring weeks a course calendar may show.

    A week is reachable when it can contain at least one in-range day: the
    week holding the range start is the earliest one and the week holding
    the range end is the latest, even if they are only partly inside the
    range.
    """

    def __init__(self, calculator: WeekWindowCalculator) -> None:
        self._calculator = calculator

    def can_step_backward(self, window: WeekWindow, valid_range: DateRange) -> bool:
        if valid_range.start is None:
            return True
        candidate = self._calculator.shift(window, -1)
        first = self._calculator.window_containing(valid_range.start)
        return not candidate.start < first.start

    def can_step_forward(self, window: WeekWindow, valid_range: DateRange) -> bool:
        if valid_range.end is None:
            return True
        candidate = self._calculator.shift(window, 1)
        last = self._calculator.window_containing(valid_range.end)
        return not candidate.start > last.start

    def step(self, window: WeekWindow, valid_range: DateRange, weeks: int) -> WeekWindow:
        """Move up to ``weeks`` weeks, stopping at the last reachable week.

        Returns:
            The new window; ``window`` itself when the first step is blocked.
        """
        can_step = self.can_step_forward if weeks > 0 else self.can_step_backward
        direction = 1 if weeks > 0 else -1
        for _ in range(abs(weeks)):
            if not can_step(window, valid_range):
                break
            window = self._calculator.shift(window, direction)
        return window

    def focus_window(self, now: DayLike, valid_range: DateRange) -> WeekWindow:
        """Return the week to open the calendar on.

        This is the week containing ``now``, unless the course has not
        started yet (its first week) or is already over (its last week).
        """
        target = as_day(now)
        if valid_range.start is not None and target < valid_range.start:
            target = valid_range.start
        elif valid_range.end is not None and target > valid_range.end:
            target = valid_range.end
        return self._calculator.window_containing(target)

    def today_index(self, window: WeekWindow, now: DayLike) -> int:
        """Return the window ordinal of ``now``, or -1 if it is not in view."""
        day = as_day(now)
        if not window.start <= day <= window.end:
            return NOT_IN_VIEW
        return self._calculator.weekday_index.index_of_date(day)
