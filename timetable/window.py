"""Week window arithmetic."""

from datetime import timedelta

from .models import DayLike, WeekWindow, as_day
from .weekdays import WeekdayIndex


class WeekWindowCalculator:
    """Partitions the calendar into aligned, non-overlapping 7-day windows."""

    def __init__(self, weekday_index: WeekdayIndex) -> None:
        self._index = weekday_index

    @property
    def weekday_index(self) -> WeekdayIndex:
        return self._index

    def window_containing(self, reference: DayLike) -> WeekWindow:
        """Return the week window the reference day belongs to.

        Args:
            reference: Any date or datetime; only its calendar day is used.

        Returns:
            Window whose ``start`` has weekday index 0.
        """
        day = as_day(reference)
        start = day - timedelta(days=self._index.index_of_date(day))
        return WeekWindow(start=start, end=start + timedelta(days=6))

    def shift(self, window: WeekWindow, weeks: int) -> WeekWindow:
        """Move a window by a whole number of weeks (negative goes back)."""
        offset = timedelta(weeks=weeks)
        return WeekWindow(start=window.start + offset, end=window.end + offset)
