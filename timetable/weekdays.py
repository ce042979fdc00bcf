"""Weekday-to-ordinal mapping under a start-of-week convention."""

from types import MappingProxyType
from typing import Mapping

from .models import DayLike, Weekday, as_day


class WeekdayIndex:
    """Immutable table assigning 0..6 to the weekdays.

    Index 0 is ``week_start``; the remaining days follow in calendar order.
    """

    def __init__(self, week_start: Weekday) -> None:
        self._week_start = week_start
        ordered = sorted(
            Weekday, key=lambda day: (day.weekday_number - week_start.weekday_number) % 7
        )
        self._ordered: tuple[Weekday, ...] = tuple(ordered)
        self._table: Mapping[Weekday, int] = MappingProxyType(
            {day: index for index, day in enumerate(ordered)}
        )

    @property
    def week_start(self) -> Weekday:
        return self._week_start

    @property
    def table(self) -> Mapping[Weekday, int]:
        return self._table

    def index_of(self, weekday: Weekday) -> int:
        """Return the ordinal of ``weekday``.

        Raises:
            KeyError: If ``weekday`` is not a :class:`Weekday` member.
        """
        return self._table[weekday]

    def index_of_date(self, day: DayLike) -> int:
        return (as_day(day).weekday() - self._week_start.weekday_number) % 7

    def weekday_at(self, index: int) -> Weekday:
        if not 0 <= index <= 6:
            raise ValueError(f"Weekday index must be 0-6, got {index}")
        return self._ordered[index]

    def ordered(self) -> tuple[Weekday, ...]:
        return self._ordered

    def __repr__(self) -> str:
        return f"WeekdayIndex(week_start={self._week_start.value!r})"
