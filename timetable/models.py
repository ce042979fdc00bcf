"""Data models for the weekly course calendar."""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Optional, Union

DayLike = Union[date, datetime]


def as_day(value: DayLike) -> date:
    """Truncate a date or datetime to its calendar day."""
    # datetime is a subclass of date, so it must be checked first
    if isinstance(value, datetime):
        return value.date()
    return value


class Weekday(Enum):
    """The seven days of the week, named as the course API names them."""

    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"

    @property
    def weekday_number(self) -> int:
        """Number used by ``date.weekday()``: Monday is 0, Sunday is 6."""
        return _WEEKDAY_NUMBERS[self]

    @classmethod
    def of(cls, day: DayLike) -> "Weekday":
        """Return the weekday a date falls on."""
        return _BY_WEEKDAY_NUMBER[as_day(day).weekday()]


_WEEKDAY_NUMBERS = {
    Weekday.MONDAY: 0,
    Weekday.TUESDAY: 1,
    Weekday.WEDNESDAY: 2,
    Weekday.THURSDAY: 3,
    Weekday.FRIDAY: 4,
    Weekday.SATURDAY: 5,
    Weekday.SUNDAY: 6,
}
_BY_WEEKDAY_NUMBER = {offset: day for day, offset in _WEEKDAY_NUMBERS.items()}


@dataclass(frozen=True)
class TimeSlot:
    """Named interval of a day a session is held in.

    The projector treats a slot as an opaque identifier; the times are only
    read when a projected week is rendered or exported.
    """

    id: str
    name: str
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    def __post_init__(self) -> None:
        if self.start_time and self.end_time and self.start_time >= self.end_time:
            raise ValueError(
                f"Time slot {self.name!r}: start time must be before end time"
            )


@dataclass(frozen=True)
class RecurringSession:
    """A session held every week on ``weekday`` in ``time_slot``."""

    id: str
    weekday: Optional[Weekday]
    time_slot: Optional[TimeSlot]
    label: str = field(default="Class Session")


@dataclass(frozen=True)
class DateRange:
    """Inclusive period of validity; a missing bound is unbounded."""

    start: Optional[date] = None
    end: Optional[date] = None

    def __post_init__(self) -> None:
        if self.start is not None:
            object.__setattr__(self, "start", as_day(self.start))
        if self.end is not None:
            object.__setattr__(self, "end", as_day(self.end))
        if self.start is not None and self.end is not None and self.start > self.end:
            raise ValueError(
                f"Date range start {self.start} is after its end {self.end}"
            )

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None


@dataclass(frozen=True)
class WeekWindow:
    """Seven consecutive calendar days, ``start`` to ``end`` inclusive."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end - self.start != timedelta(days=6):
            raise ValueError(
                f"A week window spans exactly 7 days, got {self.start} to {self.end}"
            )

    @property
    def days(self) -> list[date]:
        return [self.start + timedelta(days=offset) for offset in range(7)]

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, date):
            return False
        return self.start <= as_day(day) <= self.end


@dataclass(frozen=True)
class ProjectedSession:
    """A recurring session resolved to one date of a week window."""

    session_id: str
    occurs_on: date
    time_slot: TimeSlot
    label: str = field(default="Class Session")

    @property
    def starts_at(self) -> Optional[datetime]:
        if self.time_slot.start_time is None:
            return None
        return datetime.combine(self.occurs_on, self.time_slot.start_time)

    @property
    def ends_at(self) -> Optional[datetime]:
        if self.time_slot.end_time is None:
            return None
        return datetime.combine(self.occurs_on, self.time_slot.end_time)
