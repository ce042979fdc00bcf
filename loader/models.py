"""Course records as delivered by the course API."""

from dataclasses import dataclass, field

from timetable.models import DateRange, RecurringSession
from timetable.ranges import course_range


@dataclass(frozen=True)
class ClassRecord:
    """A class (cohort) of a course and the period it runs."""

    id: str
    name: str
    date_range: DateRange = field(default_factory=DateRange)


@dataclass(frozen=True)
class CourseSnapshot:
    """Consistent view of one course's classes and recurring sessions."""

    course_id: str
    classes: tuple[ClassRecord, ...] = ()
    sessions: tuple[RecurringSession, ...] = ()

    @property
    def date_range(self) -> DateRange:
        """Earliest class start to latest class end."""
        return course_range(c.date_range for c in self.classes)
