"""iCalendar transformer for projected course weeks."""

import hashlib
from datetime import datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from icalendar import Calendar, Event

from timetable import config
from timetable.models import ProjectedSession
from timetable.view import WeekView
from .base import BaseTransformer


class ICalTransformer(BaseTransformer):
    """Transformer that converts a week view to iCalendar format."""

    UID_DOMAIN = "course-calendar"

    def __init__(self, timezone: Optional[ZoneInfo] = None, calendar_name: str = "Course schedule") -> None:
        """Initialize the iCalendar transformer.

        Args:
            timezone: Zone the session times are expressed in; defaults to
                ``config.TIMEZONE``.
            calendar_name: Value of the X-WR-CALNAME property.
        """
        self._calendar: Optional[Calendar] = None
        self._timezone = timezone or config.TIMEZONE
        self._calendar_name = calendar_name

    def _generate_uid(self, session: ProjectedSession) -> str:
        """Generate a unique identifier for one occurrence of a session.

        Args:
            session: The projected session.

        Returns:
            Unique identifier string, stable across exports.
        """
        unique_string = f"{session.session_id}-{session.occurs_on.isoformat()}"
        return hashlib.md5(unique_string.encode()).hexdigest() + "@" + self.UID_DOMAIN

    def _build_event(self, session: ProjectedSession) -> Event:
        event = Event()
        event.add("uid", self._generate_uid(session))
        event.add("dtstamp", datetime.now(self._timezone))

        starts_at = session.starts_at
        ends_at = session.ends_at
        if starts_at is None:
            # No clock times for this slot: all-day entry
            event.add("dtstart", session.occurs_on)
            event.add("dtend", session.occurs_on + timedelta(days=1))
        else:
            event.add("dtstart", starts_at.replace(tzinfo=self._timezone))
            if ends_at is not None:
                event.add("dtend", ends_at.replace(tzinfo=self._timezone))

        event.add("summary", session.label)
        if session.time_slot.name:
            event.add("description", session.time_slot.name)
        return event

    def transform(self, view: WeekView) -> Calendar:
        """Transform a week view into iCalendar format.

        Args:
            view: The projected week.

        Returns:
            iCalendar Calendar object with one event per projected session.
        """
        self._calendar = Calendar()
        self._calendar.add("prodid", "-//Course Calendar//course-week-calendar//EN")
        self._calendar.add("version", "2.0")
        self._calendar.add("calscale", "GREGORIAN")
        self._calendar.add("method", "PUBLISH")
        self._calendar.add("x-wr-calname", self._calendar_name)
        self._calendar.add("x-wr-timezone", str(self._timezone.key))

        for session in view.sessions:
            self._calendar.add_component(self._build_event(session))

        return self._calendar

    def save(self, output_path: str) -> None:
        """Save the calendar to an .ics file.

        Args:
            output_path: Path to the output file.

        Raises:
            RuntimeError: If transform() hasn't been called yet.
        """
        if self._calendar is None:
            raise RuntimeError("No calendar data. Call transform() first.")

        with open(output_path, "wb") as f:
            f.write(self._calendar.to_ical())
