"""Client for the course API endpoints the calendar reads from."""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import requests

from timetable import config
from timetable.errors import ScheduleDataError
from timetable.models import RecurringSession

from .models import ClassRecord, CourseSnapshot
from .parsing import parse_class, parse_session, unwrap

logger = logging.getLogger(__name__)


class CourseScheduleClient:
    """Fetches a course's classes and weekly sessions.

    The classes of a course are required: without them there is no date
    range to show.  Course schedules and class meetings are best effort;
    a failing endpoint is logged and the rest of the course still loads.
    """

    CLASSES_ENDPOINT = "/api/ACAD_Classes/course/{course_id}"
    SCHEDULES_ENDPOINT = "/api/ACAD_CourseSchedule/course/{course_id}"
    MEETINGS_ENDPOINT = "/api/ACAD_ClassMeetings/{class_id}"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root; defaults to ``config.API_URL``.
            timeout: Seconds per request; defaults to ``config.REQUEST_TIMEOUT``.
            session: Optional pre-configured ``requests.Session``.
        """
        self._base_url = (base_url or config.API_URL).rstrip("/")
        self._timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self._session = session or requests.Session()

    def _get(self, path: str) -> list[dict[str, Any]]:
        url = f"{self._base_url}{path}"
        logger.debug("GET %s", url)
        resp = self._session.get(url, timeout=self._timeout)
        resp.raise_for_status()
        try:
            payload = resp.json()
        except ValueError as e:
            raise ScheduleDataError(f"Response from {url} is not JSON") from e
        return unwrap(payload)

    def fetch_classes(self, course_id: str) -> list[ClassRecord]:
        """Fetch the classes of a course.

        Raises:
            ScheduleDataError: If the classes cannot be loaded.
        """
        try:
            records = self._get(self.CLASSES_ENDPOINT.format(course_id=course_id))
        except requests.RequestException as e:
            raise ScheduleDataError(f"Could not fetch classes of course {course_id}: {e}") from e
        return _classes(records)

    def fetch_course_schedules(self, course_id: str) -> list[RecurringSession]:
        records = self._get(self.SCHEDULES_ENDPOINT.format(course_id=course_id))
        return _sessions(records, source=f"schedule-{course_id}")

    def fetch_class_meetings(self, class_record: ClassRecord) -> list[RecurringSession]:
        records = self._get(self.MEETINGS_ENDPOINT.format(class_id=class_record.id))
        return _sessions(records, source=f"meeting-{class_record.id}", default_label=class_record.name)

    def fetch_course(self, course_id: str) -> CourseSnapshot:
        """Load everything the calendar needs for one course."""
        classes = self.fetch_classes(course_id)
        sessions: list[RecurringSession] = []

        try:
            sessions.extend(self.fetch_course_schedules(course_id))
        except (requests.RequestException, ScheduleDataError) as e:
            logger.warning("Could not fetch course schedules of %s: %s", course_id, e)

        for class_record in classes:
            try:
                sessions.extend(self.fetch_class_meetings(class_record))
            except (requests.RequestException, ScheduleDataError) as e:
                logger.warning("Could not fetch meetings for class %s: %s", class_record.id, e)

        logger.info(
            "Loaded course %s: %d classes, %d sessions",
            course_id,
            len(classes),
            len(sessions),
        )
        return CourseSnapshot(
            course_id=course_id,
            classes=tuple(classes),
            sessions=tuple(sessions),
        )


def _classes(records: list[dict[str, Any]]) -> list[ClassRecord]:
    parsed = (parse_class(record) for record in records)
    return [class_record for class_record in parsed if class_record is not None]


def _sessions(
    records: list[dict[str, Any]],
    source: str,
    default_label: str = "Class Session",
) -> list[RecurringSession]:
    parsed = (
        parse_session(record, default_label, source=source, position=position)
        for position, record in enumerate(records)
    )
    return [session for session in parsed if session is not None]


def load_snapshot(path: Union[str, Path], course_id: Optional[str] = None) -> CourseSnapshot:
    """Load a course snapshot saved as JSON.

    The file holds the raw API payloads under ``classes``, ``schedules`` and
    ``meetings`` (meetings keyed by class id).

    Raises:
        ScheduleDataError: If the file is missing or malformed.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        raise ScheduleDataError(f"Cannot read course snapshot {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ScheduleDataError("Course snapshot must be a JSON object")

    course_id = course_id or str(raw.get("courseId") or path.stem)
    classes = _classes(unwrap(raw.get("classes")))
    sessions = _sessions(unwrap(raw.get("schedules")), source=f"schedule-{course_id}")

    meetings = raw.get("meetings") or {}
    if not isinstance(meetings, dict):
        raise ScheduleDataError("Snapshot meetings must be keyed by class id")
    for class_record in classes:
        records = unwrap(meetings.get(class_record.id))
        sessions.extend(
            _sessions(records, source=f"meeting-{class_record.id}", default_label=class_record.name)
        )

    return CourseSnapshot(
        course_id=course_id,
        classes=tuple(classes),
        sessions=tuple(sessions),
    )
