"""Validation of course API payloads.

Everything the calendar engine receives passes through here first: records
that cannot describe a weekly session are dropped with a warning, so the
engine only ever sees well-formed weekdays.
"""

import logging
import re
from datetime import datetime, time, timedelta
from typing import Any, Optional

from timetable import config
from timetable.errors import ScheduleDataError
from timetable.models import DateRange, RecurringSession, TimeSlot, Weekday
from timetable.ranges import parse_range

from .models import ClassRecord

logger = logging.getLogger(__name__)

# The timetable endpoints number days from Sunday.
_BY_NUMBER = {
    0: Weekday.SUNDAY,
    1: Weekday.MONDAY,
    2: Weekday.TUESDAY,
    3: Weekday.WEDNESDAY,
    4: Weekday.THURSDAY,
    5: Weekday.FRIDAY,
    6: Weekday.SATURDAY,
}

_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::\d{2})?\s*$")


def parse_weekday(value: Any) -> Weekday:
    """Parse a weekday as sent by the API.

    Args:
        value: A day name ("Monday", "mon", "MONDAY") or a number 0-6 with
            0 meaning Sunday.

    Returns:
        The matching weekday.

    Raises:
        ScheduleDataError: If the value names no weekday.
    """
    if isinstance(value, Weekday):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if value in _BY_NUMBER:
            return _BY_NUMBER[value]
        raise ScheduleDataError(f"Weekday number must be 0-6, got {value}")
    if isinstance(value, str):
        text = value.strip().lower()
        if text.isdigit():
            return parse_weekday(int(text))
        if len(text) >= 3:
            for day in Weekday:
                if day.value.lower().startswith(text):
                    return day
    raise ScheduleDataError(f"Unknown weekday: {value!r}")


def parse_clock(text: Any) -> Optional[time]:
    """Parse "HH:mm" (seconds optional); None if it is not a clock time."""
    if not text or not isinstance(text, str):
        return None
    match = _CLOCK_RE.match(text)
    if not match:
        return None
    hour, minute = map(int, match.groups())
    if hour > 23 or minute > 59:
        return None
    return time(hour, minute)


def parse_time_slot(record: dict[str, Any]) -> TimeSlot:
    """Build a time slot from a schedule or meeting record.

    When the API only sends the slot name and that name is a clock time, it
    is taken as the start time and the slot lasts ``DEFAULT_SLOT_MINUTES``.
    """
    name = str(record.get("timeSlotName") or "").strip()
    start = parse_clock(record.get("startTime")) or parse_clock(name)
    end = parse_clock(record.get("endTime"))

    if start is not None and end is None:
        end_dt = datetime.combine(datetime.min, start) + timedelta(
            minutes=config.DEFAULT_SLOT_MINUTES
        )
        # a default length never wraps past midnight
        end = end_dt.time() if end_dt.day == datetime.min.day else time(23, 59)

    try:
        return TimeSlot(
            id=str(record.get("timeSlotID") or name),
            name=name,
            start_time=start,
            end_time=end,
        )
    except ValueError as e:
        raise ScheduleDataError(str(e)) from e


def parse_session(
    record: dict[str, Any],
    default_label: str = "Class Session",
    source: str = "session",
    position: int = 0,
) -> Optional[RecurringSession]:
    """Turn a course-schedule or class-meeting record into a session.

    Records without an id get one built from ``source``, the weekday, the
    slot and ``position`` (the record's index in its response), so the
    same payload always yields the same ids.

    Returns:
        The session, or None if the record has no usable weekday or slot.
    """
    session_id = str(record.get("id") or "")
    if record.get("dayOfWeek") in (None, ""):
        logger.warning("Skipping schedule record %r: no day of week", session_id)
        return None
    if not record.get("timeSlotName"):
        logger.warning("Skipping schedule record %r: no time slot", session_id)
        return None

    try:
        weekday = parse_weekday(record["dayOfWeek"])
        time_slot = parse_time_slot(record)
    except ScheduleDataError as e:
        logger.warning("Skipping schedule record %r: %s", session_id, e)
        return None

    if not session_id:
        session_id = f"{source}-{weekday.value.lower()}-{time_slot.id}-{position}"

    return RecurringSession(
        id=session_id,
        weekday=weekday,
        time_slot=time_slot,
        label=record.get("courseName") or default_label,
    )


def parse_class(record: dict[str, Any]) -> Optional[ClassRecord]:
    """Build a class record; unparseable dates leave the class unbounded.

    Returns:
        The class, or None if the record has no id.
    """
    class_id = record.get("id")
    if not class_id:
        logger.warning("Skipping class record %r: no id", record.get("className"))
        return None

    date_range = parse_range(record.get("startDate"), record.get("endDate"))
    if date_range is None:
        logger.warning(
            "Class %s has no valid date range (%r - %r)",
            class_id,
            record.get("startDate"),
            record.get("endDate"),
        )
        date_range = DateRange()

    return ClassRecord(
        id=str(class_id),
        name=record.get("className") or "Unnamed Class",
        date_range=date_range,
    )


def unwrap(payload: Any) -> list[dict[str, Any]]:
    """Return the record list of a response, bare or wrapped in ``data``."""
    if isinstance(payload, dict) and "data" in payload:
        payload = payload["data"]
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ScheduleDataError(f"Expected a list of records, got {type(payload).__name__}")
    return [item for item in payload if isinstance(item, dict)]
