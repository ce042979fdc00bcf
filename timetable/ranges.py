"""Validity range checks and course range aggregation."""

from datetime import date, datetime
from typing import Iterable, Optional

from .models import DateRange, DayLike, as_day


def contains(valid_range: DateRange, day: DayLike) -> bool:
    """Return True if ``day`` lies inside the inclusive range.

    A missing bound is unbounded on that side.  Datetimes are compared by
    calendar day, so the time of day never affects the result.
    """
    day = as_day(day)
    if valid_range.start is not None and day < valid_range.start:
        return False
    if valid_range.end is not None and day > valid_range.end:
        return False
    return True


def course_range(ranges: Iterable[DateRange]) -> DateRange:
    """Aggregate the ranges of a course's classes.

    The course runs from the earliest class start to the latest class end.
    Classes missing either bound do not contribute; a course with no usable
    class is unbounded.
    """
    usable = [r for r in ranges if r.start is not None and r.end is not None]
    if not usable:
        return DateRange()
    return DateRange(
        start=min(r.start for r in usable),
        end=max(r.end for r in usable),
    )


def parse_day(text: Optional[str]) -> Optional[date]:
    """Parse an ISO date or timestamp string; None if it is not one."""
    if not text:
        return None
    text = text.strip()
    # fromisoformat rejects the trailing "Z" before Python 3.11
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def parse_range(start_text: Optional[str], end_text: Optional[str]) -> Optional[DateRange]:
    """Build a range from two API date strings.

    Returns:
        The range, or None when either string is missing or unparseable or
        the dates are inverted.
    """
    start = parse_day(start_text)
    end = parse_day(end_text)
    if start is None or end is None or start > end:
        return None
    return DateRange(start=start, end=end)
