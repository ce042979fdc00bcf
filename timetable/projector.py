"""Resolves recurring sessions to concrete dates of a week window."""

import logging
from datetime import timedelta
from typing import Iterable

from .models import DateRange, ProjectedSession, RecurringSession, WeekWindow
from .ranges import contains
from .window import WeekWindowCalculator

logger = logging.getLogger(__name__)


class SessionProjector:
    """Joins a week window, a validity range and recurring sessions.

    The projector holds no state beyond the calculator it was built with, so
    one instance can serve any number of concurrent callers.
    """

    def __init__(self, calculator: WeekWindowCalculator) -> None:
        self._calculator = calculator

    def project(
        self,
        window: WeekWindow,
        valid_range: DateRange,
        sessions: Iterable[RecurringSession],
    ) -> list[ProjectedSession]:
        """Return the sessions that take place inside ``window``.

        Each session is placed on the window day matching its weekday and
        kept only when that day is inside ``valid_range``.  Truncation happens
        per day, so a course ending mid-week still shows the earlier days of
        that week.

        Args:
            window: The week being viewed.
            valid_range: Period in which the course's sessions are held.
            sessions: Recurring session definitions, in display order.

        Returns:
            Projected sessions ordered by date; sessions on the same day keep
            their input order.
        """
        index = self._calculator.weekday_index
        projected: list[ProjectedSession] = []

        for session in sessions:
            if session.weekday is None or session.time_slot is None:
                logger.warning(
                    "Dropping session %s: missing %s",
                    session.id,
                    "weekday" if session.weekday is None else "time slot",
                )
                continue

            occurs_on = window.start + timedelta(days=index.index_of(session.weekday))
            if not contains(valid_range, occurs_on):
                continue

            projected.append(
                ProjectedSession(
                    session_id=session.id,
                    occurs_on=occurs_on,
                    time_slot=session.time_slot,
                    label=session.label,
                )
            )

        # sorted() is stable: same-day sessions stay in input order
        return sorted(projected, key=lambda p: p.occurs_on)
