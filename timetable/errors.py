"""Exception types shared by the timetable and loader packages."""


class TimetableError(Exception):
    """Base class for all timetable-related errors."""


class ScheduleDataError(TimetableError):
    """Raised when upstream course data cannot be turned into schedule inputs."""
