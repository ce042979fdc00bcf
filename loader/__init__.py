"""Loader module for reading course schedule data from the course API."""

from .client import CourseScheduleClient, load_snapshot
from .models import ClassRecord, CourseSnapshot

__all__ = ["ClassRecord", "CourseScheduleClient", "CourseSnapshot", "load_snapshot"]
