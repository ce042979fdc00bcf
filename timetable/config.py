"""Configuration constants for the course calendar.

The start-of-week convention is fixed for the whole console; it is not a
per-user setting.  Values that depend on the deployment (API location) may be
overridden through the environment.
"""

import os
from zoneinfo import ZoneInfo

from .models import Weekday

WEEK_START = Weekday.MONDAY

# Reference calendar every session is expressed in.
TIMEZONE = ZoneInfo(os.environ.get("COURSE_TIMEZONE", "Asia/Ho_Chi_Minh"))

# Length of a slot whose end time the API does not report.
DEFAULT_SLOT_MINUTES = 90

API_URL = os.environ.get("COURSE_API_URL", "https://localhost:8000")
REQUEST_TIMEOUT = float(os.environ.get("COURSE_API_TIMEOUT", 12))
