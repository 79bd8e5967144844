"""
Configuration constants for coursesheet.

Defaults for freshly created records and the fixed values the renderer
falls back to live here, so the model, renderer and CLI agree on them.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# New records
# ---------------------------------------------------------------------------

DEFAULT_TERM = "Fall 2025"
DEFAULT_TOTAL_CREDITS = "0.000"
DEFAULT_MEETING_TYPE = "Class"
DEFAULT_NOTE = (
    "Part-time students: The information shown below is subject to change. "
    "On the first day of your class, please check back here or visit www.bcit.ca/rooms."
)

# strftime pattern for Student.generated_on, e.g. "Nov 03, 2025 07:26 pm"
GENERATED_ON_FORMAT = "%b %d, %Y %I:%M %p"

# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

EMPTY_CELL = "&nbsp;"
NOTE_LINE_BREAK = "<br />"

# Row used when a course has no meetings at all
FALLBACK_MEETING = {
    "type": "Class",
    "time": "TBA",
    "days": "",
    "location": "TBA",
    "date_range": "",
    "schedule_type": "",
    "instructors": "TBA",
}

FILE_NAME_PREFIX = "transcript"
FILE_NAME_STEM = "course-schedule"
FILE_NAME_SUFFIX = ".html"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
