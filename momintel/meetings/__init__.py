"""Meeting-level collaborators: attendance and platform metadata."""

from momintel.meetings.attendance import attendance_summary, register_presence
from momintel.meetings.platform import (
    detect_platform,
    list_calendar_events,
    normalize_attendees,
    supported_platforms,
)

__all__ = [
    "attendance_summary",
    "detect_platform",
    "list_calendar_events",
    "normalize_attendees",
    "register_presence",
    "supported_platforms",
]
