"""Calendar events a meeting can be started from."""

from datetime import datetime

from pydantic import Field

from momintel.models.base import Record


class PlatformInfo(Record):
    id: str
    label: str


class CalendarEvent(Record):
    """An upcoming meeting as listed by a platform calendar."""

    event_id: str
    title: str
    owner_email: str
    starts_at: datetime
    attendees: list[str] = Field(default_factory=list)
    meeting_link: str = ""
