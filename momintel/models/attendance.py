"""Attendance models built from join/leave presence events."""

from datetime import datetime
from enum import Enum

from pydantic import ConfigDict, Field

from momintel.models.base import Record, utc_now


class PresenceAction(str, Enum):
    JOIN = "join"
    LEAVE = "leave"


class PresenceEvent(Record):
    """A participant joining or leaving the meeting."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str
    email: str = ""
    action: PresenceAction = Field(default=PresenceAction.JOIN)
    source: str = Field(default="manual")
    timestamp: datetime = Field(default_factory=utc_now)


class AttendanceRecord(Record):
    """Running join/leave tally for one participant."""

    name: str
    email: str | None = None
    first_join_at: datetime | None = None
    last_leave_at: datetime | None = None
    joins: int = Field(default=0, ge=0)
    leaves: int = Field(default=0, ge=0)
    discovered: bool = Field(
        default=False,
        description="Participant was not on the invite list",
    )


class AttendanceSummary(Record):
    """Attendance map as consumed by the MoM renderer."""

    participant_count: int = 0
    discovered_participant_count: int = 0
    discovered_participants: list[str] = Field(default_factory=list)
    participants: list[AttendanceRecord] = Field(default_factory=list)
