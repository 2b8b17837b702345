"""Meeting aggregate holding the note log and everything derived from it."""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import ConfigDict, Field

from momintel.models.attendance import AttendanceRecord, PresenceEvent
from momintel.models.base import Record, utc_now
from momintel.models.insights import Insights
from momintel.models.mom_version import MomVersion
from momintel.models.note import Note
from momintel.models.share import MomShare
from momintel.models.transcript import TranscriptionSession


class Meeting(Record):
    """A meeting with its note log, transcription and MoM history.

    Meetings are the primary aggregate. The core mutates them in place;
    persisting them is the repository's job.
    """

    # MoM text must survive round-trips byte-for-byte.
    model_config = ConfigDict(str_strip_whitespace=False)

    id: UUID = Field(default_factory=uuid4, description="Unique meeting identifier")
    title: str = Field(min_length=1, max_length=500)
    attendees: list[str] = Field(
        default_factory=list,
        description="Invited attendee emails, normalized to lower case",
    )
    platform: str = Field(default="manual")
    meeting_link: str = Field(default="")
    source: str = Field(default="manual")
    started_at: datetime = Field(default_factory=utc_now)
    ended_at: datetime | None = None
    is_active: bool = True

    notes: list[Note] = Field(default_factory=list)
    insights: Insights | None = None
    mom: str | None = None
    mom_versions: list[MomVersion] = Field(default_factory=list)
    mom_share: MomShare | None = None

    presence_events: list[PresenceEvent] = Field(default_factory=list)
    attendance: dict[str, AttendanceRecord] = Field(default_factory=dict)
    discovered_attendees: list[str] = Field(default_factory=list)

    transcription: TranscriptionSession | None = None

    @property
    def has_active_transcription(self) -> bool:
        return self.transcription is not None and self.transcription.is_active

    @property
    def latest_version(self) -> MomVersion | None:
        return self.mom_versions[-1] if self.mom_versions else None
