"""Template context for MoM rendering."""

from pydantic import BaseModel, ConfigDict, Field

from momintel.models.analytics import MoodAssessment
from momintel.models.attendance import AttendanceSummary
from momintel.models.insights import Insights
from momintel.models.meeting import Meeting
from momintel.models.note import DEFAULT_SPEAKER


class ActionItemLine(BaseModel):
    """Action item data for template rendering."""

    item: str
    owner: str
    due: str | None = None
    status: str = "open"


class SpeakerLine(BaseModel):
    speaker: str
    notes: int
    words: int


class AttendanceLine(BaseModel):
    name: str
    email: str | None = None
    joins: int = 0
    leaves: int = 0


class NoteLine(BaseModel):
    """Discussion note data for template rendering."""

    timestamp: str
    speaker: str
    text: str


class MomContext(BaseModel):
    """Context data for rendering the MoM template.

    Flattened, string-friendly view of the meeting plus its derived
    insights, mood and attendance.
    """

    model_config = ConfigDict(str_strip_whitespace=False)

    mood_label: str
    mood_confidence: float
    mood_rationale: str

    meeting_id: str
    title: str
    started_at: str
    ended_at: str | None = None
    attendees: list[str] = Field(default_factory=list)
    platform: str = "manual"
    meeting_link: str = ""

    summary: list[str] = Field(default_factory=list)
    agenda: list[str] = Field(default_factory=list)
    decisions: list[str] = Field(default_factory=list)
    action_items: list[ActionItemLine] = Field(default_factory=list)
    speaker_stats: list[SpeakerLine] = Field(default_factory=list)
    participants: list[AttendanceLine] = Field(default_factory=list)
    notes: list[NoteLine] = Field(default_factory=list)

    @classmethod
    def from_meeting(
        cls,
        meeting: Meeting,
        insights: Insights,
        mood: MoodAssessment,
        attendance: AttendanceSummary,
    ) -> "MomContext":
        """Build a context from the meeting aggregate and its derivations."""
        return cls(
            mood_label=mood.label.value,
            mood_confidence=mood.confidence,
            mood_rationale=mood.rationale,
            meeting_id=str(meeting.id),
            title=meeting.title,
            started_at=meeting.started_at.isoformat(),
            ended_at=meeting.ended_at.isoformat() if meeting.ended_at else None,
            attendees=meeting.attendees,
            platform=meeting.platform,
            meeting_link=meeting.meeting_link,
            summary=insights.summary,
            agenda=insights.agenda,
            decisions=insights.decisions,
            action_items=[
                ActionItemLine(
                    item=a.item, owner=a.owner, due=a.due, status=a.status.value
                )
                for a in insights.action_items
            ],
            speaker_stats=[
                SpeakerLine(speaker=s.speaker, notes=s.notes, words=s.words)
                for s in insights.speaker_stats
            ],
            participants=[
                AttendanceLine(
                    name=p.name, email=p.email, joins=p.joins, leaves=p.leaves
                )
                for p in attendance.participants
            ],
            notes=[
                NoteLine(
                    timestamp=n.timestamp.isoformat(),
                    speaker=n.speaker or DEFAULT_SPEAKER,
                    text=n.text,
                )
                for n in meeting.notes
            ],
        )
