"""Canonical data models for the meeting intelligence core.

- Note / NoteSource: the append-only note log
- TranscriptChunk / TranscriptionSession: live transcription buffer
- Insights / ActionItem / SpeakerStat: extraction output
- MoodAssessment, RiskRadar, ConflictMap, MeetingScore: derived analytics
- MomVersion / MomDiff: MoM snapshots
- Meeting: the aggregate owning all of the above
"""

from momintel.models.analytics import (
    Conflict,
    ConflictMap,
    ConflictSeverity,
    FollowupDraft,
    IntelligenceReport,
    MeetingScore,
    MoodAssessment,
    MoodLabel,
    RiskHit,
    RiskRadar,
    RiskSeverity,
    ScoreBand,
    ScoreFactors,
    Stance,
)
from momintel.models.attendance import (
    AttendanceRecord,
    AttendanceSummary,
    PresenceAction,
    PresenceEvent,
)
from momintel.models.base import Record, utc_now
from momintel.models.calendar import CalendarEvent, PlatformInfo
from momintel.models.delivery import (
    EmailJob,
    EmailPayload,
    JobStatus,
    JobType,
)
from momintel.models.insights import ActionItem, ActionItemStatus, Insights, SpeakerStat
from momintel.models.meeting import Meeting
from momintel.models.mom_version import MomDiff, MomVersion
from momintel.models.note import DEFAULT_SPEAKER, Note, NoteSource
from momintel.models.share import MomShare, MomShareLink
from momintel.models.transcript import TranscriptChunk, TranscriptionSession

__all__ = [
    # Base
    "Record",
    "utc_now",
    # Notes and transcription
    "DEFAULT_SPEAKER",
    "Note",
    "NoteSource",
    "TranscriptChunk",
    "TranscriptionSession",
    # Insights
    "ActionItem",
    "ActionItemStatus",
    "Insights",
    "SpeakerStat",
    # Analytics
    "Conflict",
    "ConflictMap",
    "ConflictSeverity",
    "FollowupDraft",
    "IntelligenceReport",
    "MeetingScore",
    "MoodAssessment",
    "MoodLabel",
    "RiskHit",
    "RiskRadar",
    "RiskSeverity",
    "ScoreBand",
    "ScoreFactors",
    "Stance",
    # Attendance
    "AttendanceRecord",
    "AttendanceSummary",
    "PresenceAction",
    "PresenceEvent",
    # Versions and sharing
    "MomDiff",
    "MomShare",
    "MomShareLink",
    "MomVersion",
    # Calendar
    "CalendarEvent",
    "PlatformInfo",
    # Delivery
    "EmailJob",
    "EmailPayload",
    "JobStatus",
    "JobType",
    # Aggregate
    "Meeting",
]
