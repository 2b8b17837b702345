"""Typed rejections raised by the meeting intelligence core.

Every precondition violation surfaces as a subclass of
MeetingIntelligenceError so callers can map them to their own
transport (HTTP 400/404, CLI exit codes) in one place.
"""

from uuid import UUID


class MeetingIntelligenceError(Exception):
    """Base class for all caller-visible rejections."""


class MeetingNotFoundError(MeetingIntelligenceError):
    """No meeting is stored under the requested id."""

    def __init__(self, meeting_id: UUID | str):
        super().__init__(f"Meeting not found: {meeting_id}")
        self.meeting_id = meeting_id


class MeetingEndedError(MeetingIntelligenceError):
    """The meeting no longer accepts notes."""


class EmptyTextError(MeetingIntelligenceError):
    """A note or transcript chunk was submitted without text."""


class TranscriptionActiveError(MeetingIntelligenceError):
    """A transcription session is already running for the meeting."""


class TranscriptionInactiveError(MeetingIntelligenceError):
    """The operation needs an active transcription session."""


class SimulationRunningError(MeetingIntelligenceError):
    """A transcript simulation is already running for the meeting."""


class InsufficientVersionsError(MeetingIntelligenceError):
    """Fewer than two MoM versions are stored."""


class VersionNotFoundError(MeetingIntelligenceError):
    """No MoM version exists with the requested id."""


class MomNotAvailableError(MeetingIntelligenceError):
    """The meeting has no generated MoM yet."""


class InvalidMeetingError(MeetingIntelligenceError):
    """A meeting was requested without a title or attendees."""


class UnsupportedPlatformError(MeetingIntelligenceError):
    """The platform id is not one the core knows about."""


class ShareNotFoundError(MeetingIntelligenceError):
    """No shared MoM exists for the requested share id or meeting."""
