"""Meeting intelligence core: notes in, versioned Minutes of Meeting out."""

from momintel.services.meeting_service import MeetingService

__all__ = ["MeetingService"]
