"""Repository layer for the Meeting aggregate."""

from momintel.repositories.meeting_repo import (
    InMemoryMeetingRepository,
    MeetingRepository,
    locked,
)

__all__ = ["InMemoryMeetingRepository", "MeetingRepository", "locked"]
