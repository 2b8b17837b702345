"""Service layer exposing the meeting intelligence operations."""

from momintel.services.meeting_service import (
    ChunkIngestResult,
    EventStartResult,
    HookCaption,
    HookIngestResult,
    HookParticipant,
    MeetingService,
)

__all__ = [
    "ChunkIngestResult",
    "EventStartResult",
    "HookCaption",
    "HookIngestResult",
    "HookParticipant",
    "MeetingService",
]
