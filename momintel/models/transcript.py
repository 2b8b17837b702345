"""Transcription session and chunk models."""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import ConfigDict, Field

from momintel.models.base import Record, utc_now
from momintel.models.note import DEFAULT_SPEAKER

DEFAULT_LANGUAGE = "en-US"
DEFAULT_PROVIDER = "mock-realtime"
DEFAULT_CHUNK_SOURCE = "mic"
DEFAULT_CHUNK_CONFIDENCE = 0.9


class TranscriptChunk(Record):
    """One unit of captured speech or caption text.

    Owned by its TranscriptionSession and never mutated.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: UUID = Field(default_factory=uuid4)
    speaker: str = Field(default=DEFAULT_SPEAKER)
    text: str
    confidence: float = Field(default=DEFAULT_CHUNK_CONFIDENCE, ge=0.0, le=1.0)
    source: str = Field(default=DEFAULT_CHUNK_SOURCE)
    timestamp: datetime = Field(default_factory=utc_now)


class TranscriptionSession(Record):
    """A transcription run attached to a meeting."""

    id: UUID = Field(default_factory=uuid4)
    language: str = Field(default=DEFAULT_LANGUAGE)
    provider: str = Field(default=DEFAULT_PROVIDER)
    started_at: datetime = Field(default_factory=utc_now)
    stopped_at: datetime | None = Field(default=None)
    is_active: bool = Field(default=True)
    chunks: list[TranscriptChunk] = Field(default_factory=list)

    @property
    def chunk_count(self) -> int:
        """Number of chunks captured so far."""
        return len(self.chunks)
