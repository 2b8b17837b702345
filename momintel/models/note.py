"""Note model for the append-only meeting note log."""

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import ConfigDict, Field

from momintel.models.base import Record, utc_now

DEFAULT_SPEAKER = "Participant"


class NoteSource(str, Enum):
    """Where a note came from."""

    MANUAL = "manual"
    TRANSCRIPTION_AUTO = "transcription_auto"
    HOOK = "hook"
    SIMULATOR = "simulator"


class Note(Record):
    """A single attributed text observation in the meeting's log.

    Notes are immutable once appended.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: UUID = Field(default_factory=uuid4, description="Unique note identifier")
    text: str = Field(description="Observation text as submitted")
    speaker: str = Field(default=DEFAULT_SPEAKER, description="Who said or wrote it")
    timestamp: datetime = Field(default_factory=utc_now)
    source: NoteSource = Field(default=NoteSource.MANUAL)
