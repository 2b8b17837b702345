"""Insight records extracted from the note log."""

from datetime import date
from enum import Enum

from pydantic import Field

from momintel.models.base import Record


class ActionItemStatus(str, Enum):
    """Status of an action item."""

    OPEN = "open"
    DONE = "done"


class ActionItem(Record):
    """A commitment detected in the notes.

    ``due`` keeps the raw keyword or date literal found in the text;
    ``due_date`` is that value resolved against the meeting start.
    """

    owner: str = Field(description="Who committed to the work")
    item: str = Field(description="What needs to be done")
    due: str | None = Field(default=None, description="Raw due keyword or literal")
    due_date: date | None = Field(default=None, description="Resolved due date")
    status: ActionItemStatus = Field(default=ActionItemStatus.OPEN)

    @property
    def is_open(self) -> bool:
        return self.status == ActionItemStatus.OPEN


class SpeakerStat(Record):
    """Participation tally for one speaker."""

    speaker: str
    notes: int = Field(default=0, ge=0)
    words: int = Field(default=0, ge=0)


class Insights(Record):
    """Structured extraction over a note log snapshot."""

    summary: list[str] = Field(default_factory=list, max_length=6)
    agenda: list[str] = Field(default_factory=list, max_length=6)
    decisions: list[str] = Field(default_factory=list, max_length=8)
    action_items: list[ActionItem] = Field(default_factory=list, max_length=12)
    speaker_stats: list[SpeakerStat] = Field(default_factory=list)
