"""Snapshot of a synthesized MoM document."""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import ConfigDict, Field

from momintel.models.base import Record, utc_now


class MomVersion(Record):
    """A stored rendering of the MoM at one point in time."""

    # Text is kept byte-for-byte; whitespace matters for idempotence.
    model_config = ConfigDict(frozen=True, str_strip_whitespace=False)

    id: UUID = Field(default_factory=uuid4)
    created_at: datetime = Field(default_factory=utc_now)
    reason: str = Field(default="update")
    text: str


class MomDiff(Record):
    """Line-level set-membership diff between two MoM texts."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=False)

    added: list[str] = Field(default_factory=list, max_length=30)
    removed: list[str] = Field(default_factory=list, max_length=30)

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed)
