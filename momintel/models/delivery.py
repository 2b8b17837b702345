"""Email job models for MoM delivery and action-item reminders."""

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import Field

from momintel.models.base import Record, utc_now


class JobType(str, Enum):
    SEND_MOM_EMAIL = "send_mom_email"
    ACTION_REMINDER_EMAIL = "action_reminder_email"


class JobStatus(str, Enum):
    QUEUED = "queued"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class EmailPayload(Record):
    meeting_id: UUID
    from_email: str
    to: list[str] = Field(default_factory=list)
    subject: str
    text: str


class EmailJob(Record):
    """A queued email with its delivery state."""

    id: UUID = Field(default_factory=uuid4)
    type: JobType
    status: JobStatus = Field(default=JobStatus.QUEUED)
    attempts: int = Field(default=0, ge=0)
    max_retries: int = Field(default=3, ge=1)
    next_attempt_at: datetime = Field(default_factory=utc_now)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    error: str | None = None
    payload: EmailPayload

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utc_now()
