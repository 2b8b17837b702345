"""Email job queue for MoM delivery and action-item reminders.

Jobs are created from a meeting and drained one at a time through an
injected sender. Transient sender failures are retried with tenacity
exponential backoff; the final outcome is recorded on the job.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Protocol

import structlog
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from momintel.config import Settings
from momintel.models.base import utc_now
from momintel.models.delivery import EmailJob, EmailPayload, JobStatus, JobType
from momintel.models.insights import ActionItem, Insights
from momintel.models.meeting import Meeting

logger = structlog.get_logger()
retry_logger = logging.getLogger(__name__)

# Exceptions that are retriable (transient failures)
RETRIABLE_EXCEPTIONS = (
    ConnectionError,
    TimeoutError,
)

REMINDER_FALLBACK_RECIPIENTS = 5


class EmailSender(Protocol):
    """Delivers one rendered email. Raises on failure."""

    def send(self, payload: EmailPayload) -> None: ...


def create_mom_email_job(
    meeting: Meeting,
    from_email: str,
    share_url: str | None = None,
    max_retries: int = 3,
) -> EmailJob:
    """Queue the meeting's MoM for all invited attendees."""
    text = meeting.mom or ""
    if share_url:
        text = f"{text}\n\nShared MoM Link: {share_url}"

    return EmailJob(
        type=JobType.SEND_MOM_EMAIL,
        max_retries=max_retries,
        payload=EmailPayload(
            meeting_id=meeting.id,
            from_email=from_email,
            to=list(meeting.attendees),
            subject=f"Minutes of Meeting: {meeting.title}",
            text=text,
        ),
    )


def _owner_lookup(attendees: list[str]) -> dict[str, str]:
    """Map email local parts to full addresses."""
    lookup = {}
    for email in attendees:
        normalized = email.strip().lower()
        local_part = normalized.split("@")[0]
        if local_part:
            lookup[local_part] = normalized
    return lookup


def _reminder_recipients(
    item: ActionItem,
    lookup: dict[str, str],
    fallback: list[str],
) -> list[str]:
    owner = item.owner.strip().lower()
    email = lookup.get(owner) or lookup.get(owner.split(" ")[0])
    return [email] if email else fallback


def create_reminder_jobs(
    meeting: Meeting,
    insights: Insights,
    from_email: str,
    days_ahead: int = 1,
    max_retries: int = 3,
) -> list[EmailJob]:
    """One reminder job per action item, scheduled ``days_ahead`` out.

    The owner's address is used when the owner name matches an attendee's
    email local part; otherwise the first few attendees get the reminder.
    """
    lookup = _owner_lookup(meeting.attendees)
    fallback = meeting.attendees[:REMINDER_FALLBACK_RECIPIENTS]
    due_at = utc_now() + timedelta(days=max(0, days_ahead))

    jobs = []
    for item in insights.action_items:
        recipients = _reminder_recipients(item, lookup, fallback)
        if not recipients:
            continue
        jobs.append(
            EmailJob(
                type=JobType.ACTION_REMINDER_EMAIL,
                max_retries=max_retries,
                next_attempt_at=due_at,
                payload=EmailPayload(
                    meeting_id=meeting.id,
                    from_email=from_email,
                    to=recipients,
                    subject=f"Reminder: Action Item from {meeting.title}",
                    text=(
                        f"Action Item: {item.item}\n"
                        f"Owner: {item.owner}\n"
                        f"Status: {item.status.value}\n"
                        f"Meeting: {meeting.title}"
                    ),
                ),
            )
        )
    return jobs


class DeliveryQueue:
    """In-memory queue of email jobs.

    Stores every job with its status so callers can inspect failures.
    """

    def __init__(
        self,
        sender: EmailSender,
        wait_min: float = 1.0,
        wait_max: float = 60.0,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the queue.

        Args:
            sender: Collaborator that actually delivers emails
            wait_min: Minimum backoff between attempts, in seconds
            wait_max: Maximum backoff between attempts, in seconds
            clock: Source of "now" for runnable checks
        """
        self._sender = sender
        self._wait_min = wait_min
        self._wait_max = wait_max
        self._clock = clock
        self._jobs: list[EmailJob] = []

    @classmethod
    def from_settings(cls, sender: EmailSender, settings: Settings) -> "DeliveryQueue":
        """Build a queue using the configured retry backoff."""
        return cls(
            sender,
            wait_min=settings.email_retry_wait_min,
            wait_max=settings.email_retry_wait_max,
        )

    @property
    def jobs(self) -> list[EmailJob]:
        return list(self._jobs)

    def enqueue(self, job: EmailJob) -> EmailJob:
        self._jobs.append(job)
        logger.info("email job queued", job_id=str(job.id), type=job.type.value)
        return job

    def get(self, job_id) -> EmailJob | None:
        for job in self._jobs:
            if str(job.id) == str(job_id):
                return job
        return None

    def next_runnable(self) -> EmailJob | None:
        now = self._clock()
        for job in self._jobs:
            if job.status == JobStatus.QUEUED and job.next_attempt_at <= now:
                return job
        return None

    def process_next(self) -> EmailJob | None:
        """Deliver the first runnable job.

        Returns:
            The processed job, or None when nothing is runnable
        """
        job = self.next_runnable()
        if job is None:
            return None

        job.status = JobStatus.PROCESSING
        job.touch()

        try:
            self._send_with_retry(job)
        except Exception as e:
            job.status = JobStatus.FAILED
            job.error = str(e)
            logger.error(
                "email job failed",
                job_id=str(job.id),
                attempts=job.attempts,
                error=str(e),
            )
        else:
            job.status = JobStatus.SUCCEEDED
            job.error = None
            logger.info("email job sent", job_id=str(job.id), attempts=job.attempts)

        job.touch()
        return job

    def drain(self) -> list[EmailJob]:
        """Process runnable jobs until none are left."""
        processed = []
        while (job := self.process_next()) is not None:
            processed.append(job)
        return processed

    def _send_with_retry(self, job: EmailJob) -> None:
        retrying = Retrying(
            stop=stop_after_attempt(job.max_retries),
            wait=wait_exponential(multiplier=1, min=self._wait_min, max=self._wait_max),
            retry=retry_if_exception_type(RETRIABLE_EXCEPTIONS),
            before_sleep=before_sleep_log(retry_logger, logging.INFO),
            reraise=True,
        )
        for attempt in retrying:
            with attempt:
                job.attempts += 1
                self._sender.send(job.payload)
