"""Tests for email job creation and the retrying delivery queue."""

from datetime import timedelta
from unittest.mock import patch

import pytest
import tenacity

from momintel.config import Settings
from momintel.delivery.queue import DeliveryQueue, create_mom_email_job, create_reminder_jobs
from momintel.intelligence.insight_extractor import extract_insights
from momintel.models.base import utc_now
from momintel.models.delivery import JobStatus, JobType
from momintel.models.insights import ActionItem, Insights
from momintel.models.meeting import Meeting


class FakeSender:
    """Raises the queued errors in order, then succeeds."""

    def __init__(self, *errors):
        self.errors = list(errors)
        self.sent = []

    def send(self, payload):
        if self.errors:
            raise self.errors.pop(0)
        self.sent.append(payload)


@pytest.fixture
def ended_meeting(standup_notes):
    return Meeting(
        title="Standup",
        attendees=["pm@example.com", "dev1@example.com"],
        notes=standup_notes,
        mom="Minutes of Meeting\n...",
    )


def _queue(sender):
    return DeliveryQueue(sender, wait_min=0, wait_max=0)


class TestCreateJobs:
    def test_mom_email(self, ended_meeting):
        job = create_mom_email_job(
            ended_meeting, "mom@example.com", share_url="https://share/1"
        )
        assert job.type == JobType.SEND_MOM_EMAIL
        assert job.status == JobStatus.QUEUED
        assert job.payload.to == ["pm@example.com", "dev1@example.com"]
        assert job.payload.subject == "Minutes of Meeting: Standup"
        assert job.payload.text.endswith("\n\nShared MoM Link: https://share/1")

    def test_reminder_goes_to_matching_owner(self, ended_meeting, standup_notes):
        jobs = create_reminder_jobs(
            ended_meeting, extract_insights(standup_notes), "mom@example.com"
        )
        assert len(jobs) == 1
        job = jobs[0]
        assert job.type == JobType.ACTION_REMINDER_EMAIL
        assert job.payload.to == ["dev1@example.com"]
        assert job.payload.subject == "Reminder: Action Item from Standup"
        assert "Owner: Dev1" in job.payload.text
        assert job.next_attempt_at > utc_now() + timedelta(hours=23)

    def test_reminder_falls_back_to_attendees(self, ended_meeting):
        insights = Insights(action_items=[ActionItem(owner="Zed", item="call vendor")])
        jobs = create_reminder_jobs(ended_meeting, insights, "mom@example.com")
        assert jobs[0].payload.to == ["pm@example.com", "dev1@example.com"]

    def test_no_recipients_no_reminder(self):
        insights = Insights(action_items=[ActionItem(owner="Zed", item="call vendor")])
        assert create_reminder_jobs(Meeting(title="M"), insights, "mom@example.com") == []


class TestDeliveryQueue:
    def test_success_first_try(self, ended_meeting):
        sender = FakeSender()
        queue = _queue(sender)
        job = queue.enqueue(create_mom_email_job(ended_meeting, "mom@example.com"))

        processed = queue.process_next()

        assert processed is job
        assert job.status == JobStatus.SUCCEEDED
        assert job.attempts == 1
        assert len(sender.sent) == 1

    def test_transient_failure_retried(self, ended_meeting):
        sender = FakeSender(ConnectionError("smtp down"), TimeoutError("slow"))
        queue = _queue(sender)
        job = queue.enqueue(create_mom_email_job(ended_meeting, "mom@example.com"))

        queue.process_next()

        assert job.status == JobStatus.SUCCEEDED
        assert job.attempts == 3
        assert job.error is None

    def test_retries_exhausted(self, ended_meeting):
        sender = FakeSender(*(ConnectionError("smtp down") for _ in range(5)))
        queue = _queue(sender)
        job = queue.enqueue(
            create_mom_email_job(ended_meeting, "mom@example.com", max_retries=2)
        )

        queue.process_next()

        assert job.status == JobStatus.FAILED
        assert job.attempts == 2
        assert job.error == "smtp down"

    def test_non_retriable_fails_immediately(self, ended_meeting):
        sender = FakeSender(ValueError("bad address"))
        queue = _queue(sender)
        job = queue.enqueue(create_mom_email_job(ended_meeting, "mom@example.com"))

        queue.process_next()

        assert job.status == JobStatus.FAILED
        assert job.attempts == 1
        assert job.error == "bad address"

    def test_future_jobs_not_runnable(self, ended_meeting, standup_notes):
        queue = _queue(FakeSender())
        for job in create_reminder_jobs(
            ended_meeting, extract_insights(standup_notes), "mom@example.com"
        ):
            queue.enqueue(job)

        assert queue.process_next() is None

        later = DeliveryQueue(
            FakeSender(), wait_min=0, wait_max=0,
            clock=lambda: utc_now() + timedelta(days=2),
        )
        for job in queue.jobs:
            later.enqueue(job)
        assert [j.status for j in later.drain()] == [JobStatus.SUCCEEDED]

    def test_drain_processes_all(self, ended_meeting):
        queue = _queue(FakeSender())
        first = queue.enqueue(create_mom_email_job(ended_meeting, "a@example.com"))
        second = queue.enqueue(create_mom_email_job(ended_meeting, "b@example.com"))

        assert queue.drain() == [first, second]
        assert queue.get(first.id) is first
        assert queue.next_runnable() is None


class TestFromSettings:
    def test_backoff_bounds_from_settings(self, ended_meeting):
        settings = Settings(_env_file=None, email_retry_wait_min=0.5, email_retry_wait_max=0.5)
        queue = DeliveryQueue.from_settings(FakeSender(), settings)

        with patch(
            "momintel.delivery.queue.wait_exponential",
            wraps=tenacity.wait_exponential,
        ) as wait:
            job = queue.enqueue(create_mom_email_job(ended_meeting, "mom@example.com"))
            queue.process_next()

        assert job.status == JobStatus.SUCCEEDED
        wait.assert_called_once_with(multiplier=1, min=0.5, max=0.5)
