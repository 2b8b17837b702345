"""Pytest configuration and fixtures."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from apscheduler.schedulers.base import BaseScheduler

from momintel.config import Settings
from momintel.models.meeting import Meeting
from momintel.models.note import Note
from momintel.repositories.meeting_repo import InMemoryMeetingRepository
from momintel.services.meeting_service import MeetingService
from momintel.transcription.simulator import SimulationRunner

MEETING_START = datetime(2026, 1, 14, 10, 0, tzinfo=UTC)  # Wednesday


def _notes_from_lines(*lines: str) -> list[Note]:
    notes = []
    for line in lines:
        speaker, _, text = line.partition(": ")
        notes.append(Note(speaker=speaker, text=text))
    return notes


@pytest.fixture
def make_notes():
    """Build notes from "Speaker: text" lines."""
    return _notes_from_lines


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment, with no retry backoff."""
    return Settings(
        _env_file=None,
        email_retry_wait_min=0,
        email_retry_wait_max=0,
    )


@pytest.fixture
def scheduler() -> MagicMock:
    """Scheduler double; tests drive simulation ticks by hand."""
    mock = MagicMock(spec=BaseScheduler)
    mock.running = False
    return mock


@pytest.fixture
def repository() -> InMemoryMeetingRepository:
    return InMemoryMeetingRepository()


@pytest.fixture
def service(repository, settings, scheduler) -> MeetingService:
    return MeetingService(
        repository=repository,
        settings=settings,
        simulations=SimulationRunner(scheduler=scheduler),
    )


@pytest.fixture
def meeting(service) -> Meeting:
    """An active meeting with two invited attendees."""
    return service.create_meeting(
        title="Weekly Product Sync",
        attendees=["PM@example.com", "dev1@example.com "],
        meeting_link="https://meet.google.com/abc-defg-hij",
    )


@pytest.fixture
def standup_notes() -> list[Note]:
    return _notes_from_lines(
        "PM: Agenda: status updates",
        "Dev1: I will fix the login bug by Friday",
        "Dev2: We decided to adopt the new auth flow",
    )


@pytest.fixture
def meeting_start() -> datetime:
    return MEETING_START
