"""Meeting repository with per-meeting serialized access.

The core never keeps a process-wide meeting registry; callers inject a
repository. Every mutation of a meeting happens inside ``locked()`` for
that meeting id, which serializes requests and background simulation
ticks touching the same meeting.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol
from uuid import UUID

from momintel.errors import MeetingNotFoundError
from momintel.models.meeting import Meeting


class MeetingRepository(Protocol):
    """Persistence boundary for the Meeting aggregate."""

    def get(self, meeting_id: UUID) -> Meeting | None: ...

    def save(self, meeting: Meeting) -> None: ...

    def list_meetings(self) -> list[Meeting]: ...

    def lock_for(self, meeting_id: UUID) -> threading.RLock: ...


class InMemoryMeetingRepository:
    """Process-local repository keyed by meeting id.

    Stores the live aggregates; ``save`` just (re)registers the object.
    """

    def __init__(self):
        self._meetings: dict[UUID, Meeting] = {}
        self._locks: dict[UUID, threading.RLock] = {}
        self._registry_lock = threading.Lock()

    def get(self, meeting_id: UUID) -> Meeting | None:
        return self._meetings.get(meeting_id)

    def save(self, meeting: Meeting) -> None:
        self._meetings[meeting.id] = meeting

    def list_meetings(self) -> list[Meeting]:
        return list(self._meetings.values())

    def lock_for(self, meeting_id: UUID) -> threading.RLock:
        with self._registry_lock:
            lock = self._locks.get(meeting_id)
            if lock is None:
                lock = self._locks[meeting_id] = threading.RLock()
            return lock


@contextmanager
def locked(repo: MeetingRepository, meeting_id: UUID) -> Iterator[Meeting]:
    """Hold the meeting's lock, yield the meeting, save it on clean exit.

    Raises:
        MeetingNotFoundError: If the repository has no such meeting
    """
    with repo.lock_for(meeting_id):
        meeting = repo.get(meeting_id)
        if meeting is None:
            raise MeetingNotFoundError(meeting_id)
        yield meeting
        repo.save(meeting)
