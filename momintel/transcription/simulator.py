"""Scheduled replay of preset transcript chunks.

A simulation is an APScheduler interval job that feeds one chunk per
tick through the regular chunk-ingestion path. Each simulation carries a
cancellation token that is checked under the meeting lock before any
work, so a tick that was already scheduled does nothing once the
simulation is cancelled.
"""

import threading
from collections.abc import Callable
from contextlib import AbstractContextManager
from datetime import UTC
from uuid import UUID

import structlog
from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.schedulers.base import BaseScheduler

from momintel.errors import SimulationRunningError

logger = structlog.get_logger()

# Returns False when the chunk could not be ingested (session gone).
ChunkIngest = Callable[[str], bool]
Guard = Callable[[], AbstractContextManager]


class TranscriptSimulation:
    """One cancellable replay of a chunk script for a meeting."""

    def __init__(
        self,
        meeting_id: UUID,
        chunks: list[str],
        ingest: ChunkIngest,
        guard: Guard,
        on_cancel: Callable[["TranscriptSimulation"], None] | None = None,
    ):
        """Initialize the simulation.

        Args:
            meeting_id: Meeting receiving the chunks
            chunks: Chunk texts to replay in order
            ingest: Callback running the normal chunk path for one text
            guard: Factory for the meeting's lock context
            on_cancel: Called once, when the simulation is cancelled
        """
        self.meeting_id = meeting_id
        self.job_id = f"transcript-simulation-{meeting_id}"
        self._chunks = list(chunks)
        self._ingest = ingest
        self._guard = guard
        self._on_cancel = on_cancel
        self._cursor = 0
        self._cancelled = threading.Event()
        self._cancel_lock = threading.Lock()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def delivered(self) -> int:
        """Number of chunks ingested so far."""
        return self._cursor

    @property
    def chunk_count(self) -> int:
        return len(self._chunks)

    def cancel(self) -> None:
        """Stop the simulation. Calling it again is a no-op."""
        with self._cancel_lock:
            if self._cancelled.is_set():
                return
            self._cancelled.set()
        logger.info(
            "transcript simulation stopped",
            meeting_id=str(self.meeting_id),
            delivered=self._cursor,
        )
        if self._on_cancel is not None:
            self._on_cancel(self)

    def tick(self) -> None:
        """Ingest the next chunk, cancelling when done or orphaned."""
        with self._guard():
            if self.cancelled:
                return
            if self._cursor >= len(self._chunks):
                self.cancel()
                return

            text = self._chunks[self._cursor]
            if not self._ingest(text):
                self.cancel()
                return
            self._cursor += 1
            logger.debug(
                "simulated chunk ingested",
                meeting_id=str(self.meeting_id),
                position=self._cursor,
            )

            if self._cursor >= len(self._chunks):
                self.cancel()


class SimulationRunner:
    """Owns the scheduler and at most one simulation per meeting."""

    def __init__(self, scheduler: BaseScheduler | None = None):
        self._scheduler = scheduler or BackgroundScheduler(timezone=UTC)
        self._simulations: dict[UUID, TranscriptSimulation] = {}
        self._lock = threading.Lock()

    def is_running(self, meeting_id: UUID) -> bool:
        with self._lock:
            simulation = self._simulations.get(meeting_id)
        return simulation is not None and not simulation.cancelled

    def start(
        self,
        meeting_id: UUID,
        chunks: list[str],
        ingest: ChunkIngest,
        guard: Guard,
        interval_ms: int,
    ) -> TranscriptSimulation:
        """Schedule a simulation for a meeting.

        Raises:
            SimulationRunningError: If one is already running for the meeting
        """
        with self._lock:
            current = self._simulations.get(meeting_id)
            if current is not None and not current.cancelled:
                raise SimulationRunningError(
                    "Simulation is already running for this meeting"
                )
            simulation = TranscriptSimulation(
                meeting_id, chunks, ingest, guard, on_cancel=self._discard
            )
            self._simulations[meeting_id] = simulation

        self._scheduler.add_job(
            simulation.tick,
            "interval",
            seconds=interval_ms / 1000,
            id=simulation.job_id,
            replace_existing=True,
            max_instances=1,
        )
        if not self._scheduler.running:
            self._scheduler.start()

        logger.info(
            "transcript simulation started",
            meeting_id=str(meeting_id),
            chunk_count=len(chunks),
            interval_ms=interval_ms,
        )
        return simulation

    def stop(self, meeting_id: UUID) -> bool:
        """Cancel the meeting's simulation, if any. Idempotent."""
        with self._lock:
            simulation = self._simulations.get(meeting_id)
        if simulation is None:
            return False
        simulation.cancel()
        return True

    def shutdown(self) -> None:
        with self._lock:
            simulations = list(self._simulations.values())
        for simulation in simulations:
            simulation.cancel()
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)

    def _discard(self, simulation: TranscriptSimulation) -> None:
        with self._lock:
            if self._simulations.get(simulation.meeting_id) is simulation:
                del self._simulations[simulation.meeting_id]
        try:
            self._scheduler.remove_job(simulation.job_id)
        except JobLookupError:
            pass
