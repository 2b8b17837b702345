"""MeetingService: the operations the meeting intelligence core exposes.

Every mutating operation runs while holding the meeting's repository
lock and saves the aggregate before releasing it. Reads take the same
lock, so a background simulation tick never lands halfway through a
render. Analytics are pure functions over a snapshot of the note log.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from uuid import UUID

import structlog
from pydantic import BaseModel, Field

from momintel.config import Settings, get_settings
from momintel.delivery.queue import (
    DeliveryQueue,
    EmailSender,
    create_mom_email_job,
    create_reminder_jobs,
)
from momintel.errors import (
    EmptyTextError,
    InvalidMeetingError,
    MeetingEndedError,
    MeetingNotFoundError,
    MomNotAvailableError,
    ShareNotFoundError,
    TranscriptionActiveError,
    TranscriptionInactiveError,
)
from momintel.intelligence import (
    build_conflict_map,
    build_followup_drafts,
    build_next_agenda,
    build_risk_radar,
    compute_meeting_score,
    extract_insights,
    infer_mood,
)
from momintel.meetings.attendance import attendance_summary, register_presence
from momintel.meetings.platform import (
    detect_platform,
    list_calendar_events,
    normalize_attendees,
    supported_platforms,
)
from momintel.models.analytics import IntelligenceReport
from momintel.models.attendance import AttendanceSummary, PresenceEvent
from momintel.models.base import utc_now
from momintel.models.calendar import CalendarEvent, PlatformInfo
from momintel.models.delivery import EmailJob
from momintel.models.insights import Insights
from momintel.models.meeting import Meeting
from momintel.models.mom_version import MomDiff, MomVersion
from momintel.models.note import DEFAULT_SPEAKER, Note, NoteSource
from momintel.models.share import MomShare, MomShareLink
from momintel.models.transcript import TranscriptChunk, TranscriptionSession
from momintel.output.renderer import MomRenderer
from momintel.output.schemas import MomContext
from momintel.output.versioning import VersionStore
from momintel.repositories.meeting_repo import (
    InMemoryMeetingRepository,
    MeetingRepository,
    locked,
)
from momintel.transcription.presets import get_preset_chunks
from momintel.transcription.session import (
    TranscriptFormat,
    add_chunk,
    create_session,
    export_transcript,
    should_capture_as_note,
    stop_session,
)
from momintel.transcription.simulator import SimulationRunner, TranscriptSimulation

logger = structlog.get_logger()

HOOK_SPEAKER = "BrowserHook"
TITLE_MAX_LENGTH = 500


class ChunkIngestResult(BaseModel):
    """A stored chunk and the note it was promoted to, if any."""

    chunk: TranscriptChunk
    auto_note: Note | None = None

    @property
    def auto_note_captured(self) -> bool:
        return self.auto_note is not None


class HookParticipant(BaseModel):
    name: str | None = None
    email: str | None = None
    action: str = "join"
    source: str = "browser_hook"


class HookCaption(BaseModel):
    speaker: str | None = None
    text: str | None = None


class HookIngestResult(BaseModel):
    participants_ingested: int = 0
    notes_ingested: int = 0
    attendance: AttendanceSummary = Field(default_factory=AttendanceSummary)


class EventStartResult(BaseModel):
    """A meeting started from a calendar event."""

    meeting: Meeting
    event: CalendarEvent
    selected_by_fallback: bool = False


class MeetingService:
    """Facade over notes, transcription, insights, MoM and delivery."""

    def __init__(
        self,
        repository: MeetingRepository | None = None,
        settings: Settings | None = None,
        renderer: MomRenderer | None = None,
        simulations: SimulationRunner | None = None,
        delivery: DeliveryQueue | None = None,
        sender: EmailSender | None = None,
    ):
        """Initialize the service.

        Args:
            repository: Meeting storage; in-memory when omitted
            settings: Configuration; environment settings when omitted
            renderer: MoM template renderer
            simulations: Runner for scheduled transcript simulations
            delivery: Email queue; jobs are only built, not queued, without one
            sender: Email sender; builds a queue from settings when no
                    delivery queue is given
        """
        self._repo = repository or InMemoryMeetingRepository()
        self._settings = settings or get_settings()
        self._renderer = renderer or MomRenderer()
        self._versions = VersionStore(self._settings.mom_version_limit)
        self._simulations = simulations or SimulationRunner()
        if delivery is None and sender is not None:
            delivery = DeliveryQueue.from_settings(sender, self._settings)
        self._delivery = delivery

    @property
    def delivery(self) -> DeliveryQueue | None:
        return self._delivery

    @contextmanager
    def _reading(self, meeting_id: UUID) -> Iterator[Meeting]:
        """Hold the meeting's lock for a read so ticks cannot interleave."""
        with self._repo.lock_for(meeting_id):
            yield self.get_meeting(meeting_id)

    # Meetings

    def create_meeting(
        self,
        title: str,
        attendees: list[str],
        meeting_link: str = "",
        platform: str | None = None,
        source: str = "manual",
    ) -> Meeting:
        """Register a new active meeting.

        Raises:
            InvalidMeetingError: If the title is blank or too long, or no
                attendee email is given
        """
        title = (title or "").strip()
        attendees = normalize_attendees(attendees or [])
        if not title or not attendees:
            raise InvalidMeetingError("title and attendees are required")
        if len(title) > TITLE_MAX_LENGTH:
            raise InvalidMeetingError(
                f"title must be at most {TITLE_MAX_LENGTH} characters"
            )

        meeting = Meeting(
            title=title,
            attendees=attendees,
            meeting_link=meeting_link or "",
            platform=platform or detect_platform(meeting_link),
            source=source,
        )
        self._repo.save(meeting)
        logger.info("meeting created", meeting_id=str(meeting.id), platform=meeting.platform)
        return meeting

    def get_meeting(self, meeting_id: UUID) -> Meeting:
        meeting = self._repo.get(meeting_id)
        if meeting is None:
            raise MeetingNotFoundError(meeting_id)
        return meeting

    # Calendar

    def platforms(self) -> list[PlatformInfo]:
        return supported_platforms()

    def calendar_events(
        self,
        platform: str,
        owner_email: str | None = None,
    ) -> list[CalendarEvent]:
        """Upcoming events on a platform calendar.

        Raises:
            UnsupportedPlatformError: If the platform is not supported
        """
        return list_calendar_events(platform, owner_email)

    def create_meeting_from_event(
        self,
        platform: str,
        event_id: str,
        owner_email: str | None = None,
    ) -> EventStartResult:
        """Start a meeting from a calendar event.

        An unknown event id falls back to the first listed event.

        Raises:
            UnsupportedPlatformError: If the platform is not supported
        """
        events = list_calendar_events(platform, owner_email)
        chosen = next((e for e in events if e.event_id == event_id), events[0])

        meeting = self.create_meeting(
            title=chosen.title,
            attendees=chosen.attendees,
            meeting_link=chosen.meeting_link,
            platform=platform,
            source="calendar",
        )
        return EventStartResult(
            meeting=meeting,
            event=chosen,
            selected_by_fallback=chosen.event_id != event_id,
        )

    def end_meeting(self, meeting_id: UUID) -> Meeting:
        """Close the meeting and produce its final MoM snapshot.

        Raises:
            MeetingEndedError: If the meeting already ended
        """
        with locked(self._repo, meeting_id) as meeting:
            if not meeting.is_active:
                raise MeetingEndedError("Meeting already ended")

            meeting.is_active = False
            meeting.ended_at = utc_now()
            if meeting.has_active_transcription:
                stop_session(meeting.transcription)
            self._simulations.stop(meeting.id)

            meeting.insights = self._extract(meeting)
            self._store_mom(meeting, reason="meeting_end")
            logger.info("meeting ended", meeting_id=str(meeting.id), notes=len(meeting.notes))
            return meeting

    # Note log

    def append_note(
        self,
        meeting_id: UUID,
        text: str,
        speaker: str | None = None,
    ) -> Note:
        """Append a manual note.

        Raises:
            MeetingEndedError: If the meeting no longer accepts notes
            EmptyTextError: If text is empty
        """
        with locked(self._repo, meeting_id) as meeting:
            if not meeting.is_active:
                raise MeetingEndedError("Meeting already ended")
            if not text or not text.strip():
                raise EmptyTextError("Note text is required")
            return self._append_note(meeting, text, speaker, NoteSource.MANUAL)

    def _append_note(
        self,
        meeting: Meeting,
        text: str,
        speaker: str | None,
        source: NoteSource,
        timestamp=None,
    ) -> Note:
        fields = {"text": text, "speaker": speaker or DEFAULT_SPEAKER, "source": source}
        if timestamp is not None:
            fields["timestamp"] = timestamp
        note = Note(**fields)
        meeting.notes.append(note)
        logger.debug(
            "note appended",
            meeting_id=str(meeting.id),
            speaker=note.speaker,
            source=note.source.value,
        )
        return note

    # Attendance

    def register_presence(
        self,
        meeting_id: UUID,
        name: str | None = None,
        email: str | None = None,
        action: str | None = None,
        source: str | None = None,
    ) -> PresenceEvent:
        """Record a join/leave.

        Raises:
            ValueError: If neither name nor email is given
        """
        if not (name or email):
            raise ValueError("name or email is required")
        with locked(self._repo, meeting_id) as meeting:
            return register_presence(meeting, name, email, action, source)

    def attendance(self, meeting_id: UUID) -> AttendanceSummary:
        with self._reading(meeting_id) as meeting:
            return attendance_summary(meeting)

    # Transcription

    def start_transcription(
        self,
        meeting_id: UUID,
        language: str | None = None,
        provider: str | None = None,
    ) -> TranscriptionSession:
        """Open a transcription session.

        Raises:
            TranscriptionActiveError: If a session is already active
        """
        with locked(self._repo, meeting_id) as meeting:
            if meeting.has_active_transcription:
                raise TranscriptionActiveError("Transcription already active")
            meeting.transcription = create_session(language, provider)
            logger.info(
                "transcription started",
                meeting_id=str(meeting.id),
                provider=meeting.transcription.provider,
            )
            return meeting.transcription

    def ingest_chunk(
        self,
        meeting_id: UUID,
        text: str,
        speaker: str | None = None,
        confidence: float | None = None,
        source: str | None = None,
    ) -> ChunkIngestResult:
        """Store a transcript chunk and promote it to a note when it qualifies.

        Raises:
            TranscriptionInactiveError: If no session is active
            EmptyTextError: If text is empty
        """
        with locked(self._repo, meeting_id) as meeting:
            if not meeting.has_active_transcription:
                raise TranscriptionInactiveError("Transcription is not active")
            if not text or not text.strip():
                raise EmptyTextError("text is required")
            return self._ingest_chunk(meeting, text, speaker, confidence, source)

    def _ingest_chunk(
        self,
        meeting: Meeting,
        text: str,
        speaker: str | None = None,
        confidence: float | None = None,
        source: str | None = None,
    ) -> ChunkIngestResult:
        chunk = add_chunk(meeting.transcription, text, speaker, confidence, source)

        auto_note = None
        if self._settings.auto_note_from_transcript and should_capture_as_note(chunk):
            auto_note = self._append_note(
                meeting,
                chunk.text,
                chunk.speaker,
                NoteSource.TRANSCRIPTION_AUTO,
                timestamp=chunk.timestamp,
            )

        logger.debug(
            "transcript chunk ingested",
            meeting_id=str(meeting.id),
            speaker=chunk.speaker,
            auto_note_captured=auto_note is not None,
        )
        return ChunkIngestResult(chunk=chunk, auto_note=auto_note)

    def stop_transcription(self, meeting_id: UUID) -> TranscriptionSession:
        """Stop the active session and any simulation feeding it.

        Raises:
            TranscriptionInactiveError: If no session is active
        """
        with locked(self._repo, meeting_id) as meeting:
            if not meeting.has_active_transcription:
                raise TranscriptionInactiveError("Transcription is not active")
            stop_session(meeting.transcription)
            self._simulations.stop(meeting.id)
            logger.info(
                "transcription stopped",
                meeting_id=str(meeting.id),
                chunks=meeting.transcription.chunk_count,
            )
            return meeting.transcription

    def start_simulation(
        self,
        meeting_id: UUID,
        preset: str | None = None,
        interval_ms: int | None = None,
    ) -> TranscriptSimulation:
        """Replay a preset chunk script into the active session.

        Raises:
            TranscriptionInactiveError: If no session is active
            SimulationRunningError: If a simulation is already running
        """
        chunks = get_preset_chunks(preset or self._settings.simulation_default_preset)

        def ingest(text: str) -> bool:
            meeting = self._repo.get(meeting_id)
            if meeting is None or not meeting.has_active_transcription:
                return False
            self._ingest_chunk(meeting, text, source="simulator")
            self._repo.save(meeting)
            return True

        with locked(self._repo, meeting_id) as meeting:
            if not meeting.has_active_transcription:
                raise TranscriptionInactiveError("Transcription is not active")
            return self._simulations.start(
                meeting.id,
                chunks,
                ingest,
                guard=lambda: self._repo.lock_for(meeting_id),
                interval_ms=interval_ms or self._settings.simulation_interval_ms,
            )

    def stop_simulation(self, meeting_id: UUID) -> bool:
        """Cancel a running simulation. Safe to call repeatedly."""
        with self._repo.lock_for(meeting_id):
            return self._simulations.stop(meeting_id)

    def export_transcript(
        self,
        meeting_id: UUID,
        format: TranscriptFormat | str = TranscriptFormat.TEXT,
    ) -> str | list[TranscriptChunk]:
        """Render the transcript as text or return its chunks.

        Raises:
            TranscriptionInactiveError: If the meeting never had a session
        """
        with self._reading(meeting_id) as meeting:
            if meeting.transcription is None:
                raise TranscriptionInactiveError("No transcription session for this meeting")
            return export_transcript(meeting.transcription, format)

    # External hooks

    def ingest_hook_context(
        self,
        meeting_id: UUID,
        participants: list[HookParticipant] | None = None,
        note: str | None = None,
        notes: list[str] | None = None,
        captions: list[HookCaption] | None = None,
    ) -> HookIngestResult:
        """Ingest participants and captions pushed by a browser hook."""
        participants = participants or []
        collected: list[tuple[str, str]] = []
        if note and note.strip():
            collected.append((HOOK_SPEAKER, note.strip()))
        for item in notes or []:
            if item and item.strip():
                collected.append((HOOK_SPEAKER, item.strip()))
        for caption in captions or []:
            if caption.text and caption.text.strip():
                collected.append((caption.speaker or DEFAULT_SPEAKER, caption.text.strip()))

        with locked(self._repo, meeting_id) as meeting:
            for participant in participants:
                register_presence(
                    meeting,
                    participant.name,
                    participant.email,
                    participant.action,
                    participant.source,
                )
            for speaker, text in collected:
                self._append_note(meeting, text, speaker, NoteSource.HOOK)

            logger.info(
                "hook context ingested",
                meeting_id=str(meeting.id),
                participants=len(participants),
                notes=len(collected),
            )
            return HookIngestResult(
                participants_ingested=len(participants),
                notes_ingested=len(collected),
                attendance=attendance_summary(meeting),
            )

    # Insights and analytics

    def compute_insights(self, meeting_id: UUID) -> Insights:
        """Recompute insights; an ended meeting also gets a fresh MoM."""
        with locked(self._repo, meeting_id) as meeting:
            meeting.insights = self._extract(meeting)
            if not meeting.is_active:
                self._store_mom(meeting, reason="insights_refresh")
            return meeting.insights

    def intelligence_report(self, meeting_id: UUID) -> IntelligenceReport:
        """All derived analytics for the current note log snapshot."""
        with self._reading(meeting_id) as meeting:
            insights = self._extract(meeting)
            mood = infer_mood(meeting.notes)
            return IntelligenceReport(
                mood=mood,
                risk_radar=build_risk_radar(meeting.notes),
                conflict_map=build_conflict_map(meeting.notes),
                score=compute_meeting_score(meeting, insights, mood),
                next_agenda=build_next_agenda(meeting, insights),
                followups=build_followup_drafts(meeting, insights),
            )

    def _extract(self, meeting: Meeting) -> Insights:
        return extract_insights(meeting.notes, meeting.started_at)

    # MoM and versions

    def synthesize_mom(self, meeting_id: UUID) -> str:
        """Render the MoM for the meeting's current state without storing it."""
        with self._reading(meeting_id) as meeting:
            return self._synthesize(meeting)

    def _synthesize(self, meeting: Meeting) -> str:
        insights = self._extract(meeting)
        context = MomContext.from_meeting(
            meeting,
            insights,
            infer_mood(meeting.notes),
            attendance_summary(meeting),
        )
        return self._renderer.render(context)

    def _store_mom(self, meeting: Meeting, reason: str) -> MomVersion:
        meeting.mom = self._synthesize(meeting)
        return self._versions.append(meeting, meeting.mom, reason)

    def regenerate_mom(self, meeting_id: UUID, reason: str = "regenerate") -> MomVersion:
        """Re-render the MoM, store it on the meeting and snapshot it."""
        with locked(self._repo, meeting_id) as meeting:
            return self._store_mom(meeting, reason)

    def append_version(
        self,
        meeting_id: UUID,
        text: str,
        reason: str = "update",
    ) -> MomVersion:
        """Snapshot text; a repeat of the latest version is not stored again."""
        with locked(self._repo, meeting_id) as meeting:
            return self._versions.append(meeting, text, reason)

    def list_versions(self, meeting_id: UUID) -> list[MomVersion]:
        with self._reading(meeting_id) as meeting:
            return list(meeting.mom_versions)

    def diff_versions(self, meeting_id: UUID, old_version_id, new_version_id) -> MomDiff:
        with self._reading(meeting_id) as meeting:
            return self._versions.diff(meeting, old_version_id, new_version_id)

    def compare_latest_versions(self, meeting_id: UUID) -> MomDiff:
        """Diff the two most recent snapshots.

        Raises:
            InsufficientVersionsError: With fewer than two stored versions
        """
        with self._reading(meeting_id) as meeting:
            return self._versions.compare_latest(meeting)

    # Sharing

    def share_mom(self, meeting_id: UUID, base_url: str | None = None) -> MomShareLink:
        """Mint (once) the read-only share token for the meeting's MoM.

        Repeated calls return the same token.

        Raises:
            MomNotAvailableError: If the meeting has no MoM yet
        """
        with locked(self._repo, meeting_id) as meeting:
            if not meeting.mom:
                raise MomNotAvailableError("End the meeting first to generate MoM")
            return self._share_link(self._ensure_share(meeting), base_url)

    def get_mom_share(self, meeting_id: UUID, base_url: str | None = None) -> MomShareLink:
        """The existing share link.

        Raises:
            ShareNotFoundError: If no share link was generated yet
        """
        with self._reading(meeting_id) as meeting:
            if meeting.mom_share is None:
                raise ShareNotFoundError("Share link not generated yet")
            return self._share_link(meeting.mom_share, base_url)

    def get_meeting_by_share_id(self, share_id: str) -> Meeting:
        """Resolve a shared MoM back to its meeting.

        Raises:
            ShareNotFoundError: If no meeting with a MoM has that share id
        """
        for meeting in self._repo.list_meetings():
            share = meeting.mom_share
            if share is not None and share.id == share_id and meeting.mom:
                return meeting
        raise ShareNotFoundError("MoM share link not found")

    def _ensure_share(self, meeting: Meeting) -> MomShare:
        if meeting.mom_share is None:
            meeting.mom_share = MomShare()
            logger.info(
                "mom share created",
                meeting_id=str(meeting.id),
                share_id=meeting.mom_share.id,
            )
        return meeting.mom_share

    def _share_link(self, share: MomShare, base_url: str | None) -> MomShareLink:
        return MomShareLink(
            id=share.id,
            created_at=share.created_at,
            url=share.url_for(base_url or self._settings.share_base_url),
        )

    # Delivery

    def queue_mom_email(
        self,
        meeting_id: UUID,
        from_email: str,
        base_url: str | None = None,
    ) -> EmailJob:
        """Build (and queue, when a delivery queue is configured) the MoM email.

        The email carries the meeting's share link, minted on first use.

        Raises:
            MomNotAvailableError: If the meeting has no MoM yet
        """
        with locked(self._repo, meeting_id) as meeting:
            if not meeting.mom:
                raise MomNotAvailableError("End the meeting first to generate MoM")
            link = self._share_link(self._ensure_share(meeting), base_url)
            job = create_mom_email_job(
                meeting,
                from_email,
                share_url=link.url,
                max_retries=self._settings.email_job_max_retries,
            )
        if self._delivery is not None:
            self._delivery.enqueue(job)
        return job

    def queue_action_reminders(
        self,
        meeting_id: UUID,
        from_email: str,
        days_ahead: int | None = None,
    ) -> list[EmailJob]:
        """Build (and queue) one reminder per action item."""
        with self._reading(meeting_id) as meeting:
            jobs = create_reminder_jobs(
                meeting,
                self._extract(meeting),
                from_email,
                days_ahead=(
                    self._settings.reminder_days_ahead if days_ahead is None else days_ahead
                ),
                max_retries=self._settings.email_job_max_retries,
            )
        if self._delivery is not None:
            for job in jobs:
                self._delivery.enqueue(job)
        return jobs

    def shutdown(self) -> None:
        """Cancel simulations and stop the scheduler."""
        self._simulations.shutdown()
