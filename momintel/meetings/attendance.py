"""Attendance tracking from join/leave presence events."""

from momintel.models.attendance import (
    AttendanceRecord,
    AttendanceSummary,
    PresenceAction,
    PresenceEvent,
)
from momintel.models.meeting import Meeting
from momintel.models.note import DEFAULT_SPEAKER


def normalize_email(value: str | None) -> str:
    return (value or "").strip().lower()


def normalize_name(value: str | None, fallback: str = DEFAULT_SPEAKER) -> str:
    return (value or "").strip() or fallback


def register_presence(
    meeting: Meeting,
    name: str | None = None,
    email: str | None = None,
    action: str | None = None,
    source: str | None = None,
) -> PresenceEvent:
    """Record a join or leave and update the attendance map.

    Anything other than "leave" counts as a join. Participants are keyed
    by email when known, else by lower-cased name. Emails not on the
    invite list are marked as discovered.
    """
    event = PresenceEvent(
        name=normalize_name(name),
        email=normalize_email(email),
        action=PresenceAction.LEAVE if action == "leave" else PresenceAction.JOIN,
        source=source or "manual",
    )
    meeting.presence_events.append(event)

    key = event.email or event.name.lower()
    record = meeting.attendance.get(key) or AttendanceRecord(name=event.name)
    record.name = event.name
    record.email = event.email or record.email
    record.discovered = record.discovered or bool(
        event.email and event.email not in meeting.attendees
    )

    if event.action is PresenceAction.JOIN:
        record.joins += 1
        if record.first_join_at is None:
            record.first_join_at = event.timestamp
    else:
        record.leaves += 1
        record.last_leave_at = event.timestamp

    meeting.attendance[key] = record

    if (
        event.email
        and event.email not in meeting.attendees
        and event.email not in meeting.discovered_attendees
    ):
        meeting.discovered_attendees.append(event.email)

    return event


def attendance_summary(meeting: Meeting) -> AttendanceSummary:
    """Participants sorted by name, plus discovered (uninvited) emails."""
    participants = sorted(meeting.attendance.values(), key=lambda p: p.name.lower())
    return AttendanceSummary(
        participant_count=len(participants),
        discovered_participant_count=len(meeting.discovered_attendees),
        discovered_participants=list(meeting.discovered_attendees),
        participants=participants,
    )
