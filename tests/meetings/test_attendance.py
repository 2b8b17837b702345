"""Tests for attendance tracking and platform detection."""

from datetime import datetime, timedelta, timezone

import pytest

from momintel.errors import UnsupportedPlatformError
from momintel.meetings.attendance import attendance_summary, register_presence
from momintel.meetings.platform import (
    detect_platform,
    list_calendar_events,
    normalize_attendees,
    supported_platforms,
)
from momintel.models.attendance import PresenceAction
from momintel.models.meeting import Meeting


@pytest.fixture
def invited():
    return Meeting(title="Sync", attendees=["pm@example.com"])


class TestRegisterPresence:
    def test_join_and_leave_counted(self, invited):
        register_presence(invited, "Pat", "PM@Example.com ")
        register_presence(invited, "Pat", "pm@example.com", action="leave")
        register_presence(invited, "Pat", "pm@example.com", action="join")

        record = invited.attendance["pm@example.com"]
        assert record.joins == 2
        assert record.leaves == 1
        assert record.first_join_at is not None
        assert record.last_leave_at is not None
        assert not record.discovered
        assert len(invited.presence_events) == 3

    def test_unknown_action_counts_as_join(self, invited):
        event = register_presence(invited, "Pat", "pm@example.com", action="wave")
        assert event.action == PresenceAction.JOIN

    def test_uninvited_email_discovered_once(self, invited):
        register_presence(invited, "Guest", "guest@example.com")
        register_presence(invited, "Guest", "guest@example.com")
        assert invited.discovered_attendees == ["guest@example.com"]
        assert invited.attendance["guest@example.com"].discovered

    def test_name_only_keyed_by_lowercase_name(self, invited):
        register_presence(invited, "Jordan", None)
        register_presence(invited, "jordan ", None, action="leave")
        record = invited.attendance["jordan"]
        assert record.joins == 1
        assert record.leaves == 1
        assert not record.discovered
        assert invited.discovered_attendees == []

    def test_missing_name_defaults(self, invited):
        event = register_presence(invited, None, "pm@example.com")
        assert event.name == "Participant"


class TestAttendanceSummary:
    def test_sorted_by_name(self, invited):
        register_presence(invited, "zoe", "z@example.com")
        register_presence(invited, "Adam", "a@example.com")
        register_presence(invited, "Pat", "pm@example.com")

        summary = attendance_summary(invited)
        assert [p.name for p in summary.participants] == ["Adam", "Pat", "zoe"]
        assert summary.participant_count == 3
        assert summary.discovered_participant_count == 2
        assert summary.discovered_participants == ["z@example.com", "a@example.com"]


class TestPlatform:
    @pytest.mark.parametrize(
        "link,expected",
        [
            ("https://meet.google.com/abc-defg-hij", "google_meet"),
            ("https://us02web.ZOOM.us/j/123", "zoom"),
            ("https://teams.microsoft.com/l/meetup-join/1", "microsoft_teams"),
            ("https://example.com/room", "manual"),
            (None, "manual"),
        ],
    )
    def test_detect(self, link, expected):
        assert detect_platform(link) == expected

    def test_normalize_attendees(self):
        assert normalize_attendees([" A@X.com", "", "  ", "b@x.com"]) == ["a@x.com", "b@x.com"]

    def test_supported_platforms(self):
        platforms = supported_platforms()
        assert [p.id for p in platforms] == ["google_meet", "zoom", "microsoft_teams", "manual"]
        assert all(p.label for p in platforms)


class TestCalendarEvents:
    """The demo calendar catalog used to start meetings from events."""

    def test_events_carry_platform_link(self):
        now = datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc)
        events = list_calendar_events("zoom", "lead@example.com", now=now)

        assert [e.event_id for e in events] == ["zoom-weekly-product-sync", "zoom-customer-review"]
        assert {e.meeting_link for e in events} == {"https://zoom.us/j/1234567890"}
        assert {e.owner_email for e in events} == {"lead@example.com"}
        assert events[0].starts_at == now + timedelta(minutes=5)

    def test_ids_stable_across_calls(self):
        assert [e.event_id for e in list_calendar_events("manual")] == [
            e.event_id for e in list_calendar_events("manual")
        ]

    def test_manual_has_no_link(self):
        events = list_calendar_events("manual")
        assert all(e.meeting_link == "" for e in events)
        assert events[0].owner_email == "owner@example.com"

    def test_unsupported_platform(self):
        with pytest.raises(UnsupportedPlatformError):
            list_calendar_events("webex")
