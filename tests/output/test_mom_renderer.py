"""Tests for MoM rendering."""

from datetime import UTC, datetime

import pytest

from momintel.intelligence.insight_extractor import extract_insights
from momintel.intelligence.mood import infer_mood
from momintel.meetings.attendance import attendance_summary, register_presence
from momintel.models.insights import Insights
from momintel.models.meeting import Meeting
from momintel.output.renderer import MomRenderer, TemplateNotFound
from momintel.output.schemas import MomContext

SECTION_HEADERS = [
    "Minutes of Meeting",
    "Executive Summary:",
    "Agenda Highlights:",
    "Decisions:",
    "Action Items:",
    "Speaker Participation:",
    "Attendance Map:",
    "Discussion Notes:",
]


@pytest.fixture
def renderer():
    return MomRenderer()


def _render(renderer, meeting):
    insights = extract_insights(meeting.notes, meeting.started_at)
    context = MomContext.from_meeting(
        meeting, insights, infer_mood(meeting.notes), attendance_summary(meeting)
    )
    return renderer.render(context)


class TestEmptyMeeting:
    def test_placeholders(self, renderer):
        text = _render(renderer, Meeting(title="Kickoff"))

        assert "End: In progress" in text
        assert "Meeting Link: Not provided" in text
        assert "- No summary available." in text
        assert "- Agenda was not explicitly captured." in text
        assert "- No explicit decisions detected." in text
        assert "- No action items detected." in text
        assert "- No speaker stats available." in text
        assert "- No attendance events captured." in text
        assert "No notes captured." in text
        assert "Overall Meeting Mood: Neutral (confidence 0.5)" in text

    def test_section_order(self, renderer):
        text = _render(renderer, Meeting(title="Kickoff"))
        positions = [text.index(header) for header in SECTION_HEADERS]
        assert positions == sorted(positions)


class TestPopulatedMeeting:
    def test_sections_filled(self, renderer, standup_notes):
        meeting = Meeting(
            title="Standup",
            attendees=["pm@example.com"],
            meeting_link="https://zoom.us/j/1",
            notes=standup_notes,
            ended_at=datetime(2026, 1, 14, 11, 0, tzinfo=UTC),
        )
        register_presence(meeting, "Pat", "pm@example.com")
        text = _render(renderer, meeting)
        lines = text.splitlines()

        assert "End: 2026-01-14T11:00:00+00:00" in lines
        assert "Attendees: pm@example.com" in lines
        assert "- status updates" in lines
        assert "- Dev2: We decided to adopt the new auth flow" in lines
        assert (
            "- I will fix the login bug by Friday (Owner: Dev1, Due: friday, Status: open)"
            in lines
        )
        assert "- Dev1: 1 notes, 8 words" in lines
        assert "- Pat (pm@example.com): joins=1, leaves=0" in lines
        assert any(line.startswith("3. [") and line.endswith("Dev2: We decided to adopt the new auth flow") for line in lines)

    def test_rendering_is_deterministic(self, renderer, standup_notes):
        meeting = Meeting(title="Standup", notes=standup_notes)
        assert _render(renderer, meeting) == _render(renderer, meeting)


class TestTemplates:
    def test_missing_template(self, renderer):
        context = MomContext.from_meeting(
            Meeting(title="M"), Insights(), infer_mood([]), attendance_summary(Meeting(title="M"))
        )
        with pytest.raises(TemplateNotFound):
            renderer.render(context, template_name="nope")

    def test_custom_template_dir(self, tmp_path):
        (tmp_path / "brief.txt.j2").write_text("{{ title }}: {{ decisions | length }}")
        renderer = MomRenderer(template_dir=tmp_path)
        context = MomContext.from_meeting(
            Meeting(title="M"), Insights(), infer_mood([]), attendance_summary(Meeting(title="M"))
        )
        assert renderer.render(context, template_name="brief") == "M: 0"
