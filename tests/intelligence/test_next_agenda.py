"""Tests for next-agenda synthesis and follow-up drafts."""

from momintel.intelligence.followups import build_followup_drafts
from momintel.intelligence.insight_extractor import extract_insights
from momintel.intelligence.next_agenda import FALLBACK_ITEM, build_next_agenda, top_keywords
from momintel.models.insights import ActionItem, ActionItemStatus, Insights
from momintel.models.meeting import Meeting
from momintel.models.note import Note


class TestTopKeywords:
    def test_stopwords_and_short_tokens_skipped(self):
        notes = [Note(text="the API is ok"), Note(text="api rollout, api docs")]
        assert top_keywords(notes) == [("api", 3), ("rollout", 1), ("docs", 1)]


class TestBuildNextAgenda:
    def test_priority_order(self, standup_notes):
        meeting = Meeting(title="Standup", notes=standup_notes)
        agenda = build_next_agenda(meeting, extract_insights(standup_notes))

        assert agenda[0] == (
            "Action Follow-up: I will fix the login bug by Friday (Owner: Dev1)"
        )
        assert agenda[1] == (
            "Revisit decision impact: Dev2: We decided to adopt the new auth flow"
        )
        assert agenda[2] == 'Discuss "agenda" continuity'
        assert len(agenda) == 8

    def test_done_items_skipped(self):
        insights = Insights(
            action_items=[
                ActionItem(owner="A", item="closed", status=ActionItemStatus.DONE),
                ActionItem(owner="B", item="still open"),
            ]
        )
        agenda = build_next_agenda(Meeting(title="M"), insights)
        assert agenda == ["Action Follow-up: still open (Owner: B)"]

    def test_capped_and_deduplicated(self):
        insights = Insights(
            action_items=[ActionItem(owner="A", item=f"task {i % 11}") for i in range(12)]
        )
        agenda = build_next_agenda(Meeting(title="M"), insights)
        assert len(agenda) == 10
        assert len(set(agenda)) == 10

    def test_fallback_when_nothing_to_carry(self):
        assert build_next_agenda(Meeting(title="M"), Insights()) == [FALLBACK_ITEM]


class TestFollowupDrafts:
    def test_one_draft_per_attendee(self, standup_notes):
        meeting = Meeting(
            title="Standup",
            attendees=["pm@example.com", "dev1@example.com"],
            notes=standup_notes,
        )
        drafts = build_followup_drafts(meeting, extract_insights(standup_notes))

        assert [d.to for d in drafts] == ["pm@example.com", "dev1@example.com"]
        assert drafts[0].subject == "Follow-up: Standup"
        body = drafts[0].body.splitlines()
        assert body[0] == "Hi pm,"
        assert "Decisions (1):" in body
        assert "- I will fix the login bug by Friday (Owner: Dev1, Due: friday)" in body
        assert body[-1] == "MOM AI"

    def test_no_attendees_no_drafts(self):
        assert build_followup_drafts(Meeting(title="M"), Insights()) == []
