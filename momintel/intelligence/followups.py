"""Per-attendee follow-up email drafts."""

from momintel.models.analytics import FollowupDraft
from momintel.models.insights import Insights
from momintel.models.meeting import Meeting

DRAFT_DECISION_LIMIT = 3
DRAFT_ACTION_LIMIT = 4
SIGNATURE = "MOM AI"


def build_followup_drafts(meeting: Meeting, insights: Insights) -> list[FollowupDraft]:
    """One follow-up draft per invited attendee."""
    summary_line = (
        insights.summary[0] if insights.summary else "Discussion summary unavailable."
    )
    decisions = [f"- {d}" for d in insights.decisions[:DRAFT_DECISION_LIMIT]]
    actions = []
    for item in insights.action_items[:DRAFT_ACTION_LIMIT]:
        due = f", Due: {item.due}" if item.due else ""
        actions.append(f"- {item.item} (Owner: {item.owner}{due})")

    drafts = []
    for attendee in meeting.attendees:
        body = [
            f"Hi {attendee.split('@')[0]},",
            "",
            f'Quick follow-up from "{meeting.title}".',
            f"Top summary: {summary_line}",
            "",
            f"Decisions ({len(insights.decisions)}):",
            *decisions,
            "",
            f"Action items ({len(insights.action_items)}):",
            *actions,
            "",
            "Please reply with status updates before next sync.",
            "",
            "Regards,",
            SIGNATURE,
        ]
        drafts.append(
            FollowupDraft(
                to=attendee,
                subject=f"Follow-up: {meeting.title}",
                body="\n".join(body),
            )
        )
    return drafts
