"""Action item parsing: owner and due date detection."""

from datetime import datetime

from momintel.intelligence.date_normalizer import normalize_due_date
from momintel.intelligence.rules import (
    ACTION_PREFIX,
    DATE_LITERAL,
    DUE_DATE_KEYWORDS,
    OWNER_BY_LABEL,
    OWNER_BY_NAME,
    normalize,
)
from momintel.models.insights import ActionItem, ActionItemStatus
from momintel.models.note import DEFAULT_SPEAKER


def parse_owner(text: str, fallback_owner: str = DEFAULT_SPEAKER) -> str:
    """Find who owns the work described in ``text``.

    Checks, in order: a capitalized name followed by "will"/"to"
    ("Rahul will estimate"), an explicit "owner: <name>" label, then
    falls back to ``fallback_owner``.
    """
    match = OWNER_BY_NAME.match(text)
    if match:
        return match.group(1)

    match = OWNER_BY_LABEL.match(text)
    if match:
        return match.group(1).strip()

    return fallback_owner


def parse_due(text: str) -> str | None:
    """First due keyword in the text, else the first numeric date literal."""
    lower = text.lower()
    for keyword in DUE_DATE_KEYWORDS:
        if keyword in lower:
            return keyword

    match = DATE_LITERAL.match(text)
    if match:
        return match.group(0)
    return None


def parse_action_item(
    text: str,
    fallback_owner: str = DEFAULT_SPEAKER,
    meeting_start: datetime | None = None,
) -> ActionItem:
    """Build an ActionItem from a note's text.

    Args:
        text: Raw note text
        fallback_owner: Owner used when the text names nobody (usually the speaker)
        meeting_start: Reference for resolving ``due`` to a calendar date

    Returns:
        An open ActionItem with the "action:"/"todo:" label stripped
    """
    cleaned = normalize(text)
    due = parse_due(cleaned)
    due_date = normalize_due_date(due, meeting_start) if meeting_start else None

    return ActionItem(
        owner=parse_owner(cleaned, fallback_owner),
        item=ACTION_PREFIX.strip(cleaned),
        due=due,
        due_date=due_date,
        status=ActionItemStatus.OPEN,
    )
