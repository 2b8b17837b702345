"""Insight extraction: one linear pass over the note log.

Produces summary lines, agenda lines, decisions, action items and
per-speaker participation. The result is a pure function of the notes
(and the meeting start used to resolve due dates), so it can be
recomputed at any time.
"""

from collections.abc import Iterable
from datetime import datetime

from momintel.intelligence.action_parser import parse_action_item
from momintel.intelligence.rules import (
    ACTION_LABEL,
    AGENDA_LABEL,
    AGENDA_PREFIX,
    DECISION_LANGUAGE,
    OBLIGATION_LANGUAGE,
    normalize,
)
from momintel.models.insights import ActionItem, Insights, SpeakerStat
from momintel.models.note import DEFAULT_SPEAKER, Note

SUMMARY_CANDIDATES = 5
SUMMARY_LIMIT = 6
AGENDA_LIMIT = 6
DECISION_LIMIT = 8
ACTION_ITEM_LIMIT = 12


def dedup(items: Iterable[str], limit: int) -> list[str]:
    """Drop exact duplicates (first occurrence wins), then truncate."""
    return list(dict.fromkeys(items))[:limit]


def is_decision(text: str) -> bool:
    return DECISION_LANGUAGE.matches(text)


def is_action(text: str) -> bool:
    return ACTION_LABEL.matches(text) or OBLIGATION_LANGUAGE.matches(text)


def extract_insights(
    notes: Iterable[Note],
    meeting_start: datetime | None = None,
) -> Insights:
    """Extract insights from a note log snapshot.

    A note may land in several buckets at once; in particular a note can
    be both a decision and an action item.

    Args:
        notes: Notes in insertion order
        meeting_start: Reference for resolving action item due dates

    Returns:
        Insights with every list deduplicated and capped
    """
    summary: list[str] = []
    agenda: list[str] = []
    decisions: list[str] = []
    action_items: list[ActionItem] = []
    stats: dict[str, SpeakerStat] = {}

    for note in notes:
        speaker = note.speaker or DEFAULT_SPEAKER
        text = normalize(note.text)
        if not text:
            continue

        stat = stats.setdefault(speaker, SpeakerStat(speaker=speaker))
        stat.notes += 1
        stat.words += len(text.split(" "))

        line = f"{speaker}: {text}"
        if len(summary) < SUMMARY_CANDIDATES and line not in summary:
            summary.append(line)

        if AGENDA_LABEL.matches(text):
            agenda_line = AGENDA_PREFIX.strip(text)
            if agenda_line:
                agenda.append(agenda_line)

        if is_decision(text):
            decisions.append(line)

        if is_action(text) and len(action_items) < ACTION_ITEM_LIMIT:
            action_items.append(parse_action_item(text, speaker, meeting_start))

    speaker_stats = sorted(stats.values(), key=lambda s: s.notes, reverse=True)

    return Insights(
        summary=dedup(summary, SUMMARY_LIMIT),
        agenda=dedup(agenda, AGENDA_LIMIT),
        decisions=dedup(decisions, DECISION_LIMIT),
        action_items=action_items,
        speaker_stats=speaker_stats,
    )
