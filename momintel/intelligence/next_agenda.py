"""Next-meeting agenda synthesis."""

from collections import Counter
from collections.abc import Iterable

from momintel.intelligence.rules import STOPWORDS, tokenize
from momintel.models.insights import Insights
from momintel.models.meeting import Meeting
from momintel.models.note import Note

AGENDA_LIMIT = 10
DECISION_POOL_LIMIT = 4
DEFAULT_KEYWORD_LIMIT = 6
KEYWORD_MIN_LENGTH = 3
FALLBACK_ITEM = (
    "Review key outcomes from previous meeting and define next action owners."
)


def top_keywords(notes: Iterable[Note], limit: int = 20) -> list[tuple[str, int]]:
    """Most frequent non-stopword tokens, ties kept in first-seen order."""
    counts: Counter[str] = Counter()
    for note in notes:
        for word in tokenize(note.text):
            if len(word) < KEYWORD_MIN_LENGTH or word in STOPWORDS:
                continue
            counts[word] += 1
    # Counter.most_common is stable for equal counts.
    return counts.most_common(limit)


def build_next_agenda(
    meeting: Meeting,
    insights: Insights,
    keyword_limit: int = DEFAULT_KEYWORD_LIMIT,
) -> list[str]:
    """Draft the follow-up meeting agenda.

    Pools, in priority order: open action items, the first few decisions,
    then frequent keywords. Duplicates are skipped and the agenda stops at
    AGENDA_LIMIT lines.
    """
    pools = [
        [
            f"Action Follow-up: {item.item} (Owner: {item.owner})"
            for item in insights.action_items
            if item.is_open
        ],
        [
            f"Revisit decision impact: {decision}"
            for decision in insights.decisions[:DECISION_POOL_LIMIT]
        ],
        [
            f'Discuss "{word}" continuity'
            for word, _ in top_keywords(meeting.notes, keyword_limit)
        ],
    ]

    agenda: list[str] = []
    for pool in pools:
        for line in pool:
            if len(agenda) >= AGENDA_LIMIT:
                break
            if line not in agenda:
                agenda.append(line)

    return agenda or [FALLBACK_ITEM]
