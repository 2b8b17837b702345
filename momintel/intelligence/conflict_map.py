"""Stance conflict detection across participants."""

from collections.abc import Iterable

from momintel.intelligence.rules import (
    ACCEPT_TERMS,
    REJECT_TERMS,
    TOPIC_KEYWORD_LIMIT,
    TOPIC_MIN_LENGTH,
    count_terms,
    normalize,
    tokenize,
)
from momintel.models.analytics import Conflict, ConflictMap, ConflictSeverity, Stance
from momintel.models.note import DEFAULT_SPEAKER, Note

STANCES_PER_SIDE = 3
CONFLICT_LIMIT = 12
BASE_CONFIDENCE = 0.35
CONFIDENCE_STEP = 0.12
MAX_CONFIDENCE = 0.95


def detect_polarity(text: str) -> int:
    """+1 for net accept language, -1 for net reject language, 0 otherwise."""
    lower = normalize(text).lower()
    accept = count_terms(lower, ACCEPT_TERMS)
    reject = count_terms(lower, REJECT_TERMS)
    if accept == reject:
        return 0
    return 1 if accept > reject else -1


def extract_topics(text: str) -> list[str]:
    """Candidate topic keywords: long-enough tokens, first few only."""
    return [w for w in tokenize(text) if len(w) >= TOPIC_MIN_LENGTH][:TOPIC_KEYWORD_LIMIT]


def conflict_severity(count: int) -> ConflictSeverity:
    if count >= 4:
        return ConflictSeverity.HIGH
    if count >= 2:
        return ConflictSeverity.MEDIUM
    if count >= 1:
        return ConflictSeverity.LOW
    return ConflictSeverity.NONE


def build_conflict_map(notes: Iterable[Note]) -> ConflictMap:
    """Group polar notes by topic keyword and report contested topics.

    A topic is a conflict only when it has at least one accepting and one
    rejecting stance.
    """
    stances_by_topic: dict[str, list[Stance]] = {}

    for note in notes:
        text = normalize(note.text)
        if not text:
            continue
        polarity = detect_polarity(text)
        if polarity == 0:
            continue

        stance = Stance(
            polarity=polarity,
            speaker=note.speaker or DEFAULT_SPEAKER,
            text=text,
        )
        for topic in extract_topics(text):
            stances_by_topic.setdefault(topic, []).append(stance)

    conflicts: list[Conflict] = []
    for topic, stances in stances_by_topic.items():
        positive = [s for s in stances if s.polarity == 1]
        negative = [s for s in stances if s.polarity == -1]
        if not positive or not negative:
            continue
        conflicts.append(
            Conflict(
                topic=topic,
                positive=positive[:STANCES_PER_SIDE],
                negative=negative[:STANCES_PER_SIDE],
            )
        )

    count = len(conflicts)
    confidence = min(MAX_CONFIDENCE, BASE_CONFIDENCE + CONFIDENCE_STEP * count)

    return ConflictMap(
        severity=conflict_severity(count),
        conflict_count=count,
        confidence=round(confidence, 2),
        conflicts=conflicts[:CONFLICT_LIMIT],
    )
