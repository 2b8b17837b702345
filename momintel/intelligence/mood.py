"""Lexicon-based meeting mood classification."""

from collections.abc import Iterable

from momintel.intelligence.rules import (
    NEGATIVE_TERMS,
    NEUTRAL_TERMS,
    POSITIVE_TERMS,
    count_terms,
    normalize,
)
from momintel.models.analytics import MoodAssessment, MoodLabel
from momintel.models.note import Note

FALLBACK_CONFIDENCE = 0.5


def infer_mood(notes: Iterable[Note]) -> MoodAssessment:
    """Classify the overall mood of the notes.

    Each lexicon term found in a note counts once for that note; one note
    can feed several tallies. The strictly largest tally picks the label,
    ties resolve to Neutral.
    """
    positive = negative = neutral = 0

    for note in notes:
        text = normalize(note.text).lower()
        if not text:
            continue
        positive += count_terms(text, POSITIVE_TERMS)
        negative += count_terms(text, NEGATIVE_TERMS)
        neutral += count_terms(text, NEUTRAL_TERMS)

    total = positive + negative + neutral
    if total == 0:
        return MoodAssessment(
            label=MoodLabel.NEUTRAL,
            confidence=FALLBACK_CONFIDENCE,
            rationale="Insufficient sentiment cues in notes.",
        )

    top = max(positive, negative, neutral)
    if positive == top and positive > max(negative, neutral):
        label = MoodLabel.POSITIVE
    elif negative == top and negative > max(positive, neutral):
        label = MoodLabel.CONCERNED
    else:
        label = MoodLabel.NEUTRAL

    return MoodAssessment(
        label=label,
        confidence=round(top / total, 2),
        rationale=(
            f"Signals -> positive:{positive}, neutral:{neutral}, negative:{negative}"
        ),
    )
