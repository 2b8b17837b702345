"""Composite meeting health score."""

from momintel.models.analytics import (
    MeetingScore,
    MoodAssessment,
    MoodLabel,
    ScoreBand,
    ScoreFactors,
)
from momintel.models.insights import Insights
from momintel.models.meeting import Meeting

MOOD_WEIGHTS = {
    MoodLabel.POSITIVE: 1.0,
    MoodLabel.NEUTRAL: 0.85,
    MoodLabel.CONCERNED: 0.7,
}

FACTOR_WEIGHTS = {
    "engagement": 0.28,
    "actionability": 0.28,
    "decisiveness": 0.24,
    "coverage": 0.20,
}

HIGH_PERFORMANCE_THRESHOLD = 75
HEALTHY_THRESHOLD = 55


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def score_band(score: float) -> ScoreBand:
    if score >= HIGH_PERFORMANCE_THRESHOLD:
        return ScoreBand.HIGH_PERFORMANCE
    if score >= HEALTHY_THRESHOLD:
        return ScoreBand.HEALTHY
    return ScoreBand.NEEDS_WORK


def compute_meeting_score(
    meeting: Meeting,
    insights: Insights,
    mood: MoodAssessment,
) -> MeetingScore:
    """Combine participation, outcomes and mood into a 0-100 score.

    Factors:
    - engagement: distinct speakers, saturating at 5
    - actionability: action items per four notes
    - decisiveness: decisions per five notes
    - coverage: note volume, saturating at 20

    The weighted sum is scaled by the mood weight.
    """
    note_count = len(meeting.notes)

    factors = {
        "engagement": clamp(len(insights.speaker_stats) / 5 * 100),
        "actionability": clamp(
            len(insights.action_items) / max(1, note_count / 4) * 100
        ),
        "decisiveness": clamp(len(insights.decisions) / max(1, note_count / 5) * 100),
        "coverage": clamp(note_count / 20 * 100),
    }

    raw = sum(factors[name] * weight for name, weight in FACTOR_WEIGHTS.items())
    score = clamp(raw * MOOD_WEIGHTS[mood.label])

    return MeetingScore(
        score=round(score, 2),
        band=score_band(score),
        factors=ScoreFactors(**{name: round(v, 2) for name, v in factors.items()}),
    )
