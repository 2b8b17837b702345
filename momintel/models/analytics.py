"""Derived analytics records: mood, risk, conflicts, score, follow-ups."""

from enum import Enum

from pydantic import Field

from momintel.models.base import Record


class MoodLabel(str, Enum):
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    CONCERNED = "Concerned"


class MoodAssessment(Record):
    """Lexicon-based mood classification of a meeting."""

    label: MoodLabel
    confidence: float = Field(ge=0.0, le=1.0)
    rationale: str


class RiskSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskHit(Record):
    """One risk term found in one note."""

    term: str
    weight: int = Field(ge=1)
    note: str
    speaker: str


class RiskRadar(Record):
    """Weighted risk keyword scan over the note log."""

    score: int = Field(default=0, ge=0)
    severity: RiskSeverity = Field(default=RiskSeverity.LOW)
    hits: list[RiskHit] = Field(default_factory=list, max_length=25)


class ConflictSeverity(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Stance(Record):
    """A polarity-tagged assertion attributed to a speaker."""

    polarity: int = Field(description="+1 accept, -1 reject")
    speaker: str
    text: str


class Conflict(Record):
    """A topic on which participants hold opposing stances."""

    topic: str
    positive: list[Stance] = Field(default_factory=list, max_length=3)
    negative: list[Stance] = Field(default_factory=list, max_length=3)


class ConflictMap(Record):
    """All conflicting topics found in the note log."""

    severity: ConflictSeverity = Field(default=ConflictSeverity.NONE)
    conflict_count: int = Field(default=0, ge=0)
    confidence: float = Field(default=0.35, ge=0.0, le=0.95)
    conflicts: list[Conflict] = Field(default_factory=list, max_length=12)


class ScoreBand(str, Enum):
    NEEDS_WORK = "Needs Work"
    HEALTHY = "Healthy"
    HIGH_PERFORMANCE = "High Performance"


class ScoreFactors(Record):
    engagement: float = Field(ge=0.0, le=100.0)
    actionability: float = Field(ge=0.0, le=100.0)
    decisiveness: float = Field(ge=0.0, le=100.0)
    coverage: float = Field(ge=0.0, le=100.0)


class MeetingScore(Record):
    """Composite 0-100 meeting health metric."""

    score: float = Field(ge=0.0, le=100.0)
    band: ScoreBand
    factors: ScoreFactors


class FollowupDraft(Record):
    """A follow-up email draft for one attendee."""

    to: str
    subject: str
    body: str


class IntelligenceReport(Record):
    """Every derived analytic for a meeting, computed from one snapshot."""

    mood: MoodAssessment
    risk_radar: RiskRadar
    conflict_map: ConflictMap
    score: MeetingScore
    next_agenda: list[str] = Field(default_factory=list)
    followups: list[FollowupDraft] = Field(default_factory=list)
