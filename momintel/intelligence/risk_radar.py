"""Weighted keyword scan for escalation-worthy language."""

from collections.abc import Iterable

from momintel.intelligence.rules import (
    RISK_HIGH_THRESHOLD,
    RISK_HIT_LIMIT,
    RISK_MEDIUM_THRESHOLD,
    RISK_TERMS,
    WeightedTerm,
    normalize,
)
from momintel.models.analytics import RiskHit, RiskRadar, RiskSeverity
from momintel.models.note import DEFAULT_SPEAKER, Note


def risk_severity(score: int) -> RiskSeverity:
    if score >= RISK_HIGH_THRESHOLD:
        return RiskSeverity.HIGH
    if score >= RISK_MEDIUM_THRESHOLD:
        return RiskSeverity.MEDIUM
    return RiskSeverity.LOW


def build_risk_radar(
    notes: Iterable[Note],
    terms: tuple[WeightedTerm, ...] = RISK_TERMS,
) -> RiskRadar:
    """Score risk language across the notes.

    Every term present in a note adds its weight once; distinct terms in
    the same note each count. Hits are kept in encounter order and capped,
    the score is not.
    """
    score = 0
    hits: list[RiskHit] = []

    for note in notes:
        text = normalize(note.text)
        if not text:
            continue
        lower = text.lower()

        for term in terms:
            if term.term not in lower:
                continue
            score += term.weight
            if len(hits) < RISK_HIT_LIMIT:
                hits.append(
                    RiskHit(
                        term=term.term,
                        weight=term.weight,
                        note=text,
                        speaker=note.speaker or DEFAULT_SPEAKER,
                    )
                )

    return RiskRadar(score=score, severity=risk_severity(score), hits=hits)
