"""Deterministic rule-based classifiers over the meeting note log."""

from momintel.intelligence.action_parser import parse_action_item, parse_due, parse_owner
from momintel.intelligence.conflict_map import build_conflict_map, detect_polarity
from momintel.intelligence.followups import build_followup_drafts
from momintel.intelligence.insight_extractor import extract_insights
from momintel.intelligence.mood import infer_mood
from momintel.intelligence.next_agenda import build_next_agenda, top_keywords
from momintel.intelligence.risk_radar import build_risk_radar
from momintel.intelligence.scoring import compute_meeting_score

__all__ = [
    "build_conflict_map",
    "build_followup_drafts",
    "build_next_agenda",
    "build_risk_radar",
    "compute_meeting_score",
    "detect_polarity",
    "extract_insights",
    "infer_mood",
    "parse_action_item",
    "parse_due",
    "parse_owner",
    "top_keywords",
]
