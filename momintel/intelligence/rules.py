"""Rule tables for the text classifiers.

Each classifier reads its vocabulary from here so the tables can be
swapped without touching control flow. Patterns are evaluated against
whitespace-normalized text.
"""

import re
from dataclasses import dataclass


def normalize(text: str | None) -> str:
    """Collapse runs of whitespace and trim."""
    return re.sub(r"\s+", " ", text or "").strip()


@dataclass(frozen=True)
class NamedRule:
    """A named regex rule returning a match and its captured groups."""

    name: str
    pattern: re.Pattern

    def match(self, text: str) -> re.Match | None:
        return self.pattern.search(text)

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def strip(self, text: str) -> str:
        """Remove the matched span (used for leading labels)."""
        return self.pattern.sub("", text, count=1)


@dataclass(frozen=True)
class WeightedTerm:
    term: str
    weight: int


# Insight extraction

AGENDA_LABEL = NamedRule("agenda_label", re.compile(r"^agenda[:\s-]", re.IGNORECASE))
AGENDA_PREFIX = NamedRule("agenda_prefix", re.compile(r"^agenda[:\s-]*", re.IGNORECASE))

DECISION_LANGUAGE = NamedRule(
    "decision_language",
    re.compile(r"(we (decided|agree)|decision|approved|finalized|go with)", re.IGNORECASE),
)

ACTION_LABEL = NamedRule("action_label", re.compile(r"^(action|todo)[:\s-]", re.IGNORECASE))
ACTION_PREFIX = NamedRule("action_prefix", re.compile(r"^(action|todo)[:\s-]*", re.IGNORECASE))

OBLIGATION_LANGUAGE = NamedRule(
    "obligation_language",
    re.compile(r"(follow up|will|needs to|should)", re.IGNORECASE),
)

# Action item parsing

OWNER_BY_NAME = NamedRule("owner_by_name", re.compile(r"\b([A-Z][a-z]+)\s+(will|to)\b"))
OWNER_BY_LABEL = NamedRule(
    "owner_by_label",
    re.compile(r"\bowner[:\s-]+([A-Za-z ]{2,40})", re.IGNORECASE),
)
DATE_LITERAL = NamedRule("date_literal", re.compile(r"\b\d{1,2}[/-]\d{1,2}([/-]\d{2,4})?\b"))

DUE_DATE_KEYWORDS = (
    "today",
    "tomorrow",
    "tonight",
    "eod",
    "this week",
    "next week",
    "friday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "saturday",
    "sunday",
)

# Transcript chunk promotion

PROMOTION_MIN_LENGTH = 18
PROMOTION_LANGUAGE = NamedRule(
    "promotion_language",
    re.compile(
        r"(agenda|decision|decide|action|todo|next step|deadline|follow up|owner)",
        re.IGNORECASE,
    ),
)
SPEAKER_PREFIX = NamedRule("speaker_prefix", re.compile(r"^([^:]{1,40}):\s*(.+)$", re.DOTALL))

# Mood lexicons

POSITIVE_TERMS = (
    "great",
    "good",
    "thanks",
    "approved",
    "resolved",
    "done",
    "clear",
    "aligned",
    "progress",
    "win",
    "happy",
)
NEGATIVE_TERMS = (
    "blocked",
    "delay",
    "risk",
    "issue",
    "problem",
    "conflict",
    "urgent",
    "escalate",
    "fail",
    "stuck",
    "concern",
)
NEUTRAL_TERMS = (
    "agenda",
    "update",
    "review",
    "discuss",
    "note",
    "sync",
    "plan",
    "timeline",
    "status",
)

# Risk radar

RISK_TERMS = (
    WeightedTerm("blocked", 3),
    WeightedTerm("delay", 3),
    WeightedTerm("risk", 2),
    WeightedTerm("urgent", 2),
    WeightedTerm("issue", 2),
    WeightedTerm("escalate", 3),
    WeightedTerm("problem", 2),
    WeightedTerm("stuck", 2),
    WeightedTerm("fail", 3),
)
RISK_HIGH_THRESHOLD = 10
RISK_MEDIUM_THRESHOLD = 5
RISK_HIT_LIMIT = 25

# Conflict mapper

ACCEPT_TERMS = (
    "approve",
    "agreed",
    "go with",
    "enable",
    "increase",
    "adopt",
    "accept",
    "proceed",
)
REJECT_TERMS = (
    "reject",
    "decline",
    "drop",
    "disable",
    "decrease",
    "avoid",
    "rollback",
    "block",
)
TOPIC_MIN_LENGTH = 5
TOPIC_KEYWORD_LIMIT = 10

# Keyword frequency

NON_ALNUM = re.compile(r"[^a-z0-9\s]")

STOPWORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "to", "of", "for", "in", "on", "at", "is",
        "are", "was", "were", "be", "been", "with", "by", "as", "it", "that",
        "this", "we", "you", "i", "they", "he", "she", "them", "our", "your",
        "from", "will", "would", "should", "could", "can", "do", "did", "does",
        "done", "not", "but", "if", "then", "so",
    }
)


def tokenize(text: str) -> list[str]:
    """Lower-case, replace non-alphanumerics with spaces, split on whitespace."""
    return NON_ALNUM.sub(" ", normalize(text).lower()).split()


def count_terms(text: str, terms: tuple[str, ...]) -> int:
    """Number of distinct terms that occur as substrings of ``text``."""
    return sum(1 for term in terms if term in text)
