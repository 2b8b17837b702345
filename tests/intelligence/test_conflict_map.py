"""Tests for the conflict mapper."""

from momintel.intelligence.conflict_map import (
    build_conflict_map,
    conflict_severity,
    detect_polarity,
    extract_topics,
)
from momintel.models.analytics import ConflictSeverity
from momintel.models.note import Note


class TestPolarity:
    def test_accept(self):
        assert detect_polarity("Let's proceed with the launch") == 1

    def test_reject_substring(self):
        # "blocked" contains "block"
        assert detect_polarity("The release is blocked") == -1

    def test_balanced_is_neutral(self):
        assert detect_polarity("approve the plan but rollback the flag") == 0

    def test_no_stance_language(self):
        assert detect_polarity("status update") == 0


class TestTopics:
    def test_short_words_dropped_and_punctuation_split(self):
        assert extract_topics("Adopt the feature-flags plan!") == ["adopt", "feature", "flags"]


class TestBuildConflictMap:
    def test_opposing_speakers_on_shared_topics(self):
        notes = [
            Note(speaker="Alice", text="We should adopt feature flags"),
            Note(speaker="Bob", text="Reject feature flags for now"),
        ]
        conflict_map = build_conflict_map(notes)

        assert [c.topic for c in conflict_map.conflicts] == ["feature", "flags"]
        assert conflict_map.conflict_count == 2
        assert conflict_map.severity == ConflictSeverity.MEDIUM
        assert conflict_map.confidence == 0.59

        conflict = conflict_map.conflicts[0]
        assert [s.speaker for s in conflict.positive] == ["Alice"]
        assert [s.speaker for s in conflict.negative] == ["Bob"]

    def test_only_positive_stances_never_conflict(self):
        notes = [
            Note(speaker="A", text="Approve the migration"),
            Note(speaker="B", text="Agreed, proceed with the migration"),
        ]
        conflict_map = build_conflict_map(notes)
        assert conflict_map.conflicts == []
        assert conflict_map.conflict_count == 0
        assert conflict_map.severity == ConflictSeverity.NONE
        assert conflict_map.confidence == 0.35

    def test_count_reported_before_cap(self):
        notes = []
        for i in range(15):
            notes.append(Note(speaker="A", text=f"adopt topic{i:02d}"))
            notes.append(Note(speaker="B", text=f"reject topic{i:02d}"))

        conflict_map = build_conflict_map(notes)
        assert conflict_map.conflict_count == 15
        assert len(conflict_map.conflicts) == 12
        assert conflict_map.confidence == 0.95
        assert conflict_map.severity == ConflictSeverity.HIGH

    def test_stances_per_side_capped(self):
        notes = [Note(speaker=f"P{i}", text="adopt pricing") for i in range(5)]
        notes.append(Note(speaker="N", text="reject pricing"))
        conflict = build_conflict_map(notes).conflicts[-1]
        assert conflict.topic == "pricing"
        assert len(conflict.positive) == 3


class TestSeverity:
    def test_thresholds(self):
        assert conflict_severity(0) == ConflictSeverity.NONE
        assert conflict_severity(1) == ConflictSeverity.LOW
        assert conflict_severity(3) == ConflictSeverity.MEDIUM
        assert conflict_severity(4) == ConflictSeverity.HIGH
