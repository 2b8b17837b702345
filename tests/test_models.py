"""Tests for domain model validation."""

import pytest
from pydantic import ValidationError

from momintel.models import (
    ActionItem,
    Meeting,
    MomShare,
    MomVersion,
    Note,
    NoteSource,
    TranscriptChunk,
)


class TestNote:
    def test_defaults(self):
        note = Note(text="hello")
        assert note.speaker == "Participant"
        assert note.source == NoteSource.MANUAL
        assert note.timestamp.tzinfo is not None

    def test_frozen(self):
        note = Note(text="hello")
        with pytest.raises(ValidationError):
            note.text = "changed"


class TestTranscriptChunk:
    def test_confidence_bounds(self):
        with pytest.raises(ValidationError):
            TranscriptChunk(text="hi", confidence=1.5)


class TestMeeting:
    def test_title_required(self):
        with pytest.raises(ValidationError):
            Meeting(title="")

    def test_latest_version(self):
        meeting = Meeting(title="M")
        assert meeting.latest_version is None
        meeting.mom_versions.append(MomVersion(text="a"))
        assert meeting.latest_version.text == "a"

    def test_no_active_transcription_by_default(self):
        assert not Meeting(title="M").has_active_transcription


class TestMomVersion:
    def test_text_kept_verbatim(self):
        assert MomVersion(text="  padded\n").text == "  padded\n"


class TestActionItem:
    def test_open_by_default(self):
        assert ActionItem(owner="A", item="do it").is_open


class TestMomShare:
    def test_token_is_hex(self):
        share = MomShare()
        assert len(share.id) == 32
        int(share.id, 16)
        assert MomShare().id != share.id

    def test_url_strips_trailing_slash(self):
        share = MomShare(id="abc")
        assert share.url_for("https://mom.example.com/") == "https://mom.example.com/share/mom/abc"
        assert share.url_for("http://localhost:3000") == "http://localhost:3000/share/mom/abc"
