"""Transcription session operations.

Chunks are attributed to a speaker (an inline "Name: text" prefix wins
over the supplied speaker) and screened for promotion into the note log.
"""

from enum import Enum

from momintel.intelligence.rules import (
    PROMOTION_LANGUAGE,
    PROMOTION_MIN_LENGTH,
    SPEAKER_PREFIX,
)
from momintel.models.base import utc_now
from momintel.models.note import DEFAULT_SPEAKER
from momintel.models.transcript import (
    DEFAULT_CHUNK_CONFIDENCE,
    DEFAULT_CHUNK_SOURCE,
    DEFAULT_LANGUAGE,
    DEFAULT_PROVIDER,
    TranscriptChunk,
    TranscriptionSession,
)

EMPTY_TRANSCRIPT = "No transcript chunks captured."


class TranscriptFormat(str, Enum):
    TEXT = "text"
    STRUCTURED = "structured"


def create_session(
    language: str | None = None,
    provider: str | None = None,
) -> TranscriptionSession:
    return TranscriptionSession(
        language=language or DEFAULT_LANGUAGE,
        provider=provider or DEFAULT_PROVIDER,
    )


def split_speaker_and_text(
    raw_text: str | None,
    fallback_speaker: str = DEFAULT_SPEAKER,
) -> tuple[str, str]:
    """Split a "Speaker: text" caption into its parts.

    Returns:
        (speaker, text); the fallback speaker when no prefix is present
    """
    text = (raw_text or "").strip()
    match = SPEAKER_PREFIX.match(text)
    if not match:
        return fallback_speaker, text
    return match.group(1).strip() or fallback_speaker, match.group(2).strip()


def add_chunk(
    session: TranscriptionSession,
    text: str,
    speaker: str | None = None,
    confidence: float | None = None,
    source: str | None = None,
) -> TranscriptChunk:
    """Append a chunk to the session and return it."""
    chunk_speaker, chunk_text = split_speaker_and_text(text, speaker or DEFAULT_SPEAKER)
    chunk = TranscriptChunk(
        speaker=chunk_speaker,
        text=chunk_text,
        confidence=DEFAULT_CHUNK_CONFIDENCE if confidence is None else confidence,
        source=source or DEFAULT_CHUNK_SOURCE,
    )
    session.chunks.append(chunk)
    return chunk


def stop_session(session: TranscriptionSession) -> TranscriptionSession:
    session.is_active = False
    session.stopped_at = utc_now()
    return session


def should_capture_as_note(chunk: TranscriptChunk | None) -> bool:
    """Whether a chunk is substantive enough to become a note.

    Short chunks are ignored; longer ones qualify when they carry
    agenda, decision, action, deadline or ownership language.
    """
    if chunk is None or not chunk.text:
        return False
    if len(chunk.text) < PROMOTION_MIN_LENGTH:
        return False
    return PROMOTION_LANGUAGE.matches(chunk.text)


def build_transcript_text(session: TranscriptionSession | None) -> str:
    """Numbered plain-text rendering of the session's chunks."""
    if session is None or not session.chunks:
        return EMPTY_TRANSCRIPT

    return "\n".join(
        f"{index}. [{chunk.timestamp.isoformat()}] {chunk.speaker}: {chunk.text}"
        for index, chunk in enumerate(session.chunks, start=1)
    )


def export_transcript(
    session: TranscriptionSession,
    format: TranscriptFormat | str = TranscriptFormat.TEXT,
) -> str | list[TranscriptChunk]:
    """Render the transcript as text, or return the raw chunk list.

    Raises:
        ValueError: If format is unsupported
    """
    fmt = TranscriptFormat(format)
    if fmt is TranscriptFormat.STRUCTURED:
        return list(session.chunks)
    return build_transcript_text(session)
