"""Live transcription: sessions, chunk promotion and simulated feeds."""

from momintel.transcription.presets import DEFAULT_PRESET, get_preset_chunks
from momintel.transcription.session import (
    TranscriptFormat,
    add_chunk,
    build_transcript_text,
    create_session,
    export_transcript,
    should_capture_as_note,
    split_speaker_and_text,
    stop_session,
)
from momintel.transcription.simulator import SimulationRunner, TranscriptSimulation

__all__ = [
    "DEFAULT_PRESET",
    "SimulationRunner",
    "TranscriptFormat",
    "TranscriptSimulation",
    "add_chunk",
    "build_transcript_text",
    "create_session",
    "export_transcript",
    "get_preset_chunks",
    "should_capture_as_note",
    "split_speaker_and_text",
    "stop_session",
]
