"""Record video with a live transcript and export it as WebVTT subtitles."""

from .models import TimedChunk, TranscriptSnapshot, SessionState, MediaArtifact
from .services import RecordingSession, ExportBundle, build_export_bundle
from .subtitles import format_time_vtt, generate_vtt, parse_vtt

__version__ = "0.1.0"

__all__ = [
    "TimedChunk",
    "TranscriptSnapshot",
    "SessionState",
    "MediaArtifact",
    "RecordingSession",
    "ExportBundle",
    "build_export_bundle",
    "format_time_vtt",
    "generate_vtt",
    "parse_vtt",
]
