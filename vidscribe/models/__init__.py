"""Data models for the vidscribe recorder."""

from .transcript import TimedChunk, TranscriptSnapshot, count_words
from .session import SessionState, MediaArtifact, DEFAULT_MIME_TYPE
from .events import (
    RecognitionSegment,
    RecognitionUpdate,
    RecognitionErrorEvent,
    MediaDataEvent,
    MediaStopEvent,
    MediaErrorEvent,
    SessionEvent,
)

__all__ = [
    "TimedChunk",
    "TranscriptSnapshot",
    "count_words",
    "SessionState",
    "MediaArtifact",
    "DEFAULT_MIME_TYPE",
    # Event payloads
    "RecognitionSegment",
    "RecognitionUpdate",
    "RecognitionErrorEvent",
    "MediaDataEvent",
    "MediaStopEvent",
    "MediaErrorEvent",
    "SessionEvent",
]
