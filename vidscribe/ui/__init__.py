"""Terminal UI."""

from .transcript_view import TranscriptView

__all__ = ["TranscriptView"]
