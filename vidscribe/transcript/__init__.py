"""Transcript reconciliation: chunk building, storage and seeking."""

from .store import TranscriptStore
from .chunk_builder import ChunkBuilder
from .seek import SeekResolver

__all__ = [
    "TranscriptStore",
    "ChunkBuilder",
    "SeekResolver",
]
