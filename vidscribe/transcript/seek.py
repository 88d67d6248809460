"""Maps playback positions onto transcript chunks and back."""

import logging
from typing import Optional

from ..models.transcript import TimedChunk
from .store import TranscriptStore

logger = logging.getLogger(__name__)


class SeekResolver:
    """Resolves playback time to the active chunk and chunk ids to seek targets."""

    def __init__(self, store: TranscriptStore):
        self.store = store

    def chunk_at(self, time_seconds: float) -> Optional[TimedChunk]:
        """Chunk whose half-open interval [start, end) contains the position.

        At a boundary shared by two chunks the later one wins; the end of
        the last chunk and zero-duration chunks belong to nothing.
        """
        for chunk in self.store:
            if chunk.contains(time_seconds):
                return chunk
        return None

    def find_chunk_at(self, time_seconds: float) -> Optional[str]:
        chunk = self.chunk_at(time_seconds)
        return chunk.chunk_id if chunk else None

    def start_time_of(self, chunk_id: str) -> Optional[float]:
        """Start time of a chunk for seek-on-click, None if unknown."""
        chunk = self.store.get(chunk_id)
        if chunk is None:
            logger.warning(f"Seek requested for unknown chunk: {chunk_id}")
            return None
        return chunk.start_time
