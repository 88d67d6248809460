"""Turns recognition updates into timed transcript chunks.

The recognizer and the media recorder run on independent timelines. The
recognizer only says *when* it committed text, so each final segment is
stamped with the session clock at the moment it arrives and spans from the
end of the previous final to that instant. The resulting chunks tile the
recording with no gaps and no overlap.

Empty finals (text that is blank after trimming) still produce a chunk, so
every boundary is the end of one chunk and the start of the next.
"""

import logging
from typing import List

from ..models.events import RecognitionUpdate
from ..models.transcript import TimedChunk
from ..timeline.clock import SessionClock
from .store import TranscriptStore

logger = logging.getLogger(__name__)


class ChunkBuilder:
    """Stamps final recognition segments and appends them to the store."""

    def __init__(self, store: TranscriptStore, clock: SessionClock, id_prefix: str = "chunk"):
        """Initialize chunk builder.

        Args:
            store: Transcript store receiving the finalized chunks
            clock: Session clock anchored at recording start
            id_prefix: Prefix of generated chunk ids ("chunk-0", "chunk-1", ...)
        """
        self.store = store
        self.clock = clock
        self.id_prefix = id_prefix

        self.last_final_end_time: float = 0.0
        self.running_index: int = 0

    def process_update(self, update: RecognitionUpdate, accept_interim: bool = True) -> List[TimedChunk]:
        """Process one recognition update's segments in delivery order.

        Args:
            update: Recognition update with ordered interim/final segments
            accept_interim: When False, interim segments are ignored and the
                interim display is left cleared

        Returns:
            Chunks created by this update, in creation order
        """
        created: List[TimedChunk] = []
        interim = ""

        for segment in update.segments:
            if segment.is_final:
                created.append(self._finalize(segment.text))
            elif accept_interim:
                interim += segment.text

        # Interim output never accumulates across updates
        self.store.set_interim(interim)
        return created

    def _finalize(self, text: str) -> TimedChunk:
        end_time = max(self.clock.now(), self.last_final_end_time)
        chunk = TimedChunk(
            chunk_id=f"{self.id_prefix}-{self.running_index}",
            text=text,
            start_time=self.last_final_end_time,
            end_time=end_time,
        )
        self.store.append(chunk)

        self.last_final_end_time = end_time
        self.running_index += 1

        if not text.strip():
            logger.debug(f"Empty final kept as {chunk.chunk_id} to preserve tiling")
        else:
            logger.info(f"📝 FINAL {chunk.chunk_id} [{chunk.start_time:.2f}-{chunk.end_time:.2f}s]: '{text.strip()}'")
        return chunk

    def reset(self) -> None:
        """Zero the timeline boundary and the id counter."""
        self.last_final_end_time = 0.0
        self.running_index = 0
