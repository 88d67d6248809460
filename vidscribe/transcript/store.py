"""Append-only transcript store for one recording session."""

import logging
from typing import Iterator, List, Optional, Tuple

from ..models.transcript import TimedChunk, TranscriptSnapshot, count_words

logger = logging.getLogger(__name__)


class TranscriptStore:
    """Time-ordered chunks plus the in-flight interim text.

    Chunks must tile the timeline: the first starts at 0 and every chunk
    starts exactly where the previous one ended. Insertion order is
    chronological order; the sequence is never re-sorted.
    """

    def __init__(self):
        self._chunks: List[TimedChunk] = []
        self._index = {}
        self.interim_text: str = ""
        self.word_count: int = 0

    def __len__(self) -> int:
        return len(self._chunks)

    def __iter__(self) -> Iterator[TimedChunk]:
        return iter(tuple(self._chunks))

    @property
    def chunks(self) -> Tuple[TimedChunk, ...]:
        return tuple(self._chunks)

    @property
    def last_end_time(self) -> float:
        return self._chunks[-1].end_time if self._chunks else 0.0

    def append(self, chunk: TimedChunk) -> None:
        """Append a finalized chunk, enforcing the tiling invariant."""
        if chunk.end_time < chunk.start_time:
            raise ValueError(
                f"Chunk {chunk.chunk_id} ends before it starts "
                f"({chunk.start_time} > {chunk.end_time})")
        if chunk.start_time != self.last_end_time:
            raise ValueError(
                f"Chunk {chunk.chunk_id} starts at {chunk.start_time}, "
                f"expected {self.last_end_time}")
        if chunk.chunk_id in self._index:
            raise ValueError(f"Duplicate chunk id: {chunk.chunk_id}")

        self._chunks.append(chunk)
        self._index[chunk.chunk_id] = chunk
        self.word_count += chunk.word_count
        logger.debug(
            f"Appended {chunk.chunk_id} [{chunk.start_time:.3f}-{chunk.end_time:.3f}] "
            f"words={self.word_count}")

    def get(self, chunk_id: str) -> Optional[TimedChunk]:
        return self._index.get(chunk_id)

    def set_interim(self, text: str) -> None:
        self.interim_text = text

    def clear_interim(self) -> None:
        self.interim_text = ""

    def recompute_word_count(self) -> int:
        """Word count summed from scratch over all finalized chunks."""
        return sum(count_words(chunk.text) for chunk in self._chunks)

    def full_text(self) -> str:
        """Finalized text joined with single spaces, empty chunks skipped."""
        return " ".join(chunk.text.strip() for chunk in self._chunks if chunk.text.strip())

    def snapshot(self) -> TranscriptSnapshot:
        return TranscriptSnapshot(
            chunks=tuple(self._chunks),
            interim_text=self.interim_text,
            word_count=self.word_count,
        )

    def clear(self) -> None:
        """Discard every chunk and the interim text."""
        self._chunks.clear()
        self._index.clear()
        self.interim_text = ""
        self.word_count = 0
