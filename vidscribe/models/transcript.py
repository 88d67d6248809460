"""Transcript-related data models."""

from dataclasses import dataclass
from typing import Tuple


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens, ignoring empty ones."""
    return len(text.split())


@dataclass(frozen=True)
class TimedChunk:
    """One finalized span of transcript text on the recording timeline."""
    chunk_id: str
    text: str           # As delivered by the recognizer, untrimmed
    start_time: float   # Seconds from recording start
    end_time: float     # Seconds from recording start

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    @property
    def word_count(self) -> int:
        return count_words(self.text)

    def contains(self, time_seconds: float) -> bool:
        """Half-open interval test: [start_time, end_time)."""
        return self.start_time <= time_seconds < self.end_time


@dataclass(frozen=True)
class TranscriptSnapshot:
    """Point-in-time view of the transcript handed to observers."""
    chunks: Tuple[TimedChunk, ...] = ()
    interim_text: str = ""
    word_count: int = 0

    @property
    def total_duration(self) -> float:
        return self.chunks[-1].end_time if self.chunks else 0.0
