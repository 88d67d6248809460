"""Unit tests for SeekResolver."""

import pytest

from vidscribe.models.transcript import TimedChunk
from vidscribe.transcript.seek import SeekResolver


@pytest.fixture
def resolver(store):
    store.append(TimedChunk("chunk-0", "hello world", 0.0, 1.2))
    store.append(TimedChunk("chunk-1", "this is a test", 1.2, 3.5))
    store.append(TimedChunk("chunk-2", "", 3.5, 3.5))
    return SeekResolver(store)


@pytest.mark.unit
class TestSeekResolver:
    """Test cases for SeekResolver."""

    @pytest.mark.parametrize("time_seconds, expected", [
        (0.0, "chunk-0"),
        (0.6, "chunk-0"),
        (1.1999, "chunk-0"),
        (1.2, "chunk-1"),     # shared boundary goes to the later chunk
        (2.0, "chunk-1"),
        (3.4999, "chunk-1"),
        (3.5, None),          # zero-duration chunk and end of the timeline
        (10.0, None),
        (-0.1, None),
    ])
    def test_find_chunk_at(self, resolver, time_seconds, expected):
        assert resolver.find_chunk_at(time_seconds) == expected

    def test_later_chunk_wins_at_shared_boundary(self, store):
        store.append(TimedChunk("chunk-0", "hello world", 0.0, 1.2))
        store.append(TimedChunk("chunk-1", "this is a test", 1.2, 3.5))
        store.append(TimedChunk("chunk-2", "after", 3.5, 5.0))
        resolver = SeekResolver(store)

        assert resolver.find_chunk_at(3.5) == "chunk-2"
        assert resolver.find_chunk_at(5.0) is None

    def test_empty_store(self, store):
        resolver = SeekResolver(store)
        assert resolver.find_chunk_at(0.0) is None
        assert resolver.chunk_at(1.0) is None

    def test_chunk_at_returns_chunk(self, resolver):
        chunk = resolver.chunk_at(2.0)
        assert chunk.chunk_id == "chunk-1"
        assert chunk.text == "this is a test"

    def test_start_time_of(self, resolver):
        assert resolver.start_time_of("chunk-0") == 0.0
        assert resolver.start_time_of("chunk-1") == 1.2
        assert resolver.start_time_of("chunk-2") == 3.5

    def test_start_time_of_unknown_chunk(self, resolver):
        assert resolver.start_time_of("chunk-99") is None

    def test_sees_chunks_appended_later(self, store):
        resolver = SeekResolver(store)
        assert resolver.find_chunk_at(0.5) is None
        store.append(TimedChunk("chunk-0", "late", 0.0, 1.0))
        assert resolver.find_chunk_at(0.5) == "chunk-0"

    def test_every_position_maps_to_unique_covering_chunk(self, resolver, store):
        for step in range(0, 400):
            t = step * 0.01
            covering = [c.chunk_id for c in store.chunks if c.start_time <= t < c.end_time]
            expected = covering[0] if covering else None
            assert len(covering) <= 1
            assert resolver.find_chunk_at(t) == expected
