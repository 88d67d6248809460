"""Unit tests for TranscriptStore."""

import pytest

from vidscribe.models.transcript import TimedChunk, count_words


@pytest.mark.unit
class TestTranscriptStore:
    """Test cases for TranscriptStore."""

    def test_initially_empty(self, store):
        assert len(store) == 0
        assert store.chunks == ()
        assert store.interim_text == ""
        assert store.word_count == 0
        assert store.last_end_time == 0.0

    def test_append_tracks_word_count(self, store):
        store.append(TimedChunk("chunk-0", "hello world", 0.0, 1.0))
        store.append(TimedChunk("chunk-1", "  this   is a test ", 1.0, 2.0))

        assert len(store) == 2
        assert store.word_count == 6
        assert store.recompute_word_count() == 6
        assert store.last_end_time == 2.0

    def test_first_chunk_must_start_at_zero(self, store):
        with pytest.raises(ValueError):
            store.append(TimedChunk("chunk-0", "late", 0.5, 1.0))

    def test_rejects_gap(self, store):
        store.append(TimedChunk("chunk-0", "a", 0.0, 1.0))
        with pytest.raises(ValueError):
            store.append(TimedChunk("chunk-1", "b", 1.5, 2.0))
        assert len(store) == 1

    def test_rejects_overlap(self, store):
        store.append(TimedChunk("chunk-0", "a", 0.0, 1.0))
        with pytest.raises(ValueError):
            store.append(TimedChunk("chunk-1", "b", 0.5, 2.0))

    def test_rejects_negative_duration(self, store):
        with pytest.raises(ValueError):
            store.append(TimedChunk("chunk-0", "a", 0.0, -1.0))

    def test_rejects_duplicate_id(self, store):
        store.append(TimedChunk("chunk-0", "a", 0.0, 1.0))
        with pytest.raises(ValueError):
            store.append(TimedChunk("chunk-0", "b", 1.0, 2.0))

    def test_zero_duration_chunk_allowed(self, store):
        store.append(TimedChunk("chunk-0", "a", 0.0, 1.0))
        store.append(TimedChunk("chunk-1", "", 1.0, 1.0))
        assert store.last_end_time == 1.0
        assert store.word_count == 1

    def test_get_by_id(self, store):
        chunk = TimedChunk("chunk-0", "a", 0.0, 1.0)
        store.append(chunk)
        assert store.get("chunk-0") is chunk
        assert store.get("chunk-9") is None

    def test_chunks_view_is_a_copy(self, store):
        store.append(TimedChunk("chunk-0", "a", 0.0, 1.0))
        view = store.chunks
        store.append(TimedChunk("chunk-1", "b", 1.0, 2.0))
        assert len(view) == 1

    def test_interim_is_not_counted(self, store):
        store.set_interim("some words in flight")
        assert store.word_count == 0
        store.clear_interim()
        assert store.interim_text == ""

    def test_full_text_skips_empty_chunks(self, store):
        store.append(TimedChunk("chunk-0", "hello world", 0.0, 1.0))
        store.append(TimedChunk("chunk-1", "  ", 1.0, 1.0))
        store.append(TimedChunk("chunk-2", " again", 1.0, 2.0))
        assert store.full_text() == "hello world again"

    def test_snapshot(self, store):
        store.append(TimedChunk("chunk-0", "hello world", 0.0, 1.5))
        store.set_interim("more")
        snapshot = store.snapshot()

        assert snapshot.chunks == store.chunks
        assert snapshot.interim_text == "more"
        assert snapshot.word_count == 2
        assert snapshot.total_duration == 1.5

    def test_clear(self, store):
        store.append(TimedChunk("chunk-0", "hello world", 0.0, 1.0))
        store.set_interim("pending")
        store.clear()

        assert len(store) == 0
        assert store.interim_text == ""
        assert store.word_count == 0
        assert store.get("chunk-0") is None
        # Timeline restarts at zero
        store.append(TimedChunk("chunk-0", "again", 0.0, 1.0))


@pytest.mark.unit
class TestTimedChunk:
    """Test cases for the TimedChunk model."""

    def test_immutable(self):
        chunk = TimedChunk("chunk-0", "a", 0.0, 1.0)
        with pytest.raises(AttributeError):
            chunk.text = "b"

    def test_half_open_interval(self):
        chunk = TimedChunk("chunk-0", "a", 1.0, 2.0)
        assert chunk.contains(1.0)
        assert chunk.contains(1.999)
        assert not chunk.contains(2.0)
        assert not chunk.contains(0.999)
        assert chunk.duration == 1.0

    def test_zero_duration_contains_nothing(self):
        chunk = TimedChunk("chunk-0", "", 3.5, 3.5)
        assert not chunk.contains(3.5)

    @pytest.mark.parametrize("text, expected", [
        ("", 0),
        ("   ", 0),
        ("hello", 1),
        ("  hello   world  ", 2),
        ("tabs\tand\nnewlines", 3),
    ])
    def test_count_words(self, text, expected):
        assert count_words(text) == expected
        assert TimedChunk("chunk-0", text, 0.0, 0.0).word_count == expected
