"""Unit tests for export bundle construction."""

import pytest

from vidscribe.errors import EmptyExportError
from vidscribe.models.session import MediaArtifact
from vidscribe.models.transcript import TimedChunk
from vidscribe.services.export_service import build_export_bundle, SUBTITLE_MIME_TYPE
from vidscribe.subtitles.webvtt import parse_vtt


CHUNKS = [
    TimedChunk("chunk-0", "hello world", 0.0, 1.2),
    TimedChunk("chunk-1", "this is a test", 1.2, 3.5),
]


@pytest.mark.unit
class TestBuildExportBundle:
    """Test cases for build_export_bundle."""

    @pytest.mark.parametrize("mime_type, extension", [
        ("video/mp4", "mp4"),
        ("video/mp4;codecs=avc1", "mp4"),
        ("video/webm", "webm"),
        ("video/webm;codecs=vp9,opus", "webm"),
        ("video/x-matroska", "webm"),
    ])
    def test_media_extension(self, mime_type, extension):
        bundle = build_export_bundle(MediaArtifact(b"data", mime_type), CHUNKS)
        assert bundle.media_filename == f"recording.{extension}"
        assert bundle.media_mime_type == mime_type

    def test_subtitles_share_base_filename(self):
        bundle = build_export_bundle(MediaArtifact(b"data"), CHUNKS, "interview")
        assert bundle.media_filename == "interview.webm"
        assert bundle.subtitle_filename == "interview.vtt"
        assert bundle.subtitle_mime_type == SUBTITLE_MIME_TYPE == "text/vtt"

    def test_subtitle_text_has_one_cue_per_chunk(self):
        bundle = build_export_bundle(MediaArtifact(b"data"), CHUNKS)
        cues = parse_vtt(bundle.subtitle_text)
        assert bundle.cue_count == 2
        assert [cue.text for cue in cues] == ["hello world", "this is a test"]

    def test_empty_transcript_still_exports(self):
        bundle = build_export_bundle(MediaArtifact(b"data"), [])
        assert bundle.subtitle_text == "WEBVTT\n\n"
        assert bundle.cue_count == 0

    def test_missing_recording(self):
        with pytest.raises(EmptyExportError) as exc_info:
            build_export_bundle(None, CHUNKS)
        assert exc_info.value.user_message == "No recording found to download."
