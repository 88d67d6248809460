"""Pairs the recorded media with its WebVTT transcript for export."""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..errors import EmptyExportError
from ..models.session import MediaArtifact
from ..models.transcript import TimedChunk
from ..subtitles.webvtt import generate_vtt

logger = logging.getLogger(__name__)

SUBTITLE_MIME_TYPE = "text/vtt"


@dataclass(frozen=True)
class ExportBundle:
    """Media file and subtitle file sharing one base filename."""
    media_filename: str
    media_bytes: bytes
    media_mime_type: str
    subtitle_filename: str
    subtitle_text: str
    cue_count: int
    subtitle_mime_type: str = SUBTITLE_MIME_TYPE


def build_export_bundle(artifact: Optional[MediaArtifact],
                        chunks: Iterable[TimedChunk],
                        base_filename: str = "recording") -> ExportBundle:
    """Build the export bundle for a finished recording.

    Args:
        artifact: Recorded media, None if nothing was recorded
        chunks: Finalized transcript chunks in chronological order
        base_filename: File name shared by media and subtitles, without extension

    Returns:
        ExportBundle with ``<base>.mp4``/``<base>.webm`` and ``<base>.vtt``

    Raises:
        EmptyExportError: If there is no recording to export
    """
    if artifact is None:
        logger.error("Export requested without a recording")
        raise EmptyExportError()

    chunks = list(chunks)
    bundle = ExportBundle(
        media_filename=f"{base_filename}.{artifact.extension}",
        media_bytes=artifact.data,
        media_mime_type=artifact.mime_type,
        subtitle_filename=f"{base_filename}.vtt",
        subtitle_text=generate_vtt(chunks),
        cue_count=len(chunks),
    )
    logger.info(f"Built export bundle: {bundle.media_filename} ({artifact.size} bytes), "
                f"{bundle.subtitle_filename} ({bundle.cue_count} cues)")
    return bundle
