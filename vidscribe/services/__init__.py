"""Services layer for vidscribe session logic."""

from .recording_session import RecordingSession
from .export_service import ExportBundle, build_export_bundle

__all__ = [
    "RecordingSession",
    "ExportBundle",
    "build_export_bundle"
]
