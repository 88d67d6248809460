"""Session-related data models."""

from dataclasses import dataclass
from enum import Enum


class SessionState(Enum):
    """Lifecycle state of a recording session."""
    IDLE = "idle"
    RECORDING = "recording"
    STOPPED = "stopped"


DEFAULT_MIME_TYPE = "video/webm"


@dataclass(frozen=True)
class MediaArtifact:
    """Finished recording produced by the media collaborator."""
    data: bytes
    mime_type: str = DEFAULT_MIME_TYPE

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def extension(self) -> str:
        return "mp4" if "mp4" in self.mime_type else "webm"
