"""Error taxonomy for recording, recognition and export failures.

Every error carries a ``user_message`` suitable for the session status line.
Failures are terminal to the operation that raised them, never to the
session: the recorder always returns to an idle or stopped state.
"""

from enum import Enum
from typing import Optional


class VidscribeError(Exception):
    """Base class for all vidscribe errors."""

    default_message = "Unexpected error."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    @property
    def user_message(self) -> str:
        return str(self)


class AcquisitionFailure(Enum):
    """Why the camera/microphone stream could not be opened."""
    PERMISSION_DENIED = "permission_denied"
    DEVICE_NOT_FOUND = "device_not_found"
    GENERIC = "generic"


_ACQUISITION_MESSAGES = {
    AcquisitionFailure.PERMISSION_DENIED: "Camera/Mic access denied. Please allow it in your browser settings.",
    AcquisitionFailure.DEVICE_NOT_FOUND: "No camera or microphone found.",
    AcquisitionFailure.GENERIC: "Error: Could not access microphone or camera.",
}


class AcquisitionError(VidscribeError):
    """The media stream could not be acquired; recording never starts."""

    def __init__(self, kind: AcquisitionFailure = AcquisitionFailure.GENERIC, detail: Optional[str] = None):
        self.kind = kind
        self.detail = detail
        super().__init__(_ACQUISITION_MESSAGES[kind])


class RecognitionError(VidscribeError):
    """The speech recognition engine reported an error code."""

    def __init__(self, code: str, detail: Optional[str] = None):
        self.code = code
        self.detail = detail
        super().__init__(f"Speech error: {code}")


class MediaRecordingError(VidscribeError):
    """The media recorder failed mid-recording."""

    default_message = "Recording error."

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__()


class EmptyExportError(VidscribeError):
    """Export was requested before any recording exists."""

    default_message = "No recording found to download."


class SubtitleFormatError(VidscribeError):
    """A subtitle document could not be parsed."""
