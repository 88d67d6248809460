"""Abstract base class for camera/microphone media backends."""

from abc import ABC, abstractmethod
import logging

from ..models.session import DEFAULT_MIME_TYPE

logger = logging.getLogger(__name__)


class AbstractMediaBackend(ABC):
    """Captures and encodes the audio/video stream.

    Encoded payloads are delivered through a ``MediaPublisher`` while
    recording; ``stop()`` only signals the recorder, and the flush completes
    later with a ``media_stop`` event.
    """

    mime_type: str = DEFAULT_MIME_TYPE

    @abstractmethod
    def acquire(self) -> None:
        """Open the camera/microphone stream.

        Raises:
            AcquisitionError: Permission denied, no device, or other failure
        """
        pass

    @abstractmethod
    def start(self, recording_id: int) -> None:
        """Start encoding the acquired stream.

        Args:
            recording_id: Id to stamp on this take's media events, see
                ``MediaPublisher.begin``
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        """Ask the recorder to flush and stop."""
        pass

    @abstractmethod
    def release(self) -> None:
        """Stop all tracks of the acquired stream."""
        pass
