"""Abstract base class for speech recognition backends."""

from abc import ABC, abstractmethod
import logging

logger = logging.getLogger(__name__)


class AbstractRecognitionBackend(ABC):
    """Continuous speech recognizer driven by the recording session.

    Implementations deliver results asynchronously through a
    ``RecognitionPublisher``: ordered interim/final segments on
    ``recognition_update`` and error codes on ``recognition_error``. Content
    of a final segment is never re-emitted.
    """

    def __init__(self, language: str = "en-US", continuous: bool = True, interim_results: bool = True):
        """Initialize backend with recognition preferences."""
        self.language = language
        self.continuous = continuous
        self.interim_results = interim_results

    @abstractmethod
    def initialize(self) -> bool:
        """Initialize backend resources and verify the engine is available.

        Returns:
            True if initialization successful, False otherwise
        """
        pass

    @abstractmethod
    def start(self) -> None:
        """Begin recognizing; results arrive later as events."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop recognizing. Already-final results may still be delivered."""
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Clean up backend resources."""
        pass
