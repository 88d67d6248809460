"""Speech recognition collaborator boundary."""

from .base import AbstractRecognitionBackend
from .publisher import RecognitionPublisher

__all__ = [
    "AbstractRecognitionBackend",
    "RecognitionPublisher",
]
