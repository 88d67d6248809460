"""Recognition publisher module for pub/sub event publishing."""

import logging
from typing import List, Optional, Tuple
from pubsub import pub

from ..models.events import (
    RecognitionSegment,
    RecognitionUpdate,
    RecognitionErrorEvent,
    RECOGNITION_UPDATE_TOPIC,
    RECOGNITION_ERROR_TOPIC,
)

logger = logging.getLogger(__name__)


class RecognitionPublisher:
    """Publishes recognition results and errors using pubsub.pub."""

    def __init__(self,
                 update_topic: str = RECOGNITION_UPDATE_TOPIC,
                 error_topic: str = RECOGNITION_ERROR_TOPIC):
        """Initialize recognition publisher.

        Args:
            update_topic: Pub/sub topic name for recognition updates
            error_topic: Pub/sub topic name for recognition errors
        """
        self.update_topic = update_topic
        self.error_topic = error_topic
        logger.info(f"RecognitionPublisher initialized with topics: {update_topic}, {error_topic}")

    def publish_update(self, update: RecognitionUpdate) -> None:
        """Publish a recognition update to the pub/sub topic."""
        pub.sendMessage(self.update_topic, update=update)
        logger.debug(f"Published recognition update with {len(update.segments)} segments")

    def publish_segments(self, segments: List[Tuple[str, bool]]) -> None:
        """Publish ``(text, is_final)`` pairs as one update."""
        self.publish_update(RecognitionUpdate(
            segments=[RecognitionSegment(text=text, is_final=is_final) for text, is_final in segments]))

    def publish_error(self, code: str, message: Optional[str] = None) -> None:
        """Publish an engine error code."""
        pub.sendMessage(self.error_topic, error=RecognitionErrorEvent(code=code, message=message))
        logger.debug(f"Published recognition error: {code}")
