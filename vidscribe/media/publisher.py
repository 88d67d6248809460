"""Media publisher module for pub/sub event publishing."""

import logging
from typing import Optional
from pubsub import pub

from ..models.events import (
    MediaDataEvent,
    MediaStopEvent,
    MediaErrorEvent,
    MEDIA_DATA_TOPIC,
    MEDIA_STOP_TOPIC,
    MEDIA_ERROR_TOPIC,
)

logger = logging.getLogger(__name__)


class MediaPublisher:
    """Publishes media recorder events using pubsub.pub.

    Every event is stamped with the id of the recording it belongs to, so a
    recorder still flushing a previous take cannot feed the current one.
    """

    def __init__(self):
        self.sequence_number = 0
        self.recording_id: Optional[int] = None
        logger.info(f"MediaPublisher initialized with topics: {MEDIA_DATA_TOPIC}, {MEDIA_STOP_TOPIC}, {MEDIA_ERROR_TOPIC}")

    def begin(self, recording_id: int) -> None:
        """Stamp subsequent events with a new recording id."""
        self.recording_id = recording_id
        self.sequence_number = 0
        logger.debug(f"MediaPublisher now publishing for recording {recording_id}")

    def publish_data(self, data: bytes) -> None:
        """Publish an encoded media payload."""
        event = MediaDataEvent(data=data, sequence_number=self.sequence_number,
                               recording_id=self.recording_id)
        self.sequence_number += 1
        pub.sendMessage(MEDIA_DATA_TOPIC, event=event)
        # logger.debug(f"Published media data: {event.sequence_number}")

    def publish_stop(self, mime_type: Optional[str] = None) -> None:
        """Publish the recorder's final flush."""
        pub.sendMessage(MEDIA_STOP_TOPIC, event=MediaStopEvent(mime_type=mime_type, recording_id=self.recording_id))
        self.sequence_number = 0
        logger.debug(f"Published media stop ({mime_type}) for recording {self.recording_id}")

    def publish_error(self, message: Optional[str] = None) -> None:
        """Publish a recorder failure."""
        pub.sendMessage(MEDIA_ERROR_TOPIC, event=MediaErrorEvent(message=message, recording_id=self.recording_id))
        logger.debug(f"Published media error: {message}")
