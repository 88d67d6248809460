"""Event models and topic names for the pub/sub recording pipeline."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Any, Dict, List
from pubsub import pub


# Topics published by the collaborators
RECOGNITION_UPDATE_TOPIC = "recognition_update"
RECOGNITION_ERROR_TOPIC = "recognition_error"
MEDIA_DATA_TOPIC = "media_data"
MEDIA_STOP_TOPIC = "media_stop"
MEDIA_ERROR_TOPIC = "media_error"

# Topics published by the recording session
TRANSCRIPT_CHANGED_TOPIC = "transcript_changed"
SESSION_EVENT_TOPIC = "session_event"


@dataclass
class RecognitionSegment:
    """One result segment of a recognition update."""
    text: str
    is_final: bool = False


@dataclass
class RecognitionUpdate:
    """Ordered result segments delivered by the recognizer in one callback."""
    segments: List[RecognitionSegment] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def has_final(self) -> bool:
        return any(segment.is_final for segment in self.segments)


@dataclass
class RecognitionErrorEvent:
    """Error signal from the recognition engine."""
    code: str  # "network", "no-speech", "not-allowed", ...
    message: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class MediaDataEvent:
    """Raw encoded media payload emitted while recording."""
    data: bytes
    sequence_number: int = 0
    recording_id: Optional[int] = None

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class MediaStopEvent:
    """The media recorder flushed its last data and stopped."""
    mime_type: Optional[str] = None
    recording_id: Optional[int] = None


@dataclass
class MediaErrorEvent:
    """The media recorder failed."""
    message: Optional[str] = None
    recording_id: Optional[int] = None


@dataclass
class SessionEvent:
    """Session lifecycle event."""
    event_id: str
    event_type: str  # "started", "stopped", "media_ready", "cleared", "error"
    timestamp: datetime = field(default_factory=datetime.now)
    metadata: Dict[str, Any] = field(default_factory=dict)


# Prototype listeners fixing each topic's message data specification, so
# messages can be sent before the first listener subscribes.
def _update_listener(update: RecognitionUpdate):
    pass


def _error_listener(error: RecognitionErrorEvent):
    pass


def _event_listener(event: Any):
    pass


def _snapshot_listener(snapshot: Any):
    pass


_TOPIC_PROTOTYPES = (
    (RECOGNITION_UPDATE_TOPIC, _update_listener),
    (RECOGNITION_ERROR_TOPIC, _error_listener),
    (MEDIA_DATA_TOPIC, _event_listener),
    (MEDIA_STOP_TOPIC, _event_listener),
    (MEDIA_ERROR_TOPIC, _event_listener),
    (TRANSCRIPT_CHANGED_TOPIC, _snapshot_listener),
    (SESSION_EVENT_TOPIC, _event_listener),
)


def define_topics() -> None:
    """Create every topic with its message data specification."""
    topic_mgr = pub.getDefaultTopicMgr()
    for topic_name, prototype in _TOPIC_PROTOTYPES:
        topic_mgr.getOrCreateTopic(topic_name, prototype)


define_topics()
