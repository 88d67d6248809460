"""Pytest configuration and fixtures for vidscribe tests."""

import pytest
import tempfile
import logging
from pathlib import Path
from unittest.mock import MagicMock
from pubsub import pub

from vidscribe.media.base import AbstractMediaBackend
from vidscribe.media.publisher import MediaPublisher
from vidscribe.models.events import SESSION_EVENT_TOPIC, TRANSCRIPT_CHANGED_TOPIC
from vidscribe.recognition.base import AbstractRecognitionBackend
from vidscribe.recognition.publisher import RecognitionPublisher
from vidscribe.services.recording_session import RecordingSession
from vidscribe.timeline.clock import SessionClock
from vidscribe.transcript.store import TranscriptStore


# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without collaborators")
    config.addinivalue_line("markers", "integration: tests wiring the full pipeline")


class FakeTimeSource:
    """Manually advanced monotonic time source."""

    def __init__(self, start: float = 0.0):
        self.current = start

    def __call__(self) -> float:
        return self.current

    def set(self, reading: float) -> None:
        self.current = reading

    def advance(self, seconds: float) -> None:
        self.current += seconds


class EventRecorder:
    """Collects session events and transcript snapshots from pub/sub."""

    def __init__(self):
        self.events = []
        self.snapshots = []
        pub.subscribe(self.on_event, SESSION_EVENT_TOPIC)
        pub.subscribe(self.on_snapshot, TRANSCRIPT_CHANGED_TOPIC)

    def on_event(self, event):
        self.events.append(event)

    def on_snapshot(self, snapshot):
        self.snapshots.append(snapshot)

    @property
    def event_types(self):
        return [event.event_type for event in self.events]


@pytest.fixture(autouse=True)
def reset_pubsub():
    """Drop every listener subscribed during a test."""
    yield
    pub.unsubAll()


@pytest.fixture
def temp_data_dir():
    """Create temporary directory for test data."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


@pytest.fixture
def fake_time():
    return FakeTimeSource()


@pytest.fixture
def clock(fake_time):
    """Session clock driven by the fake time source."""
    return SessionClock(time_source=fake_time)


@pytest.fixture
def store():
    return TranscriptStore()


@pytest.fixture
def mock_recognition_backend():
    """Mock recognition backend for testing without a speech engine."""
    mock = MagicMock(spec=AbstractRecognitionBackend)
    mock.initialize.return_value = True
    mock.start.return_value = None
    mock.stop.return_value = None
    mock.cleanup.return_value = None
    return mock


@pytest.fixture
def mock_media_backend():
    """Mock media backend for testing without camera or microphone."""
    mock = MagicMock(spec=AbstractMediaBackend)
    mock.mime_type = "video/webm"
    mock.acquire.return_value = None
    mock.start.return_value = None
    mock.stop.return_value = None
    mock.release.return_value = None
    return mock


@pytest.fixture
def session(mock_recognition_backend, mock_media_backend, clock):
    """Recording session wired to mock collaborators and the fake clock."""
    session = RecordingSession(
        recognition_backend=mock_recognition_backend,
        media_backend=mock_media_backend,
        clock=clock,
    )
    yield session
    session.shutdown()


@pytest.fixture
def recognition_publisher():
    return RecognitionPublisher()


@pytest.fixture
def media_publisher():
    return MediaPublisher()


@pytest.fixture
def event_recorder():
    return EventRecorder()


@pytest.fixture
def config_file(temp_data_dir):
    """Write a configuration file into the temporary directory."""
    def write(content: str) -> str:
        path = Path(temp_data_dir) / "vidscribe.yaml"
        path.write_text(content, encoding="utf-8")
        return str(path)

    return write
