"""Recording session that reconciles media and recognition timelines."""

import uuid
import logging
import threading
from datetime import datetime
from typing import Optional, Dict, Any, Tuple
from pubsub import pub

from ..errors import (
    VidscribeError,
    AcquisitionError,
    RecognitionError,
    MediaRecordingError,
)
from ..media.assembler import MediaAssembler
from ..media.base import AbstractMediaBackend
from ..models.events import (
    RecognitionUpdate,
    RecognitionErrorEvent,
    MediaDataEvent,
    MediaStopEvent,
    MediaErrorEvent,
    SessionEvent,
    RECOGNITION_UPDATE_TOPIC,
    RECOGNITION_ERROR_TOPIC,
    MEDIA_DATA_TOPIC,
    MEDIA_STOP_TOPIC,
    MEDIA_ERROR_TOPIC,
    TRANSCRIPT_CHANGED_TOPIC,
    SESSION_EVENT_TOPIC,
)
from ..models.session import SessionState, MediaArtifact
from ..models.transcript import TimedChunk, TranscriptSnapshot
from ..recognition.base import AbstractRecognitionBackend
from ..timeline.clock import SessionClock
from ..transcript.chunk_builder import ChunkBuilder
from ..transcript.seek import SeekResolver
from ..transcript.store import TranscriptStore
from .export_service import ExportBundle, build_export_bundle

logger = logging.getLogger(__name__)


IDLE_STATUS = "Click 'Start Recording' to begin."
RECORDING_STATUS = "Recording... Speak now."
PROCESSING_STATUS = "Processing recording..."
STOPPED_STATUS = "Recording stopped. Ready to play or re-record."


class RecordingSession:
    """Owns the transcript of one recording and drives its lifecycle.

    States: IDLE -> RECORDING -> STOPPED, with ``clear()`` returning any
    state to IDLE. Recognition and media events arrive on pub/sub topics and
    may interleave arbitrarily; every handler runs under one re-entrant lock
    so the transcript and the chunk builder counters are only mutated in
    event-arrival order.
    """

    def __init__(self,
                 recognition_backend: AbstractRecognitionBackend,
                 media_backend: AbstractMediaBackend,
                 clock: Optional[SessionClock] = None,
                 default_mime_type: Optional[str] = None):
        """Initialize recording session.

        Args:
            recognition_backend: Speech recognizer publishing on recognition_* topics
            media_backend: Media recorder publishing on media_* topics
            clock: Session clock, a monotonic one is created if omitted
            default_mime_type: MIME type used when the recorder reports none
        """
        self.recognition_backend = recognition_backend
        self.media_backend = media_backend

        self.clock = clock or SessionClock()
        self.store = TranscriptStore()
        self.builder = ChunkBuilder(self.store, self.clock)
        self.seek = SeekResolver(self.store)
        self.assembler = MediaAssembler(default_mime_type or media_backend.mime_type)

        # Session state
        self.state = SessionState.IDLE
        self.artifact: Optional[MediaArtifact] = None
        self.status_message = IDLE_STATUS
        self.last_error: Optional[VidscribeError] = None
        self.stream_held = False
        self.media_failed = False
        # Media events stamped with another id belong to an earlier take
        self.recording_id = 0

        # Thread safety
        self.lock = threading.RLock()

        self._subscriptions = (
            (self._on_recognition_update, RECOGNITION_UPDATE_TOPIC),
            (self._on_recognition_error, RECOGNITION_ERROR_TOPIC),
            (self._on_media_data, MEDIA_DATA_TOPIC),
            (self._on_media_stop, MEDIA_STOP_TOPIC),
            (self._on_media_error, MEDIA_ERROR_TOPIC),
        )
        for listener, topic in self._subscriptions:
            pub.subscribe(listener, topic)

        logger.info("RecordingSession initialized - subscribed to recognition and media topics")

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def is_recording(self) -> bool:
        return self.state is SessionState.RECORDING

    @property
    def chunks(self) -> Tuple[TimedChunk, ...]:
        return self.store.chunks

    @property
    def interim_text(self) -> str:
        return self.store.interim_text

    @property
    def word_count(self) -> int:
        return self.store.word_count

    def snapshot(self) -> TranscriptSnapshot:
        with self.lock:
            return self.store.snapshot()

    def find_chunk_at(self, time_seconds: float) -> Optional[str]:
        with self.lock:
            return self.seek.find_chunk_at(time_seconds)

    def start_time_of(self, chunk_id: str) -> Optional[float]:
        with self.lock:
            return self.seek.start_time_of(chunk_id)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> Dict[str, Any]:
        """Acquire the media stream and start a fresh recording.

        Returns:
            Result dictionary with success status and details
        """
        with self.lock:
            if self.is_recording:
                logger.warning("Recording already in progress")
                return {
                    "success": False,
                    "error": "Already recording",
                }

            # A previous take still flushing gives up its stream before a new one is opened
            self._release_stream()

            try:
                self.media_backend.acquire()
            except AcquisitionError as e:
                logger.error(f"Error acquiring media stream: {e.kind.value} ({e.detail})")
                self._report_error(e, source="acquisition")
                return {
                    "success": False,
                    "error": e.user_message,
                }

            self.clear(is_restarting=True)
            self.stream_held = True
            self.recording_id += 1

            try:
                self.state = SessionState.RECORDING
                self.status_message = RECORDING_STATUS
                self.clock.start()
                self.media_backend.start(self.recording_id)
                self.recognition_backend.start()
            except Exception as e:
                logger.error(f"Error starting recording: {e}")
                self._halt_collaborators()
                self._release_stream()
                self.clock.reset()
                self.state = SessionState.IDLE
                self._report_error(MediaRecordingError(str(e)), source="start")
                return {
                    "success": False,
                    "error": str(e),
                }

            logger.info("Started recording")
            self._publish_event("started")
            return {
                "success": True,
                "started_at": datetime.now().isoformat(),
            }

    def stop(self) -> Dict[str, Any]:
        """Stop recording; the media artifact arrives with the media stop event.

        Returns:
            Result dictionary with transcript statistics
        """
        with self.lock:
            if not self.is_recording:
                logger.warning("No recording in progress")
                return {
                    "success": False,
                    "error": "Not recording",
                }

            duration = self.clock.now()
            self._halt_collaborators()
            self.state = SessionState.STOPPED
            self.store.clear_interim()
            self.status_message = PROCESSING_STATUS

            logger.info(f"Recording stopped after {duration:.2f}s: "
                        f"{len(self.store)} chunks, {self.store.word_count} words, "
                        f"{self.assembler.buffered_bytes} media bytes buffered")
            self._publish_event("stopped")
            self._publish_snapshot()
            return {
                "success": True,
                "stopped_at": datetime.now().isoformat(),
                "duration_seconds": duration,
                "total_chunks": len(self.store),
                "word_count": self.store.word_count,
                "buffered_media_bytes": self.assembler.buffered_bytes,
            }

    def clear(self, is_restarting: bool = False) -> Dict[str, Any]:
        """Discard the transcript and any recording, returning to IDLE.

        Args:
            is_restarting: True when clearing as part of ``start()``; keeps
                the freshly acquired stream and the status message
        """
        with self.lock:
            if self.is_recording:
                self._halt_collaborators()
            if not is_restarting:
                self._release_stream()

            self.store.clear()
            self.builder.reset()
            self.clock.reset()
            self.assembler.clear()
            self.artifact = None
            self.media_failed = False
            self.state = SessionState.IDLE

            self.last_error = None
            if not is_restarting:
                self.status_message = IDLE_STATUS

            logger.info("Session cleared")
            self._publish_event("cleared", restarting=is_restarting)
            self._publish_snapshot()
            return {"success": True}

    def export_bundle(self, base_filename: str = "recording") -> ExportBundle:
        """Pair the recorded media with the WebVTT transcript.

        Raises:
            EmptyExportError: If no recording is available
        """
        with self.lock:
            return build_export_bundle(self.artifact, self.store.chunks, base_filename)

    def shutdown(self) -> None:
        """Unsubscribe from all topics."""
        logger.info("Shutting down RecordingSession...")
        for listener, topic in self._subscriptions:
            try:
                pub.unsubscribe(listener, topic)
            except Exception as e:
                logger.warning(f"Error during unsubscribe from {topic}: {e}")

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_recognition_update(self, update: RecognitionUpdate) -> None:
        with self.lock:
            if self.state is SessionState.IDLE:
                logger.debug("Dropping recognition update while idle")
                return

            # A stopped recognizer may still flush finals; interim display stays cleared
            created = self.builder.process_update(update, accept_interim=self.is_recording)
            if created:
                logger.debug(f"Update produced {len(created)} chunks, total words={self.store.word_count}")
            self._publish_snapshot()

    def _on_recognition_error(self, error: RecognitionErrorEvent) -> None:
        with self.lock:
            logger.error(f"Speech recognition error: {error.code}")
            self._report_error(RecognitionError(error.code, error.message), source="recognition")

    def _on_media_data(self, event: MediaDataEvent) -> None:
        with self.lock:
            if self.state is SessionState.IDLE or self._is_stale(event):
                return
            self.assembler.add(event.data)

    def _on_media_stop(self, event: MediaStopEvent) -> None:
        with self.lock:
            if self._is_stale(event):
                logger.debug(f"Ignoring media stop from recording {event.recording_id}")
                return

            if self.state is SessionState.IDLE:
                # Session was cleared before the recorder finished flushing
                logger.debug("Discarding media flushed after clear")
                self.assembler.clear()
                self._release_stream()
                return

            if len(self.assembler) or (self.artifact is None and not self.media_failed):
                self.artifact = self.assembler.assemble(event.mime_type or self.media_backend.mime_type)
            self._release_stream()

            if self.is_recording:
                logger.warning("Media recorder stopped on its own, stopping recognition")
                self._stop_recognition()
                self.state = SessionState.STOPPED
                self.store.clear_interim()
                self._publish_snapshot()

            self.status_message = STOPPED_STATUS
            self._publish_event("media_ready", media_bytes=self.artifact.size if self.artifact else 0)

    def _on_media_error(self, event: MediaErrorEvent) -> None:
        with self.lock:
            if self._is_stale(event):
                logger.warning(f"Ignoring media error from recording {event.recording_id}: {event.message}")
                return

            logger.error(f"MediaRecorder error: {event.message}")
            self.media_failed = True

            if self.is_recording:
                self._stop_recognition()
                self.state = SessionState.STOPPED
                self.store.clear_interim()
                if len(self.assembler):
                    self.artifact = self.assembler.assemble(self.media_backend.mime_type)
                    logger.info(f"Salvaged {self.artifact.size} bytes of media")
                self._release_stream()
                self._publish_snapshot()

            self._report_error(MediaRecordingError(event.message), source="media")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _is_stale(self, event) -> bool:
        return event.recording_id is not None and event.recording_id != self.recording_id

    def _halt_collaborators(self) -> None:
        try:
            self.media_backend.stop()
        except Exception as e:
            logger.error(f"Error stopping media recorder: {e}")
        self._stop_recognition()

    def _stop_recognition(self) -> None:
        try:
            self.recognition_backend.stop()
        except Exception as e:
            logger.error(f"Error stopping recognition: {e}")

    def _release_stream(self) -> None:
        if not self.stream_held:
            return
        try:
            self.media_backend.release()
        except Exception as e:
            logger.error(f"Error releasing media stream: {e}")
        self.stream_held = False

    def _report_error(self, error: VidscribeError, source: str) -> None:
        self.last_error = error
        self.status_message = error.user_message
        self._publish_event("error", source=source, error=error.user_message)

    def _publish_event(self, event_type: str, **metadata: Any) -> None:
        metadata["state"] = self.state.value
        metadata["status"] = self.status_message
        event = SessionEvent(
            event_id=f"{event_type}-{uuid.uuid4().hex[:8]}",
            event_type=event_type,
            metadata=metadata,
        )
        pub.sendMessage(SESSION_EVENT_TOPIC, event=event)

    def _publish_snapshot(self) -> None:
        pub.sendMessage(TRANSCRIPT_CHANGED_TOPIC, snapshot=self.store.snapshot())
