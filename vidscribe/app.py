"""Application wiring for vidscribe."""

import sys
import logging
from pathlib import Path
from typing import Dict, Optional

from rich.console import Console

from .config import VidscribeConfig
from .media.base import AbstractMediaBackend
from .playback.controller import AbstractPlayer, PlaybackController
from .recognition.base import AbstractRecognitionBackend
from .services.recording_session import RecordingSession
from .storage.file_manager import FileManager
from .timeline.clock import SessionClock
from .ui.transcript_view import TranscriptView

logger = logging.getLogger(__name__)


class VidscribeApp:
    """Wires the recording session to its observers and export storage."""

    def __init__(self, config_path: Optional[str] = None):
        # Load configuration
        self.config = VidscribeConfig(config_path)
        log_level = self.config.get('logging.level', 'INFO')
        setup_logging(self.config, log_level)

        self.session: Optional[RecordingSession] = None
        self.playback: Optional[PlaybackController] = None
        self.view: Optional[TranscriptView] = None
        self.file_manager: Optional[FileManager] = None

    def init(self,
             recognition_backend: AbstractRecognitionBackend,
             media_backend: AbstractMediaBackend,
             player: Optional[AbstractPlayer] = None,
             console: Optional[Console] = None,
             clock: Optional[SessionClock] = None) -> RecordingSession:
        """Initialize services around the given collaborators.

        Raises:
            RuntimeError: If the recognition backend cannot be initialized
        """
        logger.info("Initializing services...")

        recognition_backend.language = self.config.get('recognition.language', 'en-US')
        recognition_backend.continuous = self.config.get('recognition.continuous', True)
        recognition_backend.interim_results = self.config.get('recognition.interim_results', True)
        logger.info(f"Recognition settings: language={recognition_backend.language}, "
                    f"continuous={recognition_backend.continuous}, "
                    f"interim={recognition_backend.interim_results}")

        if not recognition_backend.initialize():
            raise RuntimeError("Speech recognition backend failed to initialize")

        self.session = RecordingSession(
            recognition_backend=recognition_backend,
            media_backend=media_backend,
            clock=clock,
            default_mime_type=self.config.get('media.default_mime_type'),
        )
        self.view = TranscriptView(console)
        if player is not None:
            self.playback = PlaybackController(self.session.seek, player)
        self.file_manager = FileManager(self.config.get_export_directory())
        return self.session

    def on_time_update(self, time_seconds: float) -> Optional[str]:
        """Forward a playback position to the controller and the view."""
        if not self.playback:
            return None
        chunk_id = self.playback.on_time_update(time_seconds)
        self.view.highlight(chunk_id)
        return chunk_id

    def export(self) -> Dict[str, str]:
        """Save the current recording and its subtitles.

        Raises:
            EmptyExportError: If nothing has been recorded
        """
        base_filename = self.config.get('export.base_filename', 'recording')
        bundle = self.session.export_bundle(base_filename)
        return self.file_manager.save_export(bundle)

    def cleanup(self) -> None:
        if self.session:
            self.session.clear()
            self.session.shutdown()
            self.session.recognition_backend.cleanup()
        if self.playback:
            self.playback.shutdown()
        if self.view:
            self.view.shutdown()
        logger.info("vidscribe shut down")


def setup_logging(config: VidscribeConfig, level: str = "INFO") -> None:
    """Set up logging configuration from YAML config."""
    # Get log file path from config
    log_file_path = config.get('logging.file_path', 'data/logs/vidscribe.log')
    console_output = config.get('logging.console_output', True)

    # Create logs directory if it doesn't exist
    log_dir = Path(log_file_path).parent
    log_dir.mkdir(parents=True, exist_ok=True)

    # Set up handlers
    handlers = []

    # File handler - always write to file
    file_handler = logging.FileHandler(log_file_path)
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    )
    file_handler.setFormatter(file_formatter)
    handlers.append(file_handler)

    # Console handler - only if enabled in config
    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)  # Only show warnings and above on console
        console_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        console_handler.setFormatter(console_formatter)
        handlers.append(console_handler)

    # Configure root logger
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(getattr(logging, level.upper()))
    for handler in handlers:
        root_logger.addHandler(handler)

    logger.info("=" * 50)
    logger.info("vidscribe starting up")
    logger.info(f"Log file: {log_file_path}")
    logger.info(f"Log level set to: {level}")
    logger.info("=" * 50)
