"""File management module for exported recordings and subtitles."""

import logging
import random
import string
from pathlib import Path
from datetime import datetime
from typing import Dict, List

from ..services.export_service import ExportBundle


logger = logging.getLogger(__name__)


class FileManager:
    """Writes export bundles, one timestamped directory per export."""

    def __init__(self, export_dir: str = "./data/exports"):
        """Initialize file manager with export directory.

        Args:
            export_dir: Base directory for storing all exports
        """
        self.export_dir = Path(export_dir)
        self.export_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"FileManager initialized with export_dir: {self.export_dir}")

    def create_export_directory(self) -> str:
        """Create new export directory with timestamp and random suffix.

        Returns:
            Export ID (timestamp-based with random suffix)
        """
        # Include random suffix to ensure uniqueness
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        random_suffix = ''.join(random.choices(string.ascii_lowercase + string.digits, k=4))
        export_id = f"{timestamp}_{random_suffix}"
        export_path = self.export_dir / export_id
        export_path.mkdir(exist_ok=True)

        logger.info(f"Created export directory: {export_path}")
        return export_id

    def save_export(self, bundle: ExportBundle) -> Dict[str, str]:
        """Write the media file and its subtitles side by side.

        Args:
            bundle: Export bundle to write

        Returns:
            Dictionary with export_id, media and subtitle file paths
        """
        export_id = self.create_export_directory()
        export_path = self.export_dir / export_id

        media_path = export_path / bundle.media_filename
        subtitle_path = export_path / bundle.subtitle_filename

        try:
            media_path.write_bytes(bundle.media_bytes)
            subtitle_path.write_text(bundle.subtitle_text, encoding='utf-8')
        except OSError as e:
            logger.error(f"Error saving export {export_id}: {e}")
            raise

        logger.info(f"Export saved: {media_path} ({len(bundle.media_bytes)} bytes), "
                    f"{subtitle_path} ({bundle.cue_count} cues)")
        return {
            "export_id": export_id,
            "media_path": str(media_path),
            "subtitle_path": str(subtitle_path),
        }

    def list_exports(self) -> List[str]:
        """List all export IDs, oldest first."""
        exports = [path.name for path in self.export_dir.iterdir() if path.is_dir()]
        exports.sort()  # Sort chronologically
        logger.debug(f"Found {len(exports)} exports")
        return exports

    def get_export_path(self, export_id: str) -> Path:
        return self.export_dir / export_id
