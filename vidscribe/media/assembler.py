"""Buffers encoded media payloads and assembles the final artifact."""

import logging
from typing import List, Optional

from ..models.session import MediaArtifact, DEFAULT_MIME_TYPE

logger = logging.getLogger(__name__)


class MediaAssembler:
    """Collects recorder payloads in arrival order."""

    def __init__(self, default_mime_type: str = DEFAULT_MIME_TYPE):
        self.default_mime_type = default_mime_type
        self.payloads: List[bytes] = []

    def __len__(self) -> int:
        return len(self.payloads)

    @property
    def buffered_bytes(self) -> int:
        return sum(len(payload) for payload in self.payloads)

    def add(self, data: bytes) -> bool:
        """Buffer a payload; empty payloads are ignored."""
        if not data:
            return False
        self.payloads.append(data)
        return True

    def assemble(self, mime_type: Optional[str] = None) -> MediaArtifact:
        """Join buffered payloads into one artifact and empty the buffer."""
        artifact = MediaArtifact(
            data=b"".join(self.payloads),
            mime_type=mime_type or self.default_mime_type,
        )
        logger.info(f"Assembled media artifact: {len(self.payloads)} payloads, "
                    f"{artifact.size} bytes ({artifact.mime_type})")
        self.payloads = []
        return artifact

    def clear(self) -> None:
        self.payloads = []
