"""Terminal transcript view observing the recording session."""

import logging
from typing import Optional
from pubsub import pub
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text
from rich.align import Align

from ..models.events import (
    SessionEvent,
    TRANSCRIPT_CHANGED_TOPIC,
    SESSION_EVENT_TOPIC,
)
from ..models.transcript import TranscriptSnapshot

logger = logging.getLogger(__name__)

CHUNK_STYLE = "grey50"
HIGHLIGHT_STYLE = "bold black on yellow"
INTERIM_STYLE = "dim italic"


class TranscriptView:
    """Renders the live transcript; holds no canonical state of its own."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.snapshot = TranscriptSnapshot()
        self.status_message = ""
        self.state = "idle"
        self.highlighted_chunk_id: Optional[str] = None

        pub.subscribe(self._on_transcript_changed, TRANSCRIPT_CHANGED_TOPIC)
        pub.subscribe(self._on_session_event, SESSION_EVENT_TOPIC)

        logger.info("TranscriptView initialized")

    def highlight(self, chunk_id: Optional[str]) -> None:
        self.highlighted_chunk_id = chunk_id

    def render(self) -> Panel:
        """Build the transcript panel."""
        body = Text()
        for chunk in self.snapshot.chunks:
            style = HIGHLIGHT_STYLE if chunk.chunk_id == self.highlighted_chunk_id else CHUNK_STYLE
            body.append(chunk.text, style=style)
        if self.snapshot.interim_text:
            body.append(self.snapshot.interim_text, style=INTERIM_STYLE)

        footer = Text.assemble(
            (f"Word Count: {self.snapshot.word_count}", "bold"),
        )
        status = Text(self.status_message, style="cyan")

        recording = self.state == "recording"
        title = Text.assemble(
            ("Video Recorder & Transcriber", "bold blue"),
            "  |  ",
            ("🔴 RECORDING" if recording else "⏹️  " + self.state.upper(),
             "bold red" if recording else "bold yellow"),
        )

        return Panel(
            Group(body, Align.right(footer), Align.center(status)),
            title=title,
            border_style="bright_blue",
        )

    def refresh(self) -> None:
        self.console.print(self.render())

    def shutdown(self) -> None:
        try:
            pub.unsubscribe(self._on_transcript_changed, TRANSCRIPT_CHANGED_TOPIC)
            pub.unsubscribe(self._on_session_event, SESSION_EVENT_TOPIC)
        except Exception as e:
            logger.warning(f"Error during unsubscribe: {e}")

    def _on_transcript_changed(self, snapshot: TranscriptSnapshot) -> None:
        self.snapshot = snapshot

    def _on_session_event(self, event: SessionEvent) -> None:
        self.state = event.metadata.get("state", self.state)
        self.status_message = event.metadata.get("status", self.status_message)
        if event.event_type == "cleared":
            self.highlighted_chunk_id = None
