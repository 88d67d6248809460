"""Playback synchronisation between the recorded media and its transcript."""

import logging
from abc import ABC, abstractmethod
from typing import Optional
from pubsub import pub

from ..models.events import SessionEvent, SESSION_EVENT_TOPIC
from ..transcript.seek import SeekResolver

logger = logging.getLogger(__name__)


class AbstractPlayer(ABC):
    """Media element playing back the recorded artifact."""

    @abstractmethod
    def seek(self, time_seconds: float) -> None:
        pass

    @abstractmethod
    def play(self) -> None:
        pass

    @abstractmethod
    def pause(self) -> None:
        pass


class PlaybackController:
    """Keeps the highlighted chunk in step with the playback position."""

    def __init__(self, resolver: SeekResolver, player: AbstractPlayer):
        """Initialize playback controller.

        Args:
            resolver: Seek resolver over the session transcript
            player: Player for the recorded media
        """
        self.resolver = resolver
        self.player = player
        self.is_playing = False
        self.current_chunk_id: Optional[str] = None

        pub.subscribe(self._on_session_event, SESSION_EVENT_TOPIC)

    def on_time_update(self, time_seconds: float) -> Optional[str]:
        """Update the highlight for a new playback position.

        The previous highlight is kept when no chunk covers the position.

        Returns:
            The highlighted chunk id
        """
        chunk_id = self.resolver.find_chunk_at(time_seconds)
        if chunk_id is not None and chunk_id != self.current_chunk_id:
            logger.debug(f"Highlight {chunk_id} at {time_seconds:.3f}s")
            self.current_chunk_id = chunk_id
        return self.current_chunk_id

    def click_chunk(self, chunk_id: str) -> bool:
        """Seek to the start of a chunk and make sure playback runs."""
        start_time = self.resolver.start_time_of(chunk_id)
        if start_time is None:
            return False

        self.player.seek(start_time)
        if not self.is_playing:
            self.player.play()
            self.is_playing = True
        return True

    def toggle_play(self) -> bool:
        """Play when paused, pause when playing. Returns the new playing state."""
        if self.is_playing:
            self.player.pause()
        else:
            self.player.play()
        self.is_playing = not self.is_playing
        return self.is_playing

    def on_ended(self) -> None:
        self.is_playing = False

    def reset(self) -> None:
        """Pause, rewind and drop the highlight."""
        if self.is_playing:
            self.player.pause()
            self.is_playing = False
        self.player.seek(0.0)
        self.current_chunk_id = None

    def shutdown(self) -> None:
        try:
            pub.unsubscribe(self._on_session_event, SESSION_EVENT_TOPIC)
        except Exception as e:
            logger.warning(f"Error during unsubscribe: {e}")

    def _on_session_event(self, event: SessionEvent) -> None:
        if event.event_type == "cleared":
            self.reset()
