"""Transcript-synchronised playback."""

from .controller import AbstractPlayer, PlaybackController

__all__ = ["AbstractPlayer", "PlaybackController"]
