"""Subtitle export."""

from .webvtt import SubtitleCue, cue_text, format_time_vtt, parse_time_vtt, generate_vtt, parse_vtt

__all__ = [
    "SubtitleCue",
    "cue_text",
    "format_time_vtt",
    "parse_time_vtt",
    "generate_vtt",
    "parse_vtt",
]
