"""WebVTT rendering and parsing for timed transcript chunks.

Timestamps are truncated to the millisecond, never rounded: ``65.2349``
renders as ``00:01:05.234`` and ``59.9999`` as ``00:00:59.999``. Truncation
works on the shortest decimal form of the float, so ``65.234`` renders as
``.234`` even though ``65.234 - 65`` is ``0.23399999...`` in binary.
"""

import html
import logging
from decimal import Decimal, ROUND_FLOOR
from dataclasses import dataclass
from typing import Iterable, List

from ..errors import SubtitleFormatError
from ..models.transcript import TimedChunk

logger = logging.getLogger(__name__)

VTT_HEADER = "WEBVTT"
CUE_ARROW = " --> "


@dataclass(frozen=True)
class SubtitleCue:
    """One timestamped entry of a subtitle document."""
    sequence_number: int
    start_time: float
    end_time: float
    text: str


def format_time_vtt(time_seconds: float) -> str:
    """Format seconds as ``HH:MM:SS.mmm`` (hours grow past two digits)."""
    total_ms = int((Decimal(repr(float(time_seconds))) * 1000).to_integral_value(rounding=ROUND_FLOOR))
    hours, remainder = divmod(total_ms, 3600 * 1000)
    minutes, remainder = divmod(remainder, 60 * 1000)
    seconds, milliseconds = divmod(remainder, 1000)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{milliseconds:03d}"


def parse_time_vtt(timestamp: str) -> float:
    """Parse ``HH:MM:SS.mmm`` (or ``MM:SS.mmm``) into seconds."""
    try:
        clock, millis = timestamp.strip().split(".")
        parts = [int(part) for part in clock.split(":")]
        if len(parts) == 2:
            parts.insert(0, 0)
        if len(parts) != 3 or len(millis) != 3:
            raise ValueError(timestamp)
        hours, minutes, seconds = parts
        return hours * 3600 + minutes * 60 + seconds + int(millis) / 1000.0
    except ValueError:
        raise SubtitleFormatError(f"Invalid WebVTT timestamp: {timestamp!r}")


def cue_text(text: str) -> str:
    """Render chunk text as a cue payload.

    Blank lines would end the cue early, so they are dropped, and markup
    characters are escaped so text such as ``-->`` cannot read as a timing line.
    """
    lines = [line.strip() for line in text.strip().splitlines()]
    return html.escape("\n".join(line for line in lines if line), quote=False)


def generate_vtt(chunks: Iterable[TimedChunk]) -> str:
    """Render chunks as a WebVTT document, one cue per chunk in order."""
    parts = [f"{VTT_HEADER}\n\n"]
    count = 0
    for index, chunk in enumerate(chunks, 1):
        parts.append(f"{index}\n")
        parts.append(f"{format_time_vtt(chunk.start_time)}{CUE_ARROW}{format_time_vtt(chunk.end_time)}\n")
        parts.append(f"{cue_text(chunk.text)}\n\n")
        count = index
    logger.debug(f"Generated WebVTT document with {count} cues")
    return "".join(parts)


def parse_vtt(content: str) -> List[SubtitleCue]:
    """Parse a WebVTT document produced by ``generate_vtt``.

    Cues with an empty text line are preserved as cues with empty text.

    Raises:
        SubtitleFormatError: If the header or a timing line is malformed
    """
    lines = content.splitlines()
    if not lines or not lines[0].startswith(VTT_HEADER):
        raise SubtitleFormatError("Missing WEBVTT header")

    cues: List[SubtitleCue] = []
    i = 1
    while i < len(lines):
        if not lines[i].strip():
            i += 1
            continue

        # Optional cue identifier before the timing line
        if CUE_ARROW.strip() not in lines[i]:
            identifier = lines[i].strip()
            i += 1
            if i >= len(lines):
                raise SubtitleFormatError(f"Cue {identifier!r} has no timing line")
        else:
            identifier = ""

        timing = lines[i]
        if CUE_ARROW.strip() not in timing:
            raise SubtitleFormatError(f"Invalid cue timing line: {timing!r}")
        start_text, end_text = timing.split(CUE_ARROW.strip(), 1)
        start_time = parse_time_vtt(start_text)
        end_time = parse_time_vtt(end_text.split()[0] if end_text.split() else end_text)
        i += 1

        text_lines = []
        while i < len(lines) and lines[i].strip():
            text_lines.append(lines[i])
            i += 1

        sequence_number = int(identifier) if identifier.isdigit() else len(cues) + 1
        cues.append(SubtitleCue(
            sequence_number=sequence_number,
            start_time=start_time,
            end_time=end_time,
            text=html.unescape("\n".join(text_lines)),
        ))

    return cues
