"""Renderers for transcript segments: plain text, SRT and JSON-ready lists."""

import re
from typing import Any, Dict, List, Sequence, Union

from ..transcription.models import TranscriptSegment

TRANSCRIPT_FORMATS = ("text", "srt", "json")

_WHITESPACE_RUN = re.compile(r"\s{2,}")


def ms_to_srt_timestamp(ms: int) -> str:
    """Format milliseconds as an SRT timestamp: HH:MM:SS,mmm. Negative offsets clamp to zero."""
    ms = max(int(ms), 0)
    total_seconds = ms // 1000
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{ms % 1000:03d}"


def ms_to_clock(ms: int) -> str:
    """Format milliseconds as MM:SS; minutes keep counting past the hour."""
    minutes, seconds = divmod(max(int(ms), 0) // 1000, 60)
    return f"{minutes:02d}:{seconds:02d}"


def format_as_text(segments: Sequence[TranscriptSegment]) -> str:
    joined = " ".join(seg.text for seg in segments)
    return _WHITESPACE_RUN.sub(" ", joined).strip()


def format_as_timestamped_text(segments: Sequence[TranscriptSegment]) -> str:
    """One ``[MM:SS] text`` line per segment."""
    lines = []
    for seg in segments:
        text = _WHITESPACE_RUN.sub(" ", seg.text).strip()
        lines.append(f"[{ms_to_clock(seg.start_ms)}] {text}")
    return "\n".join(lines)


def format_as_srt(segments: Sequence[TranscriptSegment]) -> str:
    cues = []
    for index, seg in enumerate(segments, start=1):
        start = ms_to_srt_timestamp(seg.start_ms)
        end = ms_to_srt_timestamp(seg.end_ms)
        cues.append(f"{index}\n{start} --> {end}\n{seg.text}")
    return "\n\n".join(cues)


def format_as_json(segments: Sequence[TranscriptSegment]) -> List[Dict[str, Any]]:
    return [seg.to_dict() for seg in segments]


def format_segments(
    segments: Sequence[TranscriptSegment],
    output_format: str = "text",
    timestamps: bool = False,
) -> Union[str, List[Dict[str, Any]]]:
    """
    Render *segments* in the requested output format.

    Args:
        segments: Parsed transcript segments
        output_format: One of ``text``, ``srt`` or ``json``
        timestamps: Prefix each line with ``[MM:SS]``; only applies to ``text``

    Returns:
        A string for ``text``/``srt``, a list of dicts for ``json``

    Raises:
        ValueError: If the format is not supported
    """
    if output_format == "text":
        return format_as_timestamped_text(segments) if timestamps else format_as_text(segments)
    if output_format == "srt":
        return format_as_srt(segments)
    if output_format == "json":
        return format_as_json(segments)
    raise ValueError(f"Unsupported transcript format: {output_format!r} (expected one of {', '.join(TRANSCRIPT_FORMATS)})")
