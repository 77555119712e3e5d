"""
Utility modules for yt-scribe.
"""

from .logging import setup_logger, get_logger
from .formatting import (
    ms_to_srt_timestamp,
    ms_to_clock,
    format_as_text,
    format_as_timestamped_text,
    format_as_srt,
    format_as_json,
    format_segments,
    TRANSCRIPT_FORMATS,
)

__all__ = [
    'setup_logger',
    'get_logger',
    'ms_to_srt_timestamp',
    'ms_to_clock',
    'format_as_text',
    'format_as_timestamped_text',
    'format_as_srt',
    'format_as_json',
    'format_segments',
    'TRANSCRIPT_FORMATS',
]
