"""
yt-scribe

Fetches YouTube captions through the watch page and the internal Innertube
get_transcript endpoint, and renders them as plain text, SRT or timed segments.
"""

__version__ = "0.1.0"

from .utils.logging import get_logger
from .core.video_id import extract_video_id
from .core.transcriber import YouTubeTranscriber, transcribe, list_languages
from .transcription import (
    TranscriptSegment,
    CaptionTrackInfo,
    TranscriptionResult,
    ScribeError,
    InvalidVideoIdError,
    VideoUnavailableError,
    CaptionsDisabledError,
    LanguageUnavailableError,
    TranscriptionError,
)

__all__ = [
    'get_logger',
    'extract_video_id',
    'YouTubeTranscriber',
    'transcribe',
    'list_languages',
    'TranscriptSegment',
    'CaptionTrackInfo',
    'TranscriptionResult',
    'ScribeError',
    'InvalidVideoIdError',
    'VideoUnavailableError',
    'CaptionsDisabledError',
    'LanguageUnavailableError',
    'TranscriptionError',
]
