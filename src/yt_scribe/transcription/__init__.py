"""Transcript data models and error types."""

from .models import TranscriptSegment, CaptionTrackInfo, PageState, TranscriptionResult
from .errors import (
    ScribeError,
    InvalidVideoIdError,
    VideoUnavailableError,
    CaptionsDisabledError,
    LanguageUnavailableError,
    TranscriptionError,
)

__all__ = [
    "TranscriptSegment",
    "CaptionTrackInfo",
    "PageState",
    "TranscriptionResult",
    "ScribeError",
    "InvalidVideoIdError",
    "VideoUnavailableError",
    "CaptionsDisabledError",
    "LanguageUnavailableError",
    "TranscriptionError",
]
